"""Repository queries over the product catalogue."""

from datetime import date, timedelta

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from expirapp.catalogue.product.details import RemoveProduct
from expirapp.catalogue.product.product import Product


@pytest.fixture()
def repo():
    return current_domain.repository_for(Product)


class TestFindByName:
    def test_exact_match(self, add_product, repo):
        product_id = add_product(name="Cheddar")
        add_product(name="Cheddar Mature")
        assert str(repo.find_by_name("Cheddar").id) == product_id

    def test_partial_name_does_not_match(self, add_product, repo):
        add_product(name="Cheddar Mature")
        assert repo.find_by_name("Cheddar") is None

    def test_removed_products_are_skipped(self, add_product, repo):
        product_id = add_product(name="Feta")
        current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
        assert repo.find_by_name("Feta") is None


class TestExpirationQueries:
    def test_find_by_expiration_date(self, add_product, repo):
        target = date.today() + timedelta(days=3)
        add_product(name="A", expiration_date=target)
        add_product(name="B", expiration_date=target + timedelta(days=1))

        found = repo.find_by_expiration_date(target)
        assert [p.name for p in found] == ["A"]

    def test_expiring_window_is_inclusive(self, add_product, repo):
        today = date.today()
        add_product(name="today", expiration_date=today)
        add_product(name="edge", expiration_date=today + timedelta(days=7))
        add_product(name="later", expiration_date=today + timedelta(days=8))
        add_product(name="expired", expiration_date=today - timedelta(days=1))

        found = repo.find_expiring_within(7)
        assert [p.name for p in found] == ["today", "edge"]

    def test_zero_days_means_today_only(self, add_product, repo):
        today = date.today()
        add_product(name="today", expiration_date=today)
        add_product(name="tomorrow", expiration_date=today + timedelta(days=1))

        assert [p.name for p in repo.find_expiring_within(0)] == ["today"]

    def test_negative_days_are_rejected(self, repo):
        with pytest.raises(ValidationError):
            repo.find_expiring_within(-1)


class TestListPage:
    def test_pages_through_live_products(self, add_product, repo):
        for i in range(3):
            add_product(name=f"Product {i}")

        page = repo.list_page(page=1, limit=2)
        assert page.total == 3
        assert len(page.items) == 2
        assert page.page == 1
        assert page.limit == 2

        second = repo.list_page(page=2, limit=2)
        assert len(second.items) == 1

    def test_out_of_range_paging_is_normalized(self, add_product, repo):
        add_product()
        page = repo.list_page(page=0, limit=500)
        assert page.page == 1
        assert page.limit == 10
        assert page.total == 1
