"""Queries over live (not soft-deleted) products."""

from datetime import date, timedelta

from protean.exceptions import ObjectNotFoundError, ValidationError

from expirapp.catalogue.product.product import Product
from expirapp.domain import commerce
from expirapp.shared.pagination import Page, fetch_all, paginate


@commerce.repository(part_of=Product)
class ProductRepository:
    def _live(self):
        return self._dao.query.filter(is_deleted=False)

    def get_live(self, product_id) -> Product:
        """Fetch a product, treating soft-deleted ones as missing."""
        product = self.get(product_id)
        if product.is_deleted:
            raise ObjectNotFoundError(f"`Product` object with identifier `{product_id}` does not exist.")
        return product

    def find_by_name(self, name: str) -> Product | None:
        return self._live().filter(name=name).order_by("created_at").all().first

    def find_by_expiration_date(self, expiration_date: date) -> list[Product]:
        return fetch_all(self._live().filter(expiration_date=expiration_date).order_by("name"))

    def find_expiring_within(self, days: int, today: date | None = None) -> list[Product]:
        """Products whose expiration date falls in ``today .. today + days``, soonest first."""
        if days < 0:
            raise ValidationError({"days": ["Days must be zero or positive"]})

        start = today or date.today()
        end = start + timedelta(days=days)
        return fetch_all(
            self._live()
            .filter(expiration_date__gte=start, expiration_date__lte=end)
            .order_by("expiration_date")
        )

    def list_page(self, page: int | None = None, limit: int | None = None) -> Page:
        return paginate(self._live().order_by("created_at"), page, limit)
