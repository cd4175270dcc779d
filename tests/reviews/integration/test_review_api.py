"""Integration tests for the review endpoints via TestClient."""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from expirapp.app import create_app


@pytest.fixture()
def client():
    return TestClient(create_app(initialize=False))


@pytest.fixture()
def product_id(client):
    response = client.post(
        "/products",
        json={"name": "Camembert", "price": 6.0, "expiration_date": str(date.today() + timedelta(days=12))},
    )
    return response.json()["product_id"]


def _submit(client, product_id, client_id="client-api", rating=4, **extra):
    return client.post(
        "/reviews",
        json={"product_id": product_id, "client_id": client_id, "rating": rating, **extra},
    )


class TestReviewEndpoints:
    def test_submit_and_get(self, client, product_id):
        response = _submit(client, product_id, comment="Ripe")
        assert response.status_code == 201
        review_id = response.json()["review_id"]

        body = client.get(f"/reviews/{review_id}").json()
        assert body["rating"] == 4
        assert body["comment"] == "Ripe"
        assert body["product_id"] == product_id

    def test_rating_out_of_range_returns_422(self, client, product_id):
        assert _submit(client, product_id, rating=6).status_code == 422

    def test_duplicate_returns_400(self, client, product_id):
        _submit(client, product_id)
        assert _submit(client, product_id).status_code == 400

    def test_unknown_product_returns_404(self, client):
        assert _submit(client, "missing").status_code == 404

    def test_edit_and_remove(self, client, product_id):
        review_id = _submit(client, product_id).json()["review_id"]

        assert client.patch(f"/reviews/{review_id}", json={"rating": 2}).status_code == 200
        assert client.get(f"/reviews/{review_id}").json()["rating"] == 2

        assert client.delete(f"/reviews/{review_id}").status_code == 200
        assert client.get(f"/reviews/{review_id}").status_code == 404

    def test_product_listing_and_summary(self, client, product_id):
        _submit(client, product_id, client_id="a", rating=5)
        _submit(client, product_id, client_id="b", rating=3)

        listing = client.get(f"/reviews/by-product/{product_id}").json()
        assert listing["total"] == 2

        summary = client.get(f"/reviews/by-product/{product_id}/summary").json()
        assert summary == {"product_id": product_id, "average_rating": 4.0, "review_count": 2}

        assert client.get("/reviews").json()["total"] == 2
