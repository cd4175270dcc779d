"""Integration tests for the order endpoints via TestClient."""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from expirapp.app import create_app


@pytest.fixture()
def client():
    return TestClient(create_app(initialize=False))


def _product(client, name="Kefir", stock=10, price=2.5):
    response = client.post(
        "/products",
        json={
            "name": name,
            "price": price,
            "expiration_date": str(date.today() + timedelta(days=15)),
            "stock": stock,
        },
    )
    return response.json()["product_id"]


def _stock(client, product_id):
    return client.get(f"/products/{product_id}").json()["stock"]


def _place(client, items, **extra):
    return client.post("/orders", json={"client_id": "client-api", "items": items, **extra})


class TestOrderEndpoints:
    def test_place_and_get(self, client):
        p = _product(client, price=10.10)
        response = _place(client, [{"product_id": p, "quantity": 3}])
        assert response.status_code == 201

        order = client.get(f"/orders/{response.json()['order_id']}").json()
        assert order["total"] == 30.30
        assert order["items"][0]["subtotal"] == 30.30
        assert _stock(client, p) == 7

    def test_insufficient_stock_is_400(self, client):
        p = _product(client, stock=1)
        response = _place(client, [{"product_id": p, "quantity": 2}])
        assert response.status_code == 400
        assert _stock(client, p) == 1

    def test_empty_items_is_400(self, client):
        assert _place(client, []).status_code == 400

    def test_unknown_product_is_404(self, client):
        assert _place(client, [{"product_id": "ghost", "quantity": 1}]).status_code == 404

    def test_item_lifecycle(self, client):
        p = _product(client, stock=10)
        order_id = _place(client, [{"product_id": p, "quantity": 2}]).json()["order_id"]

        item_id = client.post(f"/orders/{order_id}/items", json={"product_id": p, "quantity": 1}).json()["item_id"]
        assert _stock(client, p) == 7

        assert client.patch(f"/orders/{order_id}/items/{item_id}", json={"quantity": 4}).status_code == 200
        assert _stock(client, p) == 4

        assert client.delete(f"/orders/{order_id}/items/{item_id}").status_code == 200
        assert _stock(client, p) == 8

    def test_item_of_other_order_is_400(self, client):
        p = _product(client, stock=10)
        first = _place(client, [{"product_id": p, "quantity": 1}]).json()["order_id"]
        second = _place(client, [{"product_id": p, "quantity": 1}]).json()["order_id"]
        foreign = client.get(f"/orders/{second}").json()["items"][0]["item_id"]

        response = client.patch(f"/orders/{first}/items/{foreign}", json={"quantity": 2})
        assert response.status_code == 400

    def test_delete_restores_stock(self, client):
        p = _product(client, stock=5)
        order_id = _place(client, [{"product_id": p, "quantity": 5}]).json()["order_id"]
        assert _stock(client, p) == 0

        assert client.delete(f"/orders/{order_id}").status_code == 200
        assert _stock(client, p) == 5
        assert client.get(f"/orders/{order_id}").status_code == 404

    def test_lists(self, client):
        p = _product(client, stock=10)
        _place(client, [{"product_id": p, "quantity": 1}], seller_id="seller-api")
        _place(client, [{"product_id": p, "quantity": 1}])

        assert client.get("/orders").json()["total"] == 2
        assert client.get("/orders/by-client/client-api").json()["total"] == 2
        assert client.get("/orders/by-seller/seller-api").json()["total"] == 1

    def test_update_seller(self, client):
        p = _product(client)
        order_id = _place(client, [{"product_id": p, "quantity": 1}]).json()["order_id"]
        assert client.patch(f"/orders/{order_id}", json={"seller_id": "seller-new"}).status_code == 200
        assert client.get(f"/orders/{order_id}").json()["seller_id"] == "seller-new"
