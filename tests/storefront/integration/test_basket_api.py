"""Integration tests for basket endpoints via TestClient."""

import json
from uuid import UUID

from protean import current_domain

from storefront.basket.basket import Basket


def _add(client, catalog_item_id, quantity=1, headers=None):
    response = client.post(
        "/basket/items",
        json={"catalog_item_id": catalog_item_id, "quantity": quantity},
        headers=headers,
    )
    assert response.status_code == 200
    return response.json()


class TestAnonymousIdentity:
    def test_first_visit_issues_cookie(self, client):
        response = client.get("/basket")

        assert response.status_code == 200
        token = response.cookies.get("basket_owner")
        assert UUID(token)
        assert response.json()["buyer_id"] == token
        set_cookie = response.headers["set-cookie"].lower()
        assert "httponly" in set_cookie
        assert "expires=" in set_cookie

    def test_returning_visitor_keeps_basket(self, client):
        first = client.get("/basket").json()
        second = client.get("/basket")

        assert second.json()["id"] == first["id"]
        assert "set-cookie" not in second.headers

    def test_malformed_cookie_is_replaced(self, client):
        response = client.get("/basket", headers={"Cookie": "basket_owner=not-a-token"})

        assert response.json()["buyer_id"] != "not-a-token"
        assert UUID(response.cookies.get("basket_owner"))

    def test_signed_in_shopper_gets_no_cookie(self, client, signed_in):
        response = client.get("/basket", headers=signed_in())

        assert response.json()["buyer_id"] == "alice@example.com"
        assert "set-cookie" not in response.headers


class TestBasketItems:
    def test_add_item_uses_catalog_price(self, client, catalog):
        body = _add(client, catalog["A"], quantity=2)

        assert body["items"][0]["catalog_item_id"] == catalog["A"]
        assert body["items"][0]["unit_price"] == 10.0
        assert body["total"] == 20.0

    def test_add_item_publishes_snapshot(self, client, catalog, fake_channels):
        body = _add(client, catalog["A"])

        message = json.loads(fake_channels["queue"].published[0])
        assert message["id"] == body["id"]
        assert message["buyerId"] == body["buyer_id"]

    def test_unknown_catalog_item_is_404(self, client):
        response = client.post("/basket/items", json={"catalog_item_id": "missing"})
        assert response.status_code == 404
        assert response.json()["errors"]

    def test_zero_quantity_is_422(self, client, catalog):
        response = client.post("/basket/items", json={"catalog_item_id": catalog["A"], "quantity": 0})
        assert response.status_code == 422

    def test_update_quantities(self, client, catalog):
        line_id = _add(client, catalog["A"])["items"][0]["id"]
        _add(client, catalog["B"])

        response = client.put("/basket/items", json={"items": [{"id": line_id, "quantity": 0}]})

        assert response.status_code == 200
        items = response.json()["items"]
        assert [i["catalog_item_id"] for i in items] == [catalog["B"]]


class TestTransfer:
    def test_anonymous_basket_moves_on_sign_in(self, client, catalog, signed_in):
        anonymous = _add(client, catalog["A"], quantity=2)

        response = client.post("/basket/transfer", headers=signed_in())

        assert response.status_code == 200
        body = response.json()
        assert body["buyer_id"] == "alice@example.com"
        assert body["items"][0]["quantity"] == 2
        assert current_domain.repository_for(Basket).for_owner(anonymous["buyer_id"]) is None
        assert 'basket_owner=""' in response.headers["set-cookie"]

    def test_requires_sign_in(self, client):
        assert client.post("/basket/transfer").status_code == 401
