"""Integration tests for the cart API via TestClient."""

from decimal import Decimal


def _create_cart(client):
    response = client.post("/api/cart")
    assert response.status_code == 201
    return response.json()["cart_id"]


def _add_item(client, cart_id, product_id="prod-001", quantity=1, **selectors):
    return client.post(
        f"/api/cart/{cart_id}/items",
        json={"product_id": product_id, "quantity": quantity, **selectors},
    )


def _money(value):
    return Decimal(value)


class TestCreateCartEndpoint:
    def test_create_cart(self, client):
        response = client.post("/api/cart")
        body = response.json()
        assert response.status_code == 201
        assert body["cart"]["items"] == []
        assert _money(body["cart"]["total"]) == 0
        assert body["cart"]["currency"] == "USD"

    def test_get_unknown_cart(self, client):
        assert client.get("/api/cart/missing").status_code == 404


class TestCartItemEndpoints:
    def test_end_to_end_totals(self, client):
        cart_id = _create_cart(client)
        _add_item(client, cart_id, "prod-001", 2, size="M")
        response = _add_item(client, cart_id, "prod-002", 1, size="L")
        assert response.status_code == 200

        cart = response.json()["cart"]
        assert _money(cart["subtotal"]) == Decimal("150")
        assert _money(cart["tax"]) == Decimal("15")
        assert _money(cart["shipping"]) == 0
        assert _money(cart["total"]) == Decimal("165")
        assert cart["count"] == 3

        response = client.delete(f"/api/cart/{cart_id}/items/prod-001", params={"size": "M"})
        cart = response.json()["cart"]
        assert _money(cart["subtotal"]) == Decimal("90")
        assert _money(cart["shipping"]) == Decimal("10")
        assert _money(cart["total"]) == Decimal("109")

    def test_state_persists_between_requests(self, client):
        cart_id = _create_cart(client)
        _add_item(client, cart_id, "prod-004", 2)
        cart = client.get(f"/api/cart/{cart_id}").json()["cart"]
        assert cart["items"][0]["product_id"] == "prod-004"
        assert cart["items"][0]["quantity"] == 2
        assert cart["items"][0]["product"]["name"] == "Canvas Tote Bag"

    def test_add_merges_same_slot(self, client):
        cart_id = _create_cart(client)
        _add_item(client, cart_id, "prod-001", 2, size="S", color="black")
        cart = _add_item(client, cart_id, "prod-001", 3, size="S", color="black").json()["cart"]
        assert len(cart["items"]) == 1
        assert cart["items"][0]["quantity"] == 5

    def test_add_unknown_product(self, client):
        cart_id = _create_cart(client)
        assert _add_item(client, cart_id, "prod-999").status_code == 404

    def test_add_to_unknown_cart(self, client):
        assert _add_item(client, "missing").status_code == 404

    def test_add_invalid_quantity(self, client):
        cart_id = _create_cart(client)
        response = _add_item(client, cart_id, "prod-004", 0)
        assert response.status_code == 400
        assert client.get(f"/api/cart/{cart_id}").json()["cart"]["items"] == []

    def test_add_unoffered_size(self, client):
        cart_id = _create_cart(client)
        assert _add_item(client, cart_id, "prod-001", 1, size="XXS").status_code == 400

    def test_update_quantity_clamps(self, client):
        cart_id = _create_cart(client)
        _add_item(client, cart_id, "prod-004", 3)
        response = client.put(f"/api/cart/{cart_id}/items/prod-004", json={"quantity": 0})
        assert response.status_code == 200
        assert response.json()["cart"]["items"][0]["quantity"] == 1

    def test_update_missing_item_is_noop(self, client):
        cart_id = _create_cart(client)
        response = client.put(f"/api/cart/{cart_id}/items/prod-004", json={"quantity": 2})
        assert response.status_code == 200
        assert response.json()["cart"]["items"] == []

    def test_remove_twice(self, client):
        cart_id = _create_cart(client)
        _add_item(client, cart_id, "prod-004", 1)
        first = client.delete(f"/api/cart/{cart_id}/items/prod-004")
        second = client.delete(f"/api/cart/{cart_id}/items/prod-004")
        assert first.status_code == second.status_code == 200
        assert first.json()["cart"] == second.json()["cart"]

    def test_removing_last_item_keeps_flat_shipping(self, client):
        cart_id = _create_cart(client)
        _add_item(client, cart_id, "prod-004", 1)
        client.delete(f"/api/cart/{cart_id}/items/prod-004")
        cart = client.get(f"/api/cart/{cart_id}").json()["cart"]
        assert cart["items"] == []
        assert _money(cart["shipping"]) == Decimal("10")
        assert _money(cart["total"]) == Decimal("10")

    def test_clear_cart(self, client):
        cart_id = _create_cart(client)
        _add_item(client, cart_id, "prod-002", 2, size="M")
        cart = client.delete(f"/api/cart/{cart_id}").json()["cart"]
        assert cart["items"] == []
        for field in ("subtotal", "tax", "shipping", "total"):
            assert _money(cart[field]) == 0


class TestMaintenanceEndpoint:
    def test_negative_age_rejected(self, client):
        cart_id = _create_cart(client)
        response = client.post("/api/cart/maintenance/cleanup", params={"max_age_hours": -1})
        assert response.status_code == 422
        assert client.get(f"/api/cart/{cart_id}").status_code == 200

    def test_zero_age_rejected(self, client):
        cart_id = _create_cart(client)
        response = client.post("/api/cart/maintenance/cleanup", params={"max_age_hours": 0})
        assert response.status_code == 422
        assert client.get(f"/api/cart/{cart_id}").status_code == 200

    def test_explicit_age_keeps_fresh_carts(self, client):
        cart_id = _create_cart(client)
        response = client.post("/api/cart/maintenance/cleanup", params={"max_age_hours": 1})
        assert response.json() == {"removed": 0}
        assert client.get(f"/api/cart/{cart_id}").status_code == 200

    def test_cleanup_keeps_fresh_carts(self, client):
        cart_id = _create_cart(client)
        response = client.post("/api/cart/maintenance/cleanup")
        assert response.status_code == 200
        assert response.json() == {"removed": 0}
        assert client.get(f"/api/cart/{cart_id}").status_code == 200


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"
