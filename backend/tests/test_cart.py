from munch.models.cart_item import CartItem
from munch.services.cart_service import CartService, total_cents


def test_add_item_then_list_returns_it(client):
    res = client.post(
        "/api/cart/items", json={"name": "Burger", "price_cents": 599, "quantity": 2}
    )
    assert res.status_code == 201
    item_id = res.json()["id"]

    body = client.get("/api/cart").json()
    assert [it["id"] for it in body["items"]] == [item_id]
    assert body["items"][0]["quantity"] == 2
    assert body["total_cents"] == 1198
    assert body["total_display"] == "$11.98"


def test_add_food_by_id(client, sample_foods):
    pizza = sample_foods[1]
    res = client.post("/api/cart/items", json={"food_id": pizza["id"], "quantity": 3})
    assert res.status_code == 201
    assert res.json()["name"] == "Pizza"
    assert client.get("/api/cart").json()["total_cents"] == 3 * 799


def test_add_unknown_food_is_404(client):
    res = client.post("/api/cart/items", json={"food_id": 999})
    assert res.status_code == 404


def test_add_requires_food_or_name(client):
    res = client.post("/api/cart/items", json={"quantity": 1})
    assert res.status_code == 422


def test_add_rejects_zero_quantity(client):
    res = client.post(
        "/api/cart/items", json={"name": "Burger", "price_cents": 599, "quantity": 0}
    )
    assert res.status_code == 422


def test_same_item_twice_makes_two_rows(client):
    for _ in range(2):
        client.post("/api/cart/items", json={"name": "Burger", "price_cents": 599})
    items = client.get("/api/cart").json()["items"]
    assert len(items) == 2
    assert items[0]["id"] != items[1]["id"]


def test_remove_item(client):
    item_id = client.post(
        "/api/cart/items", json={"name": "Burger", "price_cents": 599}
    ).json()["id"]
    res = client.delete(f"/api/cart/items/{item_id}")
    assert res.status_code == 200
    assert client.get("/api/cart").json()["items"] == []

    res = client.delete(f"/api/cart/items/{item_id}")
    assert res.status_code == 404


def test_total_cents_sums_price_times_quantity():
    items = [
        CartItem(name="a", price_cents=599, quantity=2),
        CartItem(name="b", price_cents=799, quantity=1),
    ]
    assert total_cents(items) == 1997
    assert total_cents([]) == 0


def test_service_total_defaults_to_stored_items(db):
    svc = CartService(db)
    svc.add_item("Burger", 599, 1)
    svc.add_item("Pizza", 799, 2)
    assert svc.total_cents() == 599 + 2 * 799
