def _place(client, name, price_cents, user):
    client.post("/api/cart/items", json={"name": name, "price_cents": price_cents})
    res = client.post("/api/checkout", json={"user_name": user, "user_address": "Somewhere"})
    assert res.status_code == 201
    return res.json()


def test_latest_order_404_when_none(client):
    res = client.get("/api/orders/latest")
    assert res.status_code == 404


def test_latest_order_is_highest_id(client):
    first = _place(client, "Burger", 599, "Ann")
    second = _place(client, "Pizza", 799, "Bob")
    assert second["id"] > first["id"]

    latest = client.get("/api/orders/latest").json()
    assert latest["id"] == second["id"]
    assert latest["items"] == "Pizza"
    assert latest["user_name"] == "Bob"


def test_list_orders(client):
    _place(client, "Burger", 599, "Ann")
    _place(client, "Pizza", 799, "Bob")
    items = client.get("/api/orders").json()["items"]
    assert [o["user_name"] for o in items] == ["Ann", "Bob"]
