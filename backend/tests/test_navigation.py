import pytest

from munch import __version__
from munch.exceptions import UnknownRouteError
from munch.navigation import SCREENS, START_DESTINATION, edit_product_route, resolve
from munch.navigation.routes import ROUT_EDIT_PRODUCT, ROUT_REGISTER


def test_start_destination_is_splash():
    assert START_DESTINATION == "splash"
    assert resolve(START_DESTINATION).links == (ROUT_REGISTER,)


def test_every_link_points_at_a_known_route():
    for screen in SCREENS.values():
        for link in screen.links:
            assert link in SCREENS, f"{screen.route} -> {link}"


def test_edit_product_route():
    assert edit_product_route(7) == "edit_product/7"
    assert resolve("edit_product/7").route == ROUT_EDIT_PRODUCT


def test_unknown_route():
    with pytest.raises(UnknownRouteError):
        resolve("nowhere")
    with pytest.raises(UnknownRouteError):
        resolve("edit_product/")


def test_navigation_api(client):
    body = client.get("/api/navigation").json()
    assert body["start_destination"] == "splash"
    routes = {s["route"] for s in body["screens"]}
    assert {"cart", "checkout", "orderconfirmaation", "Login"} <= routes

    res = client.get("/api/navigation/dashboard")
    assert res.status_code == 200
    assert res.json()["links"] == ["home", "about", "contact", "item"]

    assert client.get("/api/navigation/edit_product/3").json()["title"] == "Edit Product"
    assert client.get("/api/navigation/missing").status_code == 404


def test_static_screens(client):
    splash = client.get("/api/screens/splash").json()
    assert splash["next"] == "Register"
    assert splash["delay_ms"] == 2000

    assert client.get("/api/screens/start").json()["action"]["route"] == "dashboard"
    cards = client.get("/api/screens/dashboard").json()["cards"]
    assert [c["route"] for c in cards] == ["home", "about", "contact", "item"]
    assert client.get("/api/screens/about").json()["version"] == __version__
