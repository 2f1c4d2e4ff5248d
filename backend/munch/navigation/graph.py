"""
Static navigation table.

Every route maps to a Screen with a title and the routes it links to. The
links describe what a screen offers; nothing checks that a client follows
them.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from munch.exceptions import UnknownRouteError
from munch.navigation.routes import (
    ROUT_ABOUT,
    ROUT_ADD_PRODUCT,
    ROUT_CART,
    ROUT_CHECKOUT,
    ROUT_CONTACT,
    ROUT_DASHBOARD,
    ROUT_EDIT_PRODUCT,
    ROUT_FOODLIST,
    ROUT_HOME,
    ROUT_ITEM,
    ROUT_LOGIN,
    ROUT_ORDERCONFIRMATION,
    ROUT_PRODUCT_LIST,
    ROUT_REGISTER,
    ROUT_SPLASH,
    ROUT_START,
)

START_DESTINATION = ROUT_SPLASH


@dataclass(frozen=True)
class Screen:
    route: str
    title: str
    links: Tuple[str, ...] = field(default_factory=tuple)
    # API resource backing the screen, if any
    resource: Optional[str] = None

    def as_dict(self) -> Dict:
        return {
            "route": self.route,
            "title": self.title,
            "links": list(self.links),
            "resource": self.resource,
        }


SCREENS: Dict[str, Screen] = {
    s.route: s
    for s in (
        Screen(ROUT_SPLASH, "Splash", (ROUT_REGISTER,), "/api/screens/splash"),
        Screen(ROUT_REGISTER, "Register", (ROUT_LOGIN,), "/api/auth/register"),
        Screen(ROUT_LOGIN, "Login", (ROUT_HOME,), "/api/auth/login"),
        Screen(ROUT_START, "Start", (ROUT_DASHBOARD,), "/api/screens/start"),
        Screen(
            ROUT_DASHBOARD,
            "Dashboard",
            (ROUT_HOME, ROUT_ABOUT, ROUT_CONTACT, ROUT_ITEM),
            "/api/screens/dashboard",
        ),
        Screen(ROUT_HOME, "Home", (ROUT_ITEM, ROUT_CHECKOUT), "/api/foods"),
        Screen(ROUT_FOODLIST, "Food List", (ROUT_CART,), "/api/foods"),
        Screen(ROUT_ITEM, "Products", (ROUT_CART,), "/api/foods"),
        Screen(ROUT_CART, "Cart", (ROUT_CHECKOUT,), "/api/cart"),
        Screen(ROUT_CHECKOUT, "Checkout", (ROUT_ORDERCONFIRMATION,), "/api/checkout"),
        Screen(
            ROUT_ORDERCONFIRMATION,
            "Order Confirmation",
            (ROUT_HOME, ROUT_CHECKOUT),
            "/api/orders/latest",
        ),
        Screen(ROUT_ABOUT, "About", (), "/api/screens/about"),
        Screen(ROUT_CONTACT, "Contact", (), "/api/contact"),
        Screen(ROUT_ADD_PRODUCT, "Add Product"),
        Screen(ROUT_PRODUCT_LIST, "Product List"),
        Screen(ROUT_EDIT_PRODUCT, "Edit Product"),
    )
}


def _match_template(template: str, route: str) -> bool:
    t_parts, r_parts = template.split("/"), route.split("/")
    if len(t_parts) != len(r_parts):
        return False
    for t, r in zip(t_parts, r_parts):
        if t.startswith("{") and t.endswith("}"):
            if not r:
                return False
        elif t != r:
            return False
    return True


def resolve(route: str) -> Screen:
    """Look up the screen for `route`, matching `{param}` templates too."""
    screen = SCREENS.get(route)
    if screen is not None:
        return screen
    for template, s in SCREENS.items():
        if "{" in template and _match_template(template, route):
            return s
    raise UnknownRouteError(f"Unknown route: {route}")


def all_screens() -> List[Screen]:
    return list(SCREENS.values())
