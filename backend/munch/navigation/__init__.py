from munch.navigation.graph import SCREENS, START_DESTINATION, Screen, all_screens, resolve
from munch.navigation.routes import edit_product_route

__all__ = [
    "SCREENS",
    "START_DESTINATION",
    "Screen",
    "all_screens",
    "edit_product_route",
    "resolve",
]
