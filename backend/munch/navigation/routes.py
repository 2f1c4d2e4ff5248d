ROUT_HOME = "home"
ROUT_SPLASH = "splash"
ROUT_CART = "cart"
ROUT_FOODLIST = "fooodlist"
ROUT_ORDERCONFIRMATION = "orderconfirmaation"
ROUT_CHECKOUT = "checkout"
ROUT_ITEM = "item"
ROUT_DASHBOARD = "dashboard"
ROUT_START = "start"
ROUT_ABOUT = "about"
ROUT_CONTACT = "contact"

# auth
ROUT_REGISTER = "Register"
ROUT_LOGIN = "Login"

# products
ROUT_ADD_PRODUCT = "add_product"
ROUT_PRODUCT_LIST = "product_list"
ROUT_EDIT_PRODUCT = "edit_product/{productId}"


def edit_product_route(product_id: int) -> str:
    return ROUT_EDIT_PRODUCT.replace("{productId}", str(product_id))
