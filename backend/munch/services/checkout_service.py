import logging
from typing import Dict

from sqlalchemy.orm import Session

from munch.db import smart_transaction
from munch.exceptions import EmptyCart, ValidationFailed
from munch.models.order import Order
from munch.repositories.cart_repo import CartRepository
from munch.repositories.order_repo import OrderRepository
from munch.services.cart_service import total_cents

logger = logging.getLogger(__name__)

ITEM_SEPARATOR = ", "


class CheckoutService:
    def __init__(self, db: Session):
        self.db = db
        self.cart_repo = CartRepository(db)
        self.order_repo = OrderRepository(db)

    def summary(self) -> Dict:
        items = self.cart_repo.list_all()
        return {"items": items, "total_cents": total_cents(items)}

    def place_order(self, user_name: str, user_address: str) -> Order:
        """
        Turn the current cart into an order row and empty the cart.

        The order stores the cart item names joined with ", " and the
        price x quantity total. Reading the cart, inserting the order and
        clearing the cart run in one transaction.
        """
        if not user_name or not user_name.strip():
            raise ValidationFailed("Name is required")
        if not user_address or not user_address.strip():
            raise ValidationFailed("Address is required")

        with smart_transaction(self.db):
            items = self.cart_repo.list_all()
            if not items:
                raise EmptyCart("Cart is empty")
            order = self.order_repo.insert(
                items=ITEM_SEPARATOR.join(it.name for it in items),
                total_cents=total_cents(items),
                user_name=user_name.strip(),
                user_address=user_address.strip(),
            )
            cleared = self.cart_repo.clear()

        logger.info(
            "Order %s placed for %s: %d cart rows, total_cents=%d",
            order.id,
            order.user_name,
            cleared,
            order.total_cents,
        )
        return order
