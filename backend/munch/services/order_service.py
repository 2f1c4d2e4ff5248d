from typing import List

from sqlalchemy.orm import Session

from munch.exceptions import NotFound
from munch.models.order import Order
from munch.repositories.order_repo import OrderRepository


class OrderConfirmationService:
    def __init__(self, db: Session):
        self.db = db
        self.order_repo = OrderRepository(db)

    def latest_order(self) -> Order:
        order = self.order_repo.latest()
        if order is None:
            raise NotFound("No orders placed yet")
        return order

    def list_orders(self) -> List[Order]:
        return self.order_repo.list_all()
