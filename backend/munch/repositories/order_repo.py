from typing import List, Optional

from sqlalchemy.orm import Session

from munch.models.order import Order


class OrderRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Order]:
        return self.db.query(Order).order_by(Order.id).all()

    def latest(self) -> Optional[Order]:
        return self.db.query(Order).order_by(Order.id.desc()).first()

    def insert(
        self, items: str, total_cents: int, user_name: str, user_address: str
    ) -> Order:
        o = Order(
            items=items,
            total_cents=total_cents,
            user_name=user_name,
            user_address=user_address,
        )
        self.db.add(o)
        self.db.flush()
        return o
