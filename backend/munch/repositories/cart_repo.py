from typing import List

from sqlalchemy.orm import Session

from munch.models.cart_item import CartItem


class CartRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[CartItem]:
        return self.db.query(CartItem).order_by(CartItem.id).all()

    def insert(self, name: str, price_cents: int, quantity: int) -> CartItem:
        # every add is a new row; rows are never updated in place
        item = CartItem(name=name, price_cents=price_cents, quantity=quantity)
        self.db.add(item)
        self.db.flush()
        return item

    def delete(self, item_id: int) -> bool:
        it = self.db.query(CartItem).filter(CartItem.id == item_id).first()
        if not it:
            return False
        self.db.delete(it)
        self.db.flush()
        return True

    def clear(self) -> int:
        removed = self.db.query(CartItem).delete(synchronize_session=False)
        self.db.flush()
        return removed
