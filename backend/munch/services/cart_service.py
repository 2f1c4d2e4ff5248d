import logging
from typing import Iterable, List

from sqlalchemy.orm import Session

from munch.exceptions import NotFound, ValidationFailed
from munch.models.cart_item import CartItem
from munch.repositories.cart_repo import CartRepository
from munch.repositories.food_repo import FoodRepository

logger = logging.getLogger(__name__)


def total_cents(items: Iterable[CartItem]) -> int:
    return sum(it.line_total_cents for it in items)


class CartService:
    def __init__(self, db: Session):
        self.db = db
        self.cart_repo = CartRepository(db)
        self.food_repo = FoodRepository(db)

    def list_items(self) -> List[CartItem]:
        return self.cart_repo.list_all()

    def add_item(self, name: str, price_cents: int, quantity: int = 1) -> CartItem:
        if not name or not name.strip():
            raise ValidationFailed("Item name is required")
        if quantity <= 0:
            raise ValidationFailed("Quantity must be positive")
        if price_cents < 0:
            raise ValidationFailed("Price must not be negative")
        item = self.cart_repo.insert(name.strip(), price_cents, quantity)
        self.db.commit()
        logger.debug("Cart item %s added (qty=%d)", item.name, item.quantity)
        return item

    def add_food(self, food_id: int, quantity: int = 1) -> CartItem:
        food = self.food_repo.get(food_id)
        if not food:
            raise NotFound("Food not found")
        return self.add_item(food.name, food.price_cents, quantity)

    def remove_item(self, item_id: int) -> None:
        if not self.cart_repo.delete(item_id):
            raise NotFound("Cart item not found")
        self.db.commit()

    def total_cents(self, items: Iterable[CartItem] = None) -> int:
        if items is None:
            items = self.list_items()
        return total_cents(items)
