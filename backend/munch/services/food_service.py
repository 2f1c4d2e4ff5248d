import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from munch.db import SAMPLE_FOODS, smart_transaction
from munch.exceptions import ValidationFailed
from munch.models.food import Food
from munch.repositories.food_repo import FoodRepository

logger = logging.getLogger(__name__)


class FoodListService:
    def __init__(self, db: Session):
        self.db = db
        self.food_repo = FoodRepository(db)

    def list_foods(self) -> List[Food]:
        return self.food_repo.list_all()

    def _insert(
        self,
        name: str,
        price_cents: int,
        description: str = "",
        image_ref: Optional[str] = None,
    ) -> Food:
        if not name or not name.strip():
            raise ValidationFailed("Food name is required")
        if price_cents < 0:
            raise ValidationFailed("Price must not be negative")
        return self.food_repo.insert(
            name=name.strip(),
            price_cents=price_cents,
            description=description,
            image_ref=image_ref,
        )

    def add_food(
        self,
        name: str,
        price_cents: int,
        description: str = "",
        image_ref: Optional[str] = None,
    ) -> Food:
        food = self._insert(name, price_cents, description, image_ref)
        self.db.commit()
        logger.info("Added food %s (id=%s)", food.name, food.id)
        return food

    def add_foods(self, entries: Iterable[Dict]) -> List[Food]:
        """Insert every entry or none: an invalid entry rolls back the whole batch."""
        with smart_transaction(self.db):
            foods = [self._insert(**entry) for entry in entries]
        logger.info("Added %d foods", len(foods))
        return foods

    def ensure_sample_foods(self) -> List[Food]:
        """Populate an empty food list with the sample dishes, then return the list."""
        if self.food_repo.count() == 0:
            for ent in SAMPLE_FOODS:
                self.food_repo.insert(**ent)
            self.db.commit()
        return self.food_repo.list_all()
