from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from munch.models.food import Food


class FoodRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Food]:
        return self.db.query(Food).order_by(Food.id).all()

    def get(self, food_id: int) -> Optional[Food]:
        return self.db.query(Food).filter(Food.id == food_id).first()

    def count(self) -> int:
        return self.db.query(func.count(Food.id)).scalar() or 0

    def insert(
        self,
        name: str,
        price_cents: int,
        description: str = "",
        image_ref: str = None,
    ) -> Food:
        f = Food(
            name=name,
            description=description or "",
            price_cents=price_cents,
            image_ref=image_ref,
        )
        self.db.add(f)
        self.db.flush()
        return f
