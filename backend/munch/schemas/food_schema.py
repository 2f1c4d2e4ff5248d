from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from munch.utils.money import format_cents


class FoodIn(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    price_cents: int = Field(..., ge=0)
    image_ref: Optional[str] = None


class FoodOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    description: str
    price_cents: int
    image_ref: Optional[str] = None

    @computed_field
    @property
    def price_display(self) -> str:
        return format_cents(self.price_cents)
