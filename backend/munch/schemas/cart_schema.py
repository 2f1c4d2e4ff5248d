from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from munch.utils.money import format_cents


class AddCartItemIn(BaseModel):
    """Either a food id from the catalogue or a free-form name and price."""

    food_id: Optional[int] = None
    name: Optional[str] = None
    price_cents: Optional[int] = Field(None, ge=0)
    quantity: int = Field(1, gt=0)

    @model_validator(mode="after")
    def _food_or_name(self):
        if self.food_id is None and (not self.name or self.price_cents is None):
            raise ValueError("Provide food_id, or name and price_cents")
        return self


class CartItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    price_cents: int
    quantity: int


class CartOut(BaseModel):
    items: List[CartItemOut]
    total_cents: int

    @computed_field
    @property
    def total_display(self) -> str:
        return format_cents(self.total_cents)
