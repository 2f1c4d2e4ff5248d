from pydantic import BaseModel, ConfigDict, computed_field

from munch.utils.money import format_cents


class PlaceOrderIn(BaseModel):
    user_name: str
    user_address: str


class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    items: str
    total_cents: int
    user_name: str
    user_address: str

    @computed_field
    @property
    def total_display(self) -> str:
        return format_cents(self.total_cents)
