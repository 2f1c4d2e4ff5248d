from sqlalchemy import Column, Integer, String

from munch.db import Base


class CartItem(Base):
    __tablename__ = "cart"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), nullable=False)
    price_cents = Column(Integer, nullable=False, default=0)
    quantity = Column(Integer, nullable=False, default=1)

    @property
    def line_total_cents(self) -> int:
        return self.price_cents * self.quantity
