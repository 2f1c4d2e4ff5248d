from sqlalchemy import Column, Integer, String, Text

from munch.db import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # comma-joined item names, not a relation to cart rows
    items = Column(Text, nullable=False, default="")
    total_cents = Column(Integer, nullable=False, default=0)
    user_name = Column(String(256), nullable=False)
    user_address = Column(String(512), nullable=False)
