from sqlalchemy import Column, Integer, String, Text

from munch.db import Base


class Food(Base):
    __tablename__ = "foods"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=False, default="")
    price_cents = Column(Integer, nullable=False, default=0)
    image_ref = Column(String(512), nullable=True)

    def __repr__(self):
        return f"<Food id={self.id} name={self.name}>"
