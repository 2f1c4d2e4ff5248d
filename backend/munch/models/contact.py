from sqlalchemy import Column, Integer, String, Text

from munch.db import Base


class ContactMessage(Base):
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), nullable=False)
    email = Column(String(256), nullable=False)
    message = Column(Text, nullable=False)
