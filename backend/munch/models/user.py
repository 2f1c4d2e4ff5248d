from sqlalchemy import Column, Integer, String

from munch.db import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(128), unique=True, index=True, nullable=False)
    email = Column(String(256), unique=True, index=True, nullable=False)
    # "<salt hex>$<hmac-sha256 hex>"
    password_hash = Column(String(256), nullable=False)

    def __repr__(self):
        return f"<User username={self.username}>"
