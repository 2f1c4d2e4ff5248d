from typing import Optional

from sqlalchemy.orm import Session

from munch.models.user import User


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def insert(self, username: str, email: str, password_hash: str) -> User:
        u = User(username=username, email=email, password_hash=password_hash)
        self.db.add(u)
        self.db.flush()
        return u
