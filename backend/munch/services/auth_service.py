import hashlib
import hmac
import logging
import secrets

from sqlalchemy.orm import Session

from munch.config import settings
from munch.exceptions import DuplicateUser, InvalidCredentials, ValidationFailed
from munch.models.user import User
from munch.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)


def hash_password(password: str, salt: str = None) -> str:
    salt = salt or secrets.token_hex(16)
    key = settings.SECRET_KEY.encode("utf-8")
    msg = f"{salt}:{password}".encode("utf-8")
    return f"{salt}${hmac.new(key, msg, hashlib.sha256).hexdigest()}"


def verify_password(password: str, stored: str) -> bool:
    salt, _, _ = stored.partition("$")
    return hmac.compare_digest(hash_password(password, salt), stored)


class AuthService:
    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)

    def register(self, username: str, email: str, password: str) -> User:
        if not username or not username.strip():
            raise ValidationFailed("Username is required")
        if not email or not email.strip():
            raise ValidationFailed("Email is required")
        if not password:
            raise ValidationFailed("Password is required")
        username, email = username.strip(), email.strip()
        if self.user_repo.get_by_username(username):
            raise DuplicateUser("Username already taken")
        if self.user_repo.get_by_email(email):
            raise DuplicateUser("Email already registered")
        user = self.user_repo.insert(username, email, hash_password(password))
        self.db.commit()
        logger.info("Registered user %s", user.username)
        return user

    def login(self, username: str, password: str) -> User:
        user = self.user_repo.get_by_username((username or "").strip())
        if not user or not verify_password(password or "", user.password_hash):
            logger.info("Failed login for %s", username)
            raise InvalidCredentials("Invalid username or password")
        return user
