import logging

from sqlalchemy.orm import Session

from munch.exceptions import ValidationFailed
from munch.models.contact import ContactMessage
from munch.repositories.contact_repo import ContactRepository

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Message sent successfully!"


class ContactService:
    def __init__(self, db: Session):
        self.db = db
        self.contact_repo = ContactRepository(db)

    def save_contact(self, name: str, email: str, message: str) -> ContactMessage:
        for field, value in (("name", name), ("email", email), ("message", message)):
            if not value or not value.strip():
                raise ValidationFailed(f"Field '{field}' is required")
        c = self.contact_repo.insert(name.strip(), email.strip(), message.strip())
        self.db.commit()
        logger.info("Contact message %s stored", c.id)
        return c
