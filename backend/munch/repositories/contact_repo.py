from sqlalchemy.orm import Session

from munch.models.contact import ContactMessage


class ContactRepository:
    """Write-only: contact messages are stored and never read back."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, name: str, email: str, message: str) -> ContactMessage:
        c = ContactMessage(name=name, email=email, message=message)
        self.db.add(c)
        self.db.flush()
        return c
