from typing import Optional

from sqlalchemy.orm import Session
from portfolio_app.exceptions import require_fields, storage_guard
from portfolio_app.models.message import ContactMessage


class ContactService:
    """Persists contact-form submissions"""

    def __init__(self, db: Session):
        self.db = db

    async def create_message(
        self,
        name: Optional[str],
        email: Optional[str],
        subject: Optional[str],
        message: Optional[str]
    ) -> ContactMessage:
        """
        Store a new contact message with status "unread".

        Notifying the site owner is the caller's job, after this returns,
        so a broken notifier can never lose a submission.

        Raises:
            ValidationError: any field is blank
            StorageError: the insert failed
        """
        require_fields(name=name, email=email, subject=subject, message=message)

        with storage_guard(self.db, "saving contact message"):
            contact = ContactMessage(
                name=name.strip(),
                email=email.strip(),
                subject=subject.strip(),
                message=message,
            )
            self.db.add(contact)
            self.db.commit()
            self.db.refresh(contact)

        return contact
