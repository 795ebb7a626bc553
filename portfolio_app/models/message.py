from sqlalchemy import Column, Integer, String, DateTime, Text
from portfolio_app.database.connection import Base, utcnow


class ContactMessage(Base):
    """Contact-form submission. Written once, never updated by the backend."""
    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    subject = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    status = Column(String, default="unread", nullable=False)
