"""
Data models for notification payloads.
"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class ContactNotification(BaseModel):
    """
    Payload handed to the notifier after a contact message is saved.
    
    Carries the stored message's fields so the notifier never has to
    touch the database.
    """
    
    id: int = Field(..., description="ID of the stored contact message")
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime
    
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 42,
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "subject": "Collaboration",
                "message": "Loved the sales dashboard project!",
                "created_at": "2026-10-19T10:30:00"
            }
        }
    )
