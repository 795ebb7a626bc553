from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class ContactCreate(BaseModel):
    # Blank/missing fields are rejected by ContactService, not by pydantic
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class ContactMessageResponse(BaseModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime
    status: str

    model_config = ConfigDict(from_attributes=True)


class ContactSubmitted(BaseModel):
    id: int
    success: bool = True
    message: str = "Message sent successfully!"
