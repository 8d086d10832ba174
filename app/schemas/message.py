# app/schemas/message.py

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime

MAX_MESSAGE_LENGTH = 2000


class Message(BaseModel):
    message_id: int = Field(description="Message ID")
    sender_id: str = Field(description="Sender")
    receiver_id: str = Field(description="Receiver")
    content: str = Field(description="Body")
    is_read: bool = Field(default=False, description="Read by the receiver")
    created_at: Optional[datetime] = Field(default=None, description="Sent at")

    class Config:
        from_attributes = True


class MessageCreate(BaseModel):
    receiver_id: str = Field(description="Receiver user ID", min_length=1)
    content: str = Field(description="Body", min_length=1, max_length=MAX_MESSAGE_LENGTH)
