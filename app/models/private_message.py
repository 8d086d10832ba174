# app/models/private_message.py

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class PrivateMessageModel(Base):
    __tablename__ = "private_messages"

    message_id = Column(Integer, primary_key=True, autoincrement=True)
    sender_id = Column(
        String(255), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    receiver_id = Column(
        String(255), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    content = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=func.current_timestamp())

    def __repr__(self):
        return (
            f"<PrivateMessageModel(id={self.message_id}, sender_id={self.sender_id}, "
            f"receiver_id={self.receiver_id})>"
        )
