# app/models/user_block.py

from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from app.database import Base


class UserBlockModel(Base):
    __tablename__ = "user_blocks"

    blocker_id = Column(
        String(255), ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True
    )
    blocked_id = Column(
        String(255), ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True
    )
    created_at = Column(DateTime, default=func.current_timestamp())

    __table_args__ = (UniqueConstraint("blocker_id", "blocked_id", name="unique_block"),)

    def __repr__(self):
        return f"<UserBlockModel(blocker_id={self.blocker_id}, blocked_id={self.blocked_id})>"
