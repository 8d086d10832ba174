# app/models/user_friendship.py

import enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint, Enum
from sqlalchemy.sql import func
from app.database import Base


class FriendshipStatus(str, enum.Enum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"


class UserFriendshipModel(Base):
    __tablename__ = "user_friendships"

    friendship_id = Column(Integer, primary_key=True, autoincrement=True)
    requester_id = Column(
        String(255), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    )
    addressee_id = Column(
        String(255), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    )
    status = Column(
        Enum(FriendshipStatus, native_enum=False),
        default=FriendshipStatus.pending,
        nullable=False,
    )
    created_at = Column(DateTime, default=func.current_timestamp())
    updated_at = Column(DateTime, default=func.current_timestamp(), onupdate=func.current_timestamp())

    # one row per ordered pair; the reverse request is a separate row
    __table_args__ = (
        UniqueConstraint("requester_id", "addressee_id", name="unique_friendship"),
    )

    def __repr__(self):
        return (
            f"<UserFriendshipModel(requester_id={self.requester_id}, "
            f"addressee_id={self.addressee_id}, status={self.status})>"
        )
