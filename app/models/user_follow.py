# app/models/user_follow.py

from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from app.database import Base


class UserFollowModel(Base):
    __tablename__ = "user_follows"

    follower_id = Column(
        String(255), ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True
    )  # the one who follows
    following_id = Column(
        String(255), ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True
    )  # the one being followed
    created_at = Column(DateTime, default=func.current_timestamp())

    __table_args__ = (UniqueConstraint("follower_id", "following_id", name="unique_follow"),)

    def __repr__(self):
        return (
            f"<UserFollowModel(follower_id={self.follower_id}, following_id={self.following_id})>"
        )
