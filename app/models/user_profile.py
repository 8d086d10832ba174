# app/models/user_profile.py

import enum
from sqlalchemy import Column, String, DateTime, ForeignKey, Enum
from sqlalchemy.sql import func
from app.database import Base


class Visibility(str, enum.Enum):
    public = "public"
    restricted = "restricted"
    private = "private"


class UserProfileModel(Base):
    __tablename__ = "user_profiles"

    user_id = Column(
        String(255), ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True
    )
    profile_visibility = Column(
        Enum(Visibility, native_enum=False), default=Visibility.public, nullable=False
    )
    updated_at = Column(DateTime, default=func.current_timestamp(), onupdate=func.current_timestamp())

    def __repr__(self):
        return f"<UserProfileModel(user_id={self.user_id}, visibility={self.profile_visibility})>"
