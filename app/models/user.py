# app/models/user.py

import enum
from sqlalchemy import Column, String, Text, DateTime, Boolean, Enum
from sqlalchemy.sql import func
from app.database import Base


class CreatorApplicationStatus(str, enum.Enum):
    none = "none"
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class UserModel(Base):
    __tablename__ = "users"

    # OAuth subject
    user_id = Column(String(255), primary_key=True)
    email = Column(String(255), unique=True, nullable=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    display_name = Column(String(100), nullable=True)
    creator_name = Column(String(255), nullable=True)
    profile_image_url = Column(Text, nullable=True)
    username = Column(String(255), unique=True, nullable=True)
    youtube_handle = Column(String(255), nullable=True)
    is_creator = Column(Boolean, default=False, nullable=False)
    creator_application_status = Column(
        Enum(CreatorApplicationStatus, native_enum=False),
        default=CreatorApplicationStatus.none,
        nullable=False,
    )
    theme = Column(String(50), default="black", nullable=False)
    created_at = Column(DateTime, default=func.current_timestamp())
    updated_at = Column(DateTime, default=func.current_timestamp(), onupdate=func.current_timestamp())

    def __repr__(self):
        return f"<UserModel(id={self.user_id}, email='{self.email}')>"
