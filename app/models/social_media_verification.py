# app/models/social_media_verification.py

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from app.database import Base

SUPPORTED_PLATFORMS = ("youtube", "instagram", "x", "tiktok", "facebook")


class SocialMediaVerificationModel(Base):
    __tablename__ = "social_media_verifications"

    verification_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    platform = Column(String(50), nullable=False)
    platform_username = Column(String(255), nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)
    verification_token = Column(String(255), nullable=True)
    created_at = Column(DateTime, default=func.current_timestamp())

    __table_args__ = (
        UniqueConstraint("user_id", "platform", name="unique_user_platform"),
    )

    def __repr__(self):
        return (
            f"<SocialMediaVerificationModel(user_id={self.user_id}, platform='{self.platform}')>"
        )
