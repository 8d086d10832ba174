# app/schemas/verification.py

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class Verification(BaseModel):
    platform: str = Field(description="Platform")
    platform_username: str = Field(description="Username on the platform")
    is_verified: bool = Field(default=False, description="Confirmed by an admin")
    created_at: Optional[datetime] = Field(default=None, description="Claimed at")

    class Config:
        from_attributes = True


class VerificationCreate(BaseModel):
    platform: str = Field(description="youtube, instagram, x, tiktok or facebook")
    username: str = Field(description="Username on the platform", min_length=1, max_length=255)
