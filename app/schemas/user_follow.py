# app/schemas/user_follow.py

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class FollowStatus(BaseModel):
    following: bool = Field(description="Whether the caller follows the user")


class FollowUser(BaseModel):
    user_id: str = Field(description="User ID")
    username: Optional[str] = Field(default=None, description="Username")
    display_name: Optional[str] = Field(default=None, description="Display name")
    profile_image_url: Optional[str] = Field(default=None, description="Profile image URL")
    is_creator: bool = Field(default=False, description="Creator badge")
    is_following: bool = Field(description="Whether the caller follows this user")
    created_at: Optional[datetime] = Field(default=None, description="Followed at")


class FollowListResponse(BaseModel):
    users: list[FollowUser] = Field(description="Users")
    total: int = Field(description="Total users")
