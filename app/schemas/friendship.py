# app/schemas/friendship.py

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime
from app.models.user_friendship import FriendshipStatus
from app.schemas.user import UserPublic


class Friendship(BaseModel):
    friendship_id: int = Field(description="Friendship ID")
    requester_id: str = Field(description="Who sent the request")
    addressee_id: str = Field(description="Who received the request")
    status: FriendshipStatus = Field(description="pending, accepted or rejected")
    created_at: Optional[datetime] = Field(default=None, description="Requested at")
    updated_at: Optional[datetime] = Field(default=None, description="Last transition")

    class Config:
        from_attributes = True


class FriendRequest(Friendship):
    requester: UserPublic = Field(description="Requester profile")
