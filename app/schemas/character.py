# app/schemas/character.py

from typing import List, Optional
from pydantic import BaseModel, Field
from datetime import datetime
from app.models.user_profile import Visibility
from app.schemas.user import UserPublic


class Character(BaseModel):
    character_id: int = Field(description="Character ID")
    creator_id: str = Field(description="Owner user ID")
    name: str = Field(description="Name")
    nickname: Optional[str] = Field(default=None, description="Nickname")
    personality: Optional[str] = Field(default=None, description="Personality")
    about: Optional[str] = Field(default=None, description="About")
    avatar_url: Optional[str] = Field(default=None, description="Avatar URL")
    visibility: Visibility = Field(default=Visibility.public, description="Visibility")
    tags: List[str] = Field(default_factory=list, description="Tags, always including OC")
    likes_count: int = Field(default=0, description="Likes")
    favorites_count: int = Field(default=0, description="Favorites")
    views_count: int = Field(default=0, description="Views")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")

    class Config:
        from_attributes = True


class CharacterWithCreator(Character):
    creator: UserPublic = Field(description="Owner")


class CharacterCreate(BaseModel):
    name: str = Field(description="Name", min_length=1, max_length=255)
    nickname: Optional[str] = Field(default=None, description="Nickname", max_length=255)
    personality: Optional[str] = Field(default=None, description="Personality")
    about: Optional[str] = Field(default=None, description="About")
    avatar_url: Optional[str] = Field(default=None, description="Avatar URL")
    visibility: Visibility = Field(default=Visibility.public, description="Visibility")
    tags: List[str] = Field(default_factory=list, description="Tags")


class CharacterUpdate(BaseModel):
    name: Optional[str] = Field(default=None, description="Name", min_length=1, max_length=255)
    nickname: Optional[str] = Field(default=None, description="Nickname", max_length=255)
    personality: Optional[str] = Field(default=None, description="Personality")
    about: Optional[str] = Field(default=None, description="About")
    avatar_url: Optional[str] = Field(default=None, description="Avatar URL")
    visibility: Optional[Visibility] = Field(default=None, description="Visibility")
    tags: Optional[List[str]] = Field(default=None, description="Tags")


class LikeToggleResponse(BaseModel):
    liked: bool = Field(description="Liked after the toggle")


class FavoriteToggleResponse(BaseModel):
    favorited: bool = Field(description="Favorited after the toggle")


class CharacterStatus(BaseModel):
    liked: bool = Field(description="Liked by the caller")
    favorited: bool = Field(description="Favorited by the caller")
