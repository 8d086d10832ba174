# app/schemas/creator.py

from typing import List, Literal, Optional
from pydantic import BaseModel, Field
from app.models.user import CreatorApplicationStatus
from app.schemas.user import UserPublic
from app.schemas.verification import Verification


class CreatorApplication(BaseModel):
    application_type: Literal["youtube", "email"] = Field(
        description="Derive the creator identity from a YouTube handle or the account email"
    )
    youtube_handle: Optional[str] = Field(default=None, description="YouTube handle, e.g. @lyra")
    display_name: Optional[str] = Field(default=None, description="New display name")


class CreatorStatus(BaseModel):
    status: CreatorApplicationStatus = Field(description="Application status")
    is_creator: bool = Field(description="Creator badge granted")


class FeaturedCreator(UserPublic):
    character_count: int = Field(default=0, description="Characters created")
    verifications: List[Verification] = Field(default_factory=list)
