# app/schemas/user.py

from typing import List, Literal, Optional
from pydantic import BaseModel, Field
from datetime import datetime
from app.models.user import CreatorApplicationStatus
from app.models.user_profile import Visibility
from app.schemas.verification import Verification

Theme = Literal["black", "white", "midnight", "neon", "pinky", "bob"]


class UserPublic(BaseModel):
    """Profile fields anyone may see"""

    user_id: str = Field(description="User ID")
    username: Optional[str] = Field(default=None, description="Username")
    first_name: Optional[str] = Field(default=None, description="First name")
    last_name: Optional[str] = Field(default=None, description="Last name")
    display_name: Optional[str] = Field(default=None, description="Display name")
    creator_name: Optional[str] = Field(default=None, description="Creator name")
    profile_image_url: Optional[str] = Field(default=None, description="Profile image URL")
    youtube_handle: Optional[str] = Field(default=None, description="YouTube handle")
    is_creator: bool = Field(default=False, description="Verified creator badge")
    created_at: Optional[datetime] = Field(default=None, description="Joined at")

    class Config:
        from_attributes = True


class User(UserPublic):
    """The signed-in user's own account"""

    email: Optional[str] = Field(default=None, description="Email")
    creator_application_status: CreatorApplicationStatus = Field(
        default=CreatorApplicationStatus.none, description="Creator application status"
    )
    theme: str = Field(default="black", description="UI theme")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")


class UserWithVerifications(User):
    profile_visibility: Visibility = Field(default=Visibility.public, description="Profile visibility")
    verifications: List[Verification] = Field(default_factory=list)


class UserProfileResponse(UserPublic):
    profile_visibility: Visibility = Field(default=Visibility.public, description="Profile visibility")
    verifications: List[Verification] = Field(default_factory=list)


class UserUpsert(BaseModel):
    """Identity delivered by the OAuth provider"""

    user_id: str = Field(description="OAuth subject")
    email: Optional[str] = Field(default=None, description="Email")
    first_name: Optional[str] = Field(default=None, description="First name")
    last_name: Optional[str] = Field(default=None, description="Last name")
    profile_image_url: Optional[str] = Field(default=None, description="Profile image URL")


class GoogleLoginRequest(BaseModel):
    id_token: str = Field(description="Google id_token issued to the frontend", min_length=1)


class TokenResponse(BaseModel):
    access_token: str = Field(description="Access token")
    token_type: str = Field(default="bearer", description="Token type")
    user: User = Field(description="Signed-in user")


class ThemeUpdate(BaseModel):
    theme: Theme = Field(description="UI theme")


class ProfileVisibilityUpdate(BaseModel):
    visibility: Visibility = Field(description="Profile visibility")
