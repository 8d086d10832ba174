# app/schemas/__init__.py

from .verification import Verification, VerificationCreate
from .user import (
    User,
    UserPublic,
    UserWithVerifications,
    UserProfileResponse,
    UserUpsert,
    GoogleLoginRequest,
    TokenResponse,
    ThemeUpdate,
    ProfileVisibilityUpdate,
)
from .character import (
    Character,
    CharacterWithCreator,
    CharacterCreate,
    CharacterUpdate,
    CharacterStatus,
    LikeToggleResponse,
    FavoriteToggleResponse,
)
from .user_follow import FollowStatus, FollowUser, FollowListResponse
from .friendship import Friendship, FriendRequest
from .message import Message, MessageCreate
from .creator import CreatorApplication, CreatorStatus, FeaturedCreator
from .tag import TrendingTag
from .common import SuccessResponse

__all__ = [
    "Verification",
    "VerificationCreate",
    "User",
    "UserPublic",
    "UserWithVerifications",
    "UserProfileResponse",
    "UserUpsert",
    "GoogleLoginRequest",
    "TokenResponse",
    "ThemeUpdate",
    "ProfileVisibilityUpdate",
    "Character",
    "CharacterWithCreator",
    "CharacterCreate",
    "CharacterUpdate",
    "CharacterStatus",
    "LikeToggleResponse",
    "FavoriteToggleResponse",
    "FollowStatus",
    "FollowUser",
    "FollowListResponse",
    "Friendship",
    "FriendRequest",
    "Message",
    "MessageCreate",
    "CreatorApplication",
    "CreatorStatus",
    "FeaturedCreator",
    "TrendingTag",
    "SuccessResponse",
]
