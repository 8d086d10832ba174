# app/models/__init__.py

from .user import UserModel, CreatorApplicationStatus
from .user_profile import UserProfileModel, Visibility
from .character import CharacterModel
from .character_like import CharacterLikeModel
from .character_favorite import CharacterFavoriteModel
from .recently_viewed import RecentlyViewedModel
from .user_follow import UserFollowModel
from .user_friendship import UserFriendshipModel, FriendshipStatus
from .user_block import UserBlockModel
from .private_message import PrivateMessageModel
from .social_media_verification import SocialMediaVerificationModel, SUPPORTED_PLATFORMS


__all__ = [
    "UserModel",
    "CreatorApplicationStatus",
    "UserProfileModel",
    "Visibility",
    "CharacterModel",
    "CharacterLikeModel",
    "CharacterFavoriteModel",
    "RecentlyViewedModel",
    "UserFollowModel",
    "UserFriendshipModel",
    "FriendshipStatus",
    "UserBlockModel",
    "PrivateMessageModel",
    "SocialMediaVerificationModel",
    "SUPPORTED_PLATFORMS",
]
