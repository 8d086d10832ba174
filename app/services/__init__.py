# app/services/__init__.py

from .user_service import UserService
from .verification_service import VerificationService
from .block_service import BlockService
from .user_follow_service import UserFollowService
from .friendship_service import FriendshipService
from .message_service import MessageService
from .interaction_service import InteractionService
from .character_service import CharacterService
from .creator_service import CreatorService
from .tag_service import TagService
from .google_oauth_service import GoogleOAuthService

__all__ = [
    "UserService",
    "VerificationService",
    "BlockService",
    "UserFollowService",
    "FriendshipService",
    "MessageService",
    "InteractionService",
    "CharacterService",
    "CreatorService",
    "TagService",
    "GoogleOAuthService",
]
