# app/api/v1/users.py

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query, Path
from app.schemas.user import User, UserPublic, UserProfileResponse
from app.schemas.character import Character, CharacterWithCreator
from app.schemas.user_follow import FollowStatus, FollowListResponse
from app.schemas.friendship import Friendship, FriendRequest
from app.schemas.common import SuccessResponse
from app.services.user_service import UserService
from app.services.character_service import CharacterService
from app.services.user_follow_service import UserFollowService
from app.services.friendship_service import FriendshipService
from app.services.block_service import BlockService
from app.core.dependencies import get_current_user, get_optional_current_user, get_user_service
from app.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_character_service() -> CharacterService:
    return CharacterService()


def get_follow_service() -> UserFollowService:
    return UserFollowService()


def get_friendship_service() -> FriendshipService:
    return FriendshipService()


def get_block_service() -> BlockService:
    return BlockService()


# /me routes come before /{username}


@router.get(
    "/me/favorites",
    response_model=List[CharacterWithCreator],
    summary="My favorites",
    description="Characters the signed-in user favorited, newest favorite first.",
)
async def get_my_favorites(
    current_user: User = Depends(get_current_user),
    character_service: CharacterService = Depends(get_character_service),
):
    try:
        return await character_service.get_user_favorites(current_user.user_id)
    except Exception:
        logger.exception("Fetching favorites failed")
        raise HTTPException(status_code=500, detail="Failed to fetch favorites")


@router.get(
    "/me/friend-requests",
    response_model=List[FriendRequest],
    summary="Pending friend requests",
)
async def get_my_friend_requests(
    current_user: User = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service),
):
    try:
        return await friendship_service.get_friend_requests(current_user.user_id)
    except Exception:
        logger.exception("Fetching friend requests failed")
        raise HTTPException(status_code=500, detail="Failed to fetch friend requests")


@router.get("/me/friends", response_model=List[UserPublic], summary="My friends")
async def get_my_friends(
    current_user: User = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service),
):
    try:
        return await friendship_service.get_friends(current_user.user_id)
    except Exception:
        logger.exception("Fetching friends failed")
        raise HTTPException(status_code=500, detail="Failed to fetch friends")


@router.get("/me/blocked", response_model=List[UserPublic], summary="Users I blocked")
async def get_my_blocked_users(
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service),
):
    try:
        return await block_service.get_blocked_users(current_user.user_id)
    except Exception:
        logger.exception("Fetching blocked users failed")
        raise HTTPException(status_code=500, detail="Failed to fetch blocked users")


@router.get(
    "/{username}",
    response_model=UserProfileResponse,
    summary="Public profile",
    description="A user's public profile with social-media verifications.",
)
async def get_user_profile(
    username: str = Path(description="Username"),
    user_service: UserService = Depends(get_user_service),
):
    try:
        profile = await user_service.get_user_by_username(username)
    except Exception:
        logger.exception("Fetching user %s failed", username)
        raise HTTPException(status_code=500, detail="Failed to fetch user")

    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return profile


@router.get(
    "/{user_id}/characters",
    response_model=List[Character],
    summary="A user's characters",
    description="Every character for the owner, public ones for everybody else.",
)
async def get_user_characters(
    user_id: str = Path(description="Owner user ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    character_service: CharacterService = Depends(get_character_service),
):
    try:
        viewer_id = current_user.user_id if current_user else None
        return await character_service.get_user_characters(user_id, viewer_id)
    except Exception:
        logger.exception("Fetching characters of %s failed", user_id)
        raise HTTPException(status_code=500, detail="Failed to fetch user characters")


@router.get("/{user_id}/followers", response_model=FollowListResponse, summary="Followers")
async def get_followers(
    user_id: str = Path(description="User ID"),
    skip: int = Query(default=0, ge=0, description="Users to skip"),
    limit: int = Query(default=20, ge=1, le=100, description="Users to return"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    follow_service: UserFollowService = Depends(get_follow_service),
):
    try:
        current_user_id = current_user.user_id if current_user else None
        return await follow_service.get_followers(user_id, current_user_id, skip, limit)
    except Exception:
        logger.exception("Fetching followers of %s failed", user_id)
        raise HTTPException(status_code=500, detail="Failed to fetch followers")


@router.get("/{user_id}/following", response_model=FollowListResponse, summary="Following")
async def get_following(
    user_id: str = Path(description="User ID"),
    skip: int = Query(default=0, ge=0, description="Users to skip"),
    limit: int = Query(default=20, ge=1, le=100, description="Users to return"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    follow_service: UserFollowService = Depends(get_follow_service),
):
    try:
        current_user_id = current_user.user_id if current_user else None
        return await follow_service.get_following(user_id, current_user_id, skip, limit)
    except Exception:
        logger.exception("Fetching following of %s failed", user_id)
        raise HTTPException(status_code=500, detail="Failed to fetch following")


@router.post(
    "/{user_id}/follow",
    response_model=FollowStatus,
    summary="Toggle follow",
    description="Follows the user, or unfollows when already following.",
)
async def toggle_follow(
    user_id: str = Path(description="User to follow"),
    current_user: User = Depends(get_current_user),
    follow_service: UserFollowService = Depends(get_follow_service),
):
    try:
        following = await follow_service.toggle_follow(current_user.user_id, user_id)
        return FollowStatus(following=following)
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Toggling follow failed")
        raise HTTPException(status_code=500, detail="Failed to toggle follow")


@router.get("/{user_id}/follow-status", response_model=FollowStatus, summary="Follow status")
async def get_follow_status(
    user_id: str = Path(description="User ID"),
    current_user: User = Depends(get_current_user),
    follow_service: UserFollowService = Depends(get_follow_service),
):
    try:
        following = await follow_service.is_following(current_user.user_id, user_id)
        return FollowStatus(following=following)
    except Exception:
        logger.exception("Fetching follow status failed")
        raise HTTPException(status_code=500, detail="Failed to fetch follow status")


@router.post("/{user_id}/friend-request", response_model=Friendship, summary="Send friend request")
async def send_friend_request(
    user_id: str = Path(description="Addressee"),
    current_user: User = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service),
):
    try:
        return await friendship_service.send_friend_request(current_user.user_id, user_id)
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Sending friend request failed")
        raise HTTPException(status_code=500, detail="Failed to send friend request")


@router.delete("/{user_id}/friend", response_model=SuccessResponse, summary="Remove friend")
async def remove_friend(
    user_id: str = Path(description="Friend"),
    current_user: User = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service),
):
    try:
        removed = await friendship_service.remove_friend(current_user.user_id, user_id)
        return SuccessResponse(success=removed)
    except Exception:
        logger.exception("Removing friend failed")
        raise HTTPException(status_code=500, detail="Failed to remove friend")


@router.post(
    "/{user_id}/block",
    response_model=SuccessResponse,
    summary="Block user",
    description="Blocks the user and removes any friendship and follows between the two.",
)
async def block_user(
    user_id: str = Path(description="User to block"),
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service),
):
    try:
        await block_service.block_user(current_user.user_id, user_id)
        return SuccessResponse()
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Blocking user failed")
        raise HTTPException(status_code=500, detail="Failed to block user")


@router.post("/{user_id}/unblock", response_model=SuccessResponse, summary="Unblock user")
async def unblock_user(
    user_id: str = Path(description="User to unblock"),
    current_user: User = Depends(get_current_user),
    block_service: BlockService = Depends(get_block_service),
):
    try:
        await block_service.unblock_user(current_user.user_id, user_id)
        return SuccessResponse()
    except Exception:
        logger.exception("Unblocking user failed")
        raise HTTPException(status_code=500, detail="Failed to unblock user")
