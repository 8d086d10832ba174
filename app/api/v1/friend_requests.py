# app/api/v1/friend_requests.py

import logging
from fastapi import APIRouter, Depends, HTTPException, Path
from app.schemas.user import User
from app.schemas.friendship import Friendship
from app.services.friendship_service import FriendshipService
from app.core.dependencies import get_current_user
from app.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_friendship_service() -> FriendshipService:
    return FriendshipService()


@router.post(
    "/{requester_id}/accept",
    response_model=Friendship,
    summary="Accept friend request",
    description="Accepts the pending request the requester sent to the signed-in user.",
)
async def accept_friend_request(
    requester_id: str = Path(description="Who sent the request"),
    current_user: User = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service),
):
    try:
        return await friendship_service.accept_friend_request(requester_id, current_user.user_id)
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Accepting friend request failed")
        raise HTTPException(status_code=500, detail="Failed to accept friend request")


@router.post("/{requester_id}/reject", response_model=Friendship, summary="Reject friend request")
async def reject_friend_request(
    requester_id: str = Path(description="Who sent the request"),
    current_user: User = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service),
):
    try:
        return await friendship_service.reject_friend_request(requester_id, current_user.user_id)
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Rejecting friend request failed")
        raise HTTPException(status_code=500, detail="Failed to reject friend request")
