# app/api/v1/messages.py

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path
from app.schemas.user import User
from app.schemas.message import Message, MessageCreate
from app.services.message_service import MessageService
from app.core.dependencies import get_current_user
from app.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_message_service() -> MessageService:
    return MessageService()


@router.post(
    "",
    response_model=Message,
    summary="Send message",
    description="Only friends without a block between them can message each other.",
)
async def send_message(
    payload: MessageCreate,
    current_user: User = Depends(get_current_user),
    message_service: MessageService = Depends(get_message_service),
):
    try:
        return await message_service.send_message(
            current_user.user_id, payload.receiver_id, payload.content
        )
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Sending message failed")
        raise HTTPException(status_code=500, detail="Failed to send message")


@router.get(
    "/{user_id}",
    response_model=List[Message],
    summary="Conversation",
    description="Messages with a friend, oldest first. Incoming messages are marked read.",
)
async def get_conversation(
    user_id: str = Path(description="Conversation partner"),
    current_user: User = Depends(get_current_user),
    message_service: MessageService = Depends(get_message_service),
):
    try:
        return await message_service.get_conversation(current_user.user_id, user_id)
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Fetching conversation failed")
        raise HTTPException(status_code=500, detail="Failed to fetch messages")
