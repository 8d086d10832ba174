# app/services/message_service.py

import logging
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select, update, and_, or_
from app.models.private_message import PrivateMessageModel
from app.schemas.message import Message, MAX_MESSAGE_LENGTH
from app.core.exceptions import ForbiddenError, ValidationError
from app.database import SessionLocal
from app.services.block_service import BlockService
from app.services.friendship_service import FriendshipService

logger = logging.getLogger(__name__)


class MessageService:

    def __init__(self):
        self.block_service = BlockService()
        self.friendship_service = FriendshipService()

    def _get_db(self) -> Session:
        return SessionLocal()

    async def send_message(self, sender_id: str, receiver_id: str, content: str) -> Message:
        """Send a private message; sender and receiver must be friends with no block between them"""
        if not content or not content.strip():
            raise ValidationError("Message content is required")
        if len(content) > MAX_MESSAGE_LENGTH:
            raise ValidationError(f"Message must be at most {MAX_MESSAGE_LENGTH} characters")

        db = self._get_db()
        try:
            self._check_can_message_with_db(sender_id, receiver_id, db)

            message = PrivateMessageModel(
                sender_id=sender_id, receiver_id=receiver_id, content=content
            )
            db.add(message)
            db.commit()
            db.refresh(message)
            return Message.model_validate(message)

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def get_conversation(self, user_id: str, other_user_id: str) -> List[Message]:
        """Both directions, oldest first; the partner's messages to the caller become read"""
        db = self._get_db()
        try:
            self._check_can_message_with_db(user_id, other_user_id, db)

            stmt = (
                select(PrivateMessageModel)
                .where(
                    or_(
                        and_(
                            PrivateMessageModel.sender_id == user_id,
                            PrivateMessageModel.receiver_id == other_user_id,
                        ),
                        and_(
                            PrivateMessageModel.sender_id == other_user_id,
                            PrivateMessageModel.receiver_id == user_id,
                        ),
                    )
                )
                .order_by(PrivateMessageModel.created_at.asc(), PrivateMessageModel.message_id.asc())
            )
            messages = [Message.model_validate(m) for m in db.execute(stmt).scalars().all()]

            self._mark_read_with_db(user_id, other_user_id, db)
            db.commit()
            return messages

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def mark_messages_as_read(self, user_id: str, sender_id: str) -> int:
        db = self._get_db()
        try:
            count = self._mark_read_with_db(user_id, sender_id, db)
            db.commit()
            return count
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def _mark_read_with_db(self, user_id: str, sender_id: str, db: Session) -> int:
        result = db.execute(
            update(PrivateMessageModel)
            .where(
                and_(
                    PrivateMessageModel.receiver_id == user_id,
                    PrivateMessageModel.sender_id == sender_id,
                    PrivateMessageModel.is_read.is_(False),
                )
            )
            .values(is_read=True)
        )
        return result.rowcount

    def _check_can_message_with_db(self, user_id: str, other_user_id: str, db: Session) -> None:
        if self.block_service.is_blocked_with_db(user_id, other_user_id, db):
            raise ForbiddenError("Cannot message this user")
        if not self.friendship_service.are_friends_with_db(user_id, other_user_id, db):
            raise ForbiddenError("You can only message friends")
