# app/services/block_service.py

import logging
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select, delete, and_, or_
from app.models.user import UserModel
from app.models.user_block import UserBlockModel
from app.models.user_follow import UserFollowModel
from app.models.user_friendship import UserFriendshipModel
from app.schemas.user import UserPublic
from app.core.exceptions import NotFoundError, ValidationError
from app.database import SessionLocal, insert_or_ignore
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


class BlockService:

    def __init__(self):
        self.user_service = UserService()

    def _get_db(self) -> Session:
        return SessionLocal()

    async def block_user(self, blocker_id: str, blocked_id: str) -> bool:
        """Block a user, severing friendship and follows both ways in the same transaction"""
        if blocker_id == blocked_id:
            raise ValidationError("Cannot block yourself")

        db = self._get_db()
        try:
            if not self.user_service.user_exists_with_db(blocked_id, db):
                raise NotFoundError("User not found")

            insert_or_ignore(db, UserBlockModel(blocker_id=blocker_id, blocked_id=blocked_id))

            db.execute(
                delete(UserFriendshipModel).where(
                    or_(
                        and_(
                            UserFriendshipModel.requester_id == blocker_id,
                            UserFriendshipModel.addressee_id == blocked_id,
                        ),
                        and_(
                            UserFriendshipModel.requester_id == blocked_id,
                            UserFriendshipModel.addressee_id == blocker_id,
                        ),
                    )
                )
            )
            db.execute(
                delete(UserFollowModel).where(
                    or_(
                        and_(
                            UserFollowModel.follower_id == blocker_id,
                            UserFollowModel.following_id == blocked_id,
                        ),
                        and_(
                            UserFollowModel.follower_id == blocked_id,
                            UserFollowModel.following_id == blocker_id,
                        ),
                    )
                )
            )

            db.commit()
            logger.info("%s blocked %s", blocker_id, blocked_id)
            return True

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def unblock_user(self, blocker_id: str, blocked_id: str) -> bool:
        db = self._get_db()
        try:
            result = db.execute(
                delete(UserBlockModel).where(
                    and_(
                        UserBlockModel.blocker_id == blocker_id,
                        UserBlockModel.blocked_id == blocked_id,
                    )
                )
            )
            db.commit()
            return result.rowcount > 0
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def is_blocked(self, user_id_1: str, user_id_2: str) -> bool:
        """A block in either direction"""
        db = self._get_db()
        try:
            return self.is_blocked_with_db(user_id_1, user_id_2, db)
        finally:
            db.close()

    async def get_blocked_users(self, user_id: str) -> List[UserPublic]:
        db = self._get_db()
        try:
            stmt = (
                select(UserModel)
                .join(UserBlockModel, UserModel.user_id == UserBlockModel.blocked_id)
                .where(UserBlockModel.blocker_id == user_id)
                .order_by(UserBlockModel.created_at.desc())
            )
            return [UserPublic.model_validate(u) for u in db.execute(stmt).scalars().all()]
        finally:
            db.close()

    def is_blocked_with_db(self, user_id_1: str, user_id_2: str, db: Session) -> bool:
        stmt = select(UserBlockModel).where(
            or_(
                and_(
                    UserBlockModel.blocker_id == user_id_1,
                    UserBlockModel.blocked_id == user_id_2,
                ),
                and_(
                    UserBlockModel.blocker_id == user_id_2,
                    UserBlockModel.blocked_id == user_id_1,
                ),
            )
        )
        return db.execute(stmt).first() is not None
