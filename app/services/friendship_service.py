# app/services/friendship_service.py

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, delete, and_, or_
from app.models.user import UserModel
from app.models.user_friendship import UserFriendshipModel, FriendshipStatus
from app.schemas.friendship import Friendship, FriendRequest
from app.schemas.user import UserPublic
from app.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.database import SessionLocal, insert_or_ignore
from app.services.block_service import BlockService
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


class FriendshipService:
    """Friend requests and the accepted friendships they turn into.

    A request row is keyed by the ordered (requester, addressee) pair, so a
    reverse request from the addressee is a separate row. Only one row per
    ordered pair ever exists: sending again while a row is present, rejected
    ones included, changes nothing.
    """

    def __init__(self):
        self.user_service = UserService()
        self.block_service = BlockService()

    def _get_db(self) -> Session:
        return SessionLocal()

    async def send_friend_request(self, requester_id: str, addressee_id: str) -> Friendship:
        if requester_id == addressee_id:
            raise ValidationError("Cannot send a friend request to yourself")

        db = self._get_db()
        try:
            if not self.user_service.user_exists_with_db(addressee_id, db):
                raise NotFoundError("User not found")
            if self.block_service.is_blocked_with_db(requester_id, addressee_id, db):
                raise ForbiddenError("Cannot send a friend request to this user")

            created = insert_or_ignore(
                db,
                UserFriendshipModel(
                    requester_id=requester_id,
                    addressee_id=addressee_id,
                    status=FriendshipStatus.pending,
                ),
            )
            db.commit()
            if created:
                logger.info("Friend request %s -> %s", requester_id, addressee_id)

            row = self._get_request_with_db(requester_id, addressee_id, db)
            return Friendship.model_validate(row)

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def accept_friend_request(self, requester_id: str, addressee_id: str) -> Friendship:
        return await self._answer_request(requester_id, addressee_id, FriendshipStatus.accepted)

    async def reject_friend_request(self, requester_id: str, addressee_id: str) -> Friendship:
        return await self._answer_request(requester_id, addressee_id, FriendshipStatus.rejected)

    async def remove_friend(self, user_id: str, friend_id: str) -> bool:
        """Delete the friendship row in either ordering"""
        db = self._get_db()
        try:
            result = db.execute(
                delete(UserFriendshipModel).where(self._pair_clause(user_id, friend_id))
            )
            db.commit()
            return result.rowcount > 0
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def are_friends(self, user_id_1: str, user_id_2: str) -> bool:
        db = self._get_db()
        try:
            return self.are_friends_with_db(user_id_1, user_id_2, db)
        finally:
            db.close()

    async def get_friends(self, user_id: str) -> List[UserPublic]:
        db = self._get_db()
        try:
            stmt = (
                select(UserModel)
                .join(
                    UserFriendshipModel,
                    or_(
                        and_(
                            UserFriendshipModel.requester_id == user_id,
                            UserFriendshipModel.addressee_id == UserModel.user_id,
                        ),
                        and_(
                            UserFriendshipModel.addressee_id == user_id,
                            UserFriendshipModel.requester_id == UserModel.user_id,
                        ),
                    ),
                )
                .where(UserFriendshipModel.status == FriendshipStatus.accepted)
                .order_by(UserFriendshipModel.updated_at.desc())
            )
            # both orderings of a pair may be accepted rows
            friends = {}
            for user in db.execute(stmt).scalars().all():
                friends.setdefault(user.user_id, user)
            return [UserPublic.model_validate(u) for u in friends.values()]
        finally:
            db.close()

    async def get_friend_requests(self, user_id: str) -> List[FriendRequest]:
        """Pending requests addressed to the user, newest first"""
        db = self._get_db()
        try:
            stmt = (
                select(UserFriendshipModel, UserModel)
                .join(UserModel, UserModel.user_id == UserFriendshipModel.requester_id)
                .where(
                    and_(
                        UserFriendshipModel.addressee_id == user_id,
                        UserFriendshipModel.status == FriendshipStatus.pending,
                    )
                )
                .order_by(
                    UserFriendshipModel.created_at.desc(),
                    UserFriendshipModel.friendship_id.desc(),
                )
            )
            requests = []
            for row, requester in db.execute(stmt).all():
                request = FriendRequest(
                    **Friendship.model_validate(row).model_dump(),
                    requester=UserPublic.model_validate(requester),
                )
                requests.append(request)
            return requests
        finally:
            db.close()

    def are_friends_with_db(self, user_id_1: str, user_id_2: str, db: Session) -> bool:
        stmt = select(UserFriendshipModel.friendship_id).where(
            and_(
                self._pair_clause(user_id_1, user_id_2),
                UserFriendshipModel.status == FriendshipStatus.accepted,
            )
        )
        return db.execute(stmt).first() is not None

    async def _answer_request(
        self, requester_id: str, addressee_id: str, status: FriendshipStatus
    ) -> Friendship:
        db = self._get_db()
        try:
            row = self._get_request_with_db(requester_id, addressee_id, db)
            if not row:
                raise NotFoundError("Friend request not found")
            if row.status != FriendshipStatus.pending:
                raise ValidationError("Friend request is not pending")

            row.status = status
            db.commit()
            db.refresh(row)
            logger.info("Friend request %s -> %s %s", requester_id, addressee_id, status.value)
            return Friendship.model_validate(row)

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def _get_request_with_db(
        self, requester_id: str, addressee_id: str, db: Session
    ) -> Optional[UserFriendshipModel]:
        stmt = select(UserFriendshipModel).where(
            and_(
                UserFriendshipModel.requester_id == requester_id,
                UserFriendshipModel.addressee_id == addressee_id,
            )
        )
        return db.execute(stmt).scalar_one_or_none()

    @staticmethod
    def _pair_clause(user_id_1: str, user_id_2: str):
        return or_(
            and_(
                UserFriendshipModel.requester_id == user_id_1,
                UserFriendshipModel.addressee_id == user_id_2,
            ),
            and_(
                UserFriendshipModel.requester_id == user_id_2,
                UserFriendshipModel.addressee_id == user_id_1,
            ),
        )
