# app/services/user_follow_service.py

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, delete, func, and_
from app.models.user_follow import UserFollowModel
from app.models.user import UserModel
from app.schemas.user_follow import FollowUser, FollowListResponse
from app.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.database import SessionLocal, insert_or_ignore
from app.services.block_service import BlockService
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


class UserFollowService:

    def __init__(self):
        self.user_service = UserService()
        self.block_service = BlockService()

    def _get_db(self) -> Session:
        """Open a database session"""
        return SessionLocal()

    async def toggle_follow(self, follower_id: str, following_id: str) -> bool:
        """Follow or unfollow; returns whether the follower follows afterwards"""
        if follower_id == following_id:
            raise ValidationError("Cannot follow yourself")

        db = self._get_db()
        try:
            if not self.user_service.user_exists_with_db(following_id, db):
                raise NotFoundError("User not found")

            if self._is_following_with_db(follower_id, following_id, db):
                db.execute(
                    delete(UserFollowModel).where(
                        and_(
                            UserFollowModel.follower_id == follower_id,
                            UserFollowModel.following_id == following_id,
                        )
                    )
                )
                following = False
            else:
                if self.block_service.is_blocked_with_db(follower_id, following_id, db):
                    raise ForbiddenError("Cannot follow this user")
                insert_or_ignore(
                    db, UserFollowModel(follower_id=follower_id, following_id=following_id)
                )
                following = True

            db.commit()
            return following

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def get_followers(
        self, user_id: str, current_user_id: Optional[str] = None, skip: int = 0, limit: int = 20
    ) -> FollowListResponse:
        """Followers of a user, newest first"""
        db = self._get_db()
        try:
            stmt = (
                select(UserModel, UserFollowModel.created_at)
                .join(UserFollowModel, UserModel.user_id == UserFollowModel.follower_id)
                .where(UserFollowModel.following_id == user_id)
                .order_by(UserFollowModel.created_at.desc())
                .offset(skip)
                .limit(limit)
            )
            rows = db.execute(stmt).all()

            users = self._to_follow_users(rows, current_user_id, db)
            total = self._get_followers_count_with_db(user_id, db)
            return FollowListResponse(users=users, total=total)
        finally:
            db.close()

    async def get_following(
        self, user_id: str, current_user_id: Optional[str] = None, skip: int = 0, limit: int = 20
    ) -> FollowListResponse:
        db = self._get_db()
        try:
            stmt = (
                select(UserModel, UserFollowModel.created_at)
                .join(UserFollowModel, UserModel.user_id == UserFollowModel.following_id)
                .where(UserFollowModel.follower_id == user_id)
                .order_by(UserFollowModel.created_at.desc())
                .offset(skip)
                .limit(limit)
            )
            rows = db.execute(stmt).all()

            users = self._to_follow_users(rows, current_user_id, db)
            total = self._get_following_count_with_db(user_id, db)
            return FollowListResponse(users=users, total=total)
        finally:
            db.close()

    async def is_following(self, follower_id: str, following_id: str) -> bool:
        db = self._get_db()
        try:
            return self._is_following_with_db(follower_id, following_id, db)
        finally:
            db.close()

    def _to_follow_users(self, rows, current_user_id: Optional[str], db: Session) -> List[FollowUser]:
        ids = [user.user_id for user, _ in rows]
        following_ids = set()
        if current_user_id and ids:
            following_ids = self._get_following_ids_set(current_user_id, ids, db)

        return [
            FollowUser(
                user_id=user.user_id,
                username=user.username,
                display_name=user.display_name,
                profile_image_url=user.profile_image_url,
                is_creator=user.is_creator,
                is_following=user.user_id in following_ids,
                created_at=followed_at,
            )
            for user, followed_at in rows
        ]

    def _is_following_with_db(self, follower_id: str, following_id: str, db: Session) -> bool:
        stmt = select(UserFollowModel).where(
            and_(
                UserFollowModel.follower_id == follower_id,
                UserFollowModel.following_id == following_id,
            )
        )
        return db.execute(stmt).scalar_one_or_none() is not None

    def _get_followers_count_with_db(self, user_id: str, db: Session) -> int:
        stmt = select(func.count(UserFollowModel.follower_id)).where(
            UserFollowModel.following_id == user_id
        )
        return db.execute(stmt).scalar() or 0

    def _get_following_count_with_db(self, user_id: str, db: Session) -> int:
        stmt = select(func.count(UserFollowModel.following_id)).where(
            UserFollowModel.follower_id == user_id
        )
        return db.execute(stmt).scalar() or 0

    def _get_following_ids_set(
        self, current_user_id: str, target_user_ids: List[str], db: Session
    ) -> set:
        """Which of the targets the current user follows"""
        stmt = select(UserFollowModel.following_id).where(
            and_(
                UserFollowModel.follower_id == current_user_id,
                UserFollowModel.following_id.in_(target_user_ids),
            )
        )
        return {row[0] for row in db.execute(stmt).fetchall()}
