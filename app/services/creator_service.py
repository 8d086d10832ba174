# app/services/creator_service.py

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, func, and_
from app.models.user import UserModel, CreatorApplicationStatus
from app.models.character import CharacterModel
from app.schemas.creator import CreatorStatus, FeaturedCreator
from app.schemas.user import User, UserPublic
from app.core.exceptions import NotFoundError, ValidationError
from app.database import SessionLocal
from app.services.character_service import clamp_limit
from app.services.user_service import UserService
from app.services.verification_service import VerificationService

logger = logging.getLogger(__name__)

DEFAULT_FEATURED_LIMIT = 10
MAX_FEATURED_LIMIT = 50


class CreatorService:
    """Creator applications and the creator directory.

    An application can be submitted while the status is ``none`` or
    ``rejected``; approval and rejection are administrative transitions out
    of ``pending`` only.
    """

    def __init__(self):
        self.user_service = UserService()
        self.verification_service = VerificationService()

    def _get_db(self) -> Session:
        return SessionLocal()

    async def apply_for_creator(
        self,
        user_id: str,
        application_type: str,
        youtube_handle: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> User:
        db = self._get_db()
        try:
            user = self.user_service.get_user_model_with_db(user_id, db)
            if not user:
                raise NotFoundError("User not found")
            if user.creator_application_status == CreatorApplicationStatus.pending:
                raise ValidationError("Application already pending")
            if user.is_creator:
                raise ValidationError("Already a creator")

            youtube_handle = (youtube_handle or "").strip()
            if application_type == "youtube":
                if not youtube_handle:
                    raise ValidationError("YouTube handle is required for YouTube application")
                username = youtube_handle[1:] if youtube_handle.startswith("@") else youtube_handle
                creator_name = youtube_handle
                user.youtube_handle = youtube_handle
            elif application_type == "email":
                if not user.email:
                    raise ValidationError("User email is required for email-based application")
                username = user.email
                creator_name = user.email.split("@")[0]
            else:
                raise ValidationError("Invalid application type")

            if not username:
                raise ValidationError("Invalid YouTube handle")
            if self._username_taken_with_db(username, user_id, db):
                raise ValidationError("Username is already taken")

            user.username = username
            user.creator_name = creator_name
            if display_name and display_name.strip():
                user.display_name = display_name.strip()
            user.creator_application_status = CreatorApplicationStatus.pending

            db.commit()
            db.refresh(user)
            logger.info("Creator application from %s (%s)", user_id, application_type)
            return User.model_validate(user)

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def get_creator_status(self, user_id: str) -> CreatorStatus:
        db = self._get_db()
        try:
            user = self.user_service.get_user_model_with_db(user_id, db)
            if not user:
                raise NotFoundError("User not found")
            return CreatorStatus(
                status=user.creator_application_status, is_creator=user.is_creator
            )
        finally:
            db.close()

    async def approve_creator_application(self, user_id: str) -> User:
        return await self._decide(user_id, CreatorApplicationStatus.approved)

    async def reject_creator_application(self, user_id: str) -> User:
        return await self._decide(user_id, CreatorApplicationStatus.rejected)

    async def get_featured_creators(
        self, limit: int = DEFAULT_FEATURED_LIMIT
    ) -> List[FeaturedCreator]:
        """Creators with the most characters first"""
        limit = clamp_limit(limit, DEFAULT_FEATURED_LIMIT, MAX_FEATURED_LIMIT)
        db = self._get_db()
        try:
            character_count = func.count(CharacterModel.character_id)
            stmt = (
                select(UserModel, character_count)
                .outerjoin(CharacterModel, CharacterModel.creator_id == UserModel.user_id)
                .where(UserModel.is_creator.is_(True))
                .group_by(UserModel.user_id)
                .order_by(character_count.desc(), UserModel.user_id)
                .limit(limit)
            )

            creators = []
            for user, count in db.execute(stmt).all():
                creators.append(
                    FeaturedCreator(
                        **UserPublic.model_validate(user).model_dump(),
                        character_count=count,
                        verifications=self.verification_service.get_verifications_with_db(
                            user.user_id, db
                        ),
                    )
                )
            return creators
        finally:
            db.close()

    async def _decide(self, user_id: str, status: CreatorApplicationStatus) -> User:
        db = self._get_db()
        try:
            user = self.user_service.get_user_model_with_db(user_id, db)
            if not user:
                raise NotFoundError("User not found")
            if user.creator_application_status != CreatorApplicationStatus.pending:
                raise ValidationError("No pending creator application")

            user.creator_application_status = status
            if status == CreatorApplicationStatus.approved:
                user.is_creator = True

            db.commit()
            db.refresh(user)
            logger.info("Creator application of %s %s", user_id, status.value)
            return User.model_validate(user)

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def _username_taken_with_db(self, username: str, user_id: str, db: Session) -> bool:
        stmt = select(UserModel.user_id).where(
            and_(UserModel.username == username, UserModel.user_id != user_id)
        )
        return db.execute(stmt).first() is not None
