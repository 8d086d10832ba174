# app/services/user_service.py

import logging
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.models.user import UserModel
from app.models.user_profile import UserProfileModel, Visibility
from app.services.verification_service import VerificationService
from app.schemas.user import (
    User,
    UserUpsert,
    UserWithVerifications,
    UserProfileResponse,
)
from app.core.exceptions import NotFoundError, ValidationError
from app.database import SessionLocal

logger = logging.getLogger(__name__)

THEMES = ("black", "white", "midnight", "neon", "pinky", "bob")


class UserService:

    def __init__(self):
        self.verification_service = VerificationService()

    def _get_db(self) -> Session:
        """Open a database session"""
        return SessionLocal()

    async def get_user(self, user_id: str) -> Optional[User]:
        db = self._get_db()
        try:
            user_model = self.get_user_model_with_db(user_id, db)
            return User.model_validate(user_model) if user_model else None
        finally:
            db.close()

    async def get_user_by_username(self, username: str) -> Optional[UserProfileResponse]:
        """Public profile by username, with social-media verifications"""
        db = self._get_db()
        try:
            stmt = select(UserModel).where(UserModel.username == username)
            user_model = db.execute(stmt).scalar_one_or_none()
            if not user_model:
                return None

            profile = UserProfileResponse.model_validate(user_model)
            profile.profile_visibility = self._get_profile_visibility_with_db(user_model.user_id, db)
            profile.verifications = self.verification_service.get_verifications_with_db(
                user_model.user_id, db
            )
            return profile
        finally:
            db.close()

    async def get_user_with_verifications(self, user_id: str) -> Optional[UserWithVerifications]:
        db = self._get_db()
        try:
            user_model = self.get_user_model_with_db(user_id, db)
            if not user_model:
                return None

            user = UserWithVerifications.model_validate(user_model)
            user.profile_visibility = self._get_profile_visibility_with_db(user_id, db)
            user.verifications = self.verification_service.get_verifications_with_db(user_id, db)
            return user
        finally:
            db.close()

    async def upsert_user(self, user_data: UserUpsert) -> User:
        """Create the account on first login, refresh identity fields afterwards"""
        db = self._get_db()
        try:
            user_model = self.get_user_model_with_db(user_data.user_id, db)
            if user_model:
                user_model.email = user_data.email
                user_model.first_name = user_data.first_name
                user_model.last_name = user_data.last_name
                user_model.profile_image_url = user_data.profile_image_url
            else:
                user_model = UserModel(
                    user_id=user_data.user_id,
                    email=user_data.email,
                    first_name=user_data.first_name,
                    last_name=user_data.last_name,
                    profile_image_url=user_data.profile_image_url,
                )
                db.add(user_model)
                logger.info("New account %s", user_data.user_id)

            db.commit()
            db.refresh(user_model)
            return User.model_validate(user_model)

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def update_theme(self, user_id: str, theme: str) -> None:
        if theme not in THEMES:
            raise ValidationError("Invalid theme")

        db = self._get_db()
        try:
            user_model = self.get_user_model_with_db(user_id, db)
            if not user_model:
                raise NotFoundError("User not found")

            user_model.theme = theme
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def update_profile_visibility(self, user_id: str, visibility: Visibility) -> None:
        try:
            visibility = Visibility(visibility)
        except ValueError:
            raise ValidationError("Invalid visibility setting")

        db = self._get_db()
        try:
            profile = db.get(UserProfileModel, user_id)
            if profile:
                profile.profile_visibility = visibility
            else:
                db.add(UserProfileModel(user_id=user_id, profile_visibility=visibility))
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def get_user_model_with_db(self, user_id: str, db: Session) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.user_id == user_id)
        return db.execute(stmt).scalar_one_or_none()

    def user_exists_with_db(self, user_id: str, db: Session) -> bool:
        """Whether a user row exists"""
        return self.get_user_model_with_db(user_id, db) is not None

    def _get_profile_visibility_with_db(self, user_id: str, db: Session) -> Visibility:
        profile = db.get(UserProfileModel, user_id)
        return profile.profile_visibility if profile else Visibility.public
