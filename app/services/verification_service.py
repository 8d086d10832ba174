# app/services/verification_service.py

import logging
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select, and_
from app.models.social_media_verification import (
    SocialMediaVerificationModel,
    SUPPORTED_PLATFORMS,
)
from app.schemas.verification import Verification
from app.core.exceptions import NotFoundError, ValidationError
from app.database import SessionLocal

logger = logging.getLogger(__name__)


class VerificationService:
    """Social-media account claims and their admin confirmation"""

    def __init__(self):
        pass

    def _get_db(self) -> Session:
        return SessionLocal()

    async def add_verification(self, user_id: str, platform: str, username: str) -> Verification:
        """Claim a platform account; re-claiming with a new name drops the verified flag"""
        platform = (platform or "").strip().lower()
        if platform not in SUPPORTED_PLATFORMS:
            raise ValidationError("Invalid platform")
        username = (username or "").strip()
        if not username:
            raise ValidationError("Platform username is required")

        db = self._get_db()
        try:
            claim = self._get_claim_with_db(user_id, platform, db)
            if claim:
                if claim.platform_username != username:
                    claim.platform_username = username
                    claim.is_verified = False
            else:
                claim = SocialMediaVerificationModel(
                    user_id=user_id, platform=platform, platform_username=username
                )
                db.add(claim)

            db.commit()
            db.refresh(claim)
            return Verification.model_validate(claim)

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def verify_social_media(self, user_id: str, platform: str) -> Verification:
        platform = (platform or "").strip().lower()
        db = self._get_db()
        try:
            claim = self._get_claim_with_db(user_id, platform, db)
            if not claim:
                raise NotFoundError("Verification request not found")

            claim.is_verified = True
            db.commit()
            db.refresh(claim)
            logger.info("Verified %s account of %s", platform, user_id)
            return Verification.model_validate(claim)

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def get_user_verifications(self, user_id: str) -> List[Verification]:
        db = self._get_db()
        try:
            return self.get_verifications_with_db(user_id, db)
        finally:
            db.close()

    def get_verifications_with_db(self, user_id: str, db: Session) -> List[Verification]:
        stmt = (
            select(SocialMediaVerificationModel)
            .where(SocialMediaVerificationModel.user_id == user_id)
            .order_by(SocialMediaVerificationModel.platform)
        )
        return [Verification.model_validate(row) for row in db.execute(stmt).scalars().all()]

    def _get_claim_with_db(self, user_id: str, platform: str, db: Session):
        stmt = select(SocialMediaVerificationModel).where(
            and_(
                SocialMediaVerificationModel.user_id == user_id,
                SocialMediaVerificationModel.platform == platform,
            )
        )
        return db.execute(stmt).scalar_one_or_none()
