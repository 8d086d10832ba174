# app/api/v1/social_verification.py

import logging
from fastapi import APIRouter, Depends, HTTPException
from app.schemas.user import User
from app.schemas.verification import Verification, VerificationCreate
from app.services.verification_service import VerificationService
from app.core.dependencies import get_current_user
from app.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_verification_service() -> VerificationService:
    return VerificationService()


@router.post(
    "",
    response_model=Verification,
    summary="Claim a social-media account",
    description="Supported platforms: youtube, instagram, x, tiktok, facebook.",
)
async def add_verification(
    payload: VerificationCreate,
    current_user: User = Depends(get_current_user),
    verification_service: VerificationService = Depends(get_verification_service),
):
    try:
        return await verification_service.add_verification(
            current_user.user_id, payload.platform, payload.username
        )
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Adding verification failed")
        raise HTTPException(status_code=500, detail="Failed to add social media verification")
