# app/api/v1/admin.py

import logging
from fastapi import APIRouter, HTTPException, Depends, Path, status
from app.schemas.user import User
from app.schemas.verification import Verification
from app.services.creator_service import CreatorService
from app.services.verification_service import VerificationService
from app.core.dependencies import get_admin_user
from app.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/creators/{user_id}/approve",
    response_model=User,
    summary="Approve creator application",
    description="Grants the creator badge to a pending applicant.",
)
async def approve_creator(
    user_id: str = Path(description="Applicant"),
    admin: User = Depends(get_admin_user),
):
    try:
        user = await CreatorService().approve_creator_application(user_id)
        logger.info("%s approved creator %s", admin.email, user_id)
        return user
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Approving creator %s failed", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to approve creator application",
        )


@router.post(
    "/creators/{user_id}/reject",
    response_model=User,
    summary="Reject creator application",
)
async def reject_creator(
    user_id: str = Path(description="Applicant"),
    admin: User = Depends(get_admin_user),
):
    try:
        user = await CreatorService().reject_creator_application(user_id)
        logger.info("%s rejected creator %s", admin.email, user_id)
        return user
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Rejecting creator %s failed", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to reject creator application",
        )


@router.post(
    "/verifications/{user_id}/{platform}/verify",
    response_model=Verification,
    summary="Confirm a social-media claim",
)
async def verify_social_media(
    user_id: str = Path(description="Claimant"),
    platform: str = Path(description="Platform"),
    admin: User = Depends(get_admin_user),
):
    try:
        return await VerificationService().verify_social_media(user_id, platform)
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Verifying %s for %s failed", platform, user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to verify social media account",
        )
