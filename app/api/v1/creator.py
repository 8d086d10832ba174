# app/api/v1/creator.py

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from app.schemas.user import User
from app.schemas.creator import CreatorApplication, CreatorStatus, FeaturedCreator
from app.schemas.common import SuccessResponse
from app.services.creator_service import CreatorService
from app.core.dependencies import get_current_user
from app.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

# /creator: the signed-in user's own application
router = APIRouter()

# /creators: the public directory
directory_router = APIRouter()


def get_creator_service() -> CreatorService:
    return CreatorService()


@router.post(
    "/apply",
    response_model=SuccessResponse,
    summary="Apply to become a creator",
    description=(
        "YouTube applications take the handle as username; email applications take the "
        "account email. Not allowed while an application is pending or for existing creators."
    ),
)
async def apply_for_creator(
    payload: CreatorApplication,
    current_user: User = Depends(get_current_user),
    creator_service: CreatorService = Depends(get_creator_service),
):
    try:
        await creator_service.apply_for_creator(
            current_user.user_id,
            payload.application_type,
            payload.youtube_handle,
            payload.display_name,
        )
        return SuccessResponse(message="Creator application submitted successfully")
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Creator application failed")
        raise HTTPException(status_code=500, detail="Failed to submit creator application")


@router.get("/status", response_model=CreatorStatus, summary="Creator application status")
async def get_creator_status(
    current_user: User = Depends(get_current_user),
    creator_service: CreatorService = Depends(get_creator_service),
):
    try:
        return await creator_service.get_creator_status(current_user.user_id)
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Fetching creator status failed")
        raise HTTPException(status_code=500, detail="Failed to fetch creator status")


@directory_router.get(
    "/featured",
    response_model=List[FeaturedCreator],
    summary="Featured creators",
    description="Creators with the most characters, with their verified accounts.",
)
async def get_featured_creators(
    limit: Optional[int] = Query(default=None, description="Maximum results, capped at 50"),
    creator_service: CreatorService = Depends(get_creator_service),
):
    try:
        return await creator_service.get_featured_creators(limit)
    except Exception:
        logger.exception("Fetching featured creators failed")
        raise HTTPException(status_code=500, detail="Failed to fetch featured creators")
