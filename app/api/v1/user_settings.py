# app/api/v1/user_settings.py

import logging
from fastapi import APIRouter, Depends, HTTPException
from app.schemas.user import User, ThemeUpdate, ProfileVisibilityUpdate
from app.schemas.common import SuccessResponse
from app.services.user_service import UserService
from app.core.dependencies import get_current_user, get_user_service
from app.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.patch("/theme", response_model=SuccessResponse, summary="Change UI theme")
async def update_theme(
    payload: ThemeUpdate,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    try:
        await user_service.update_theme(current_user.user_id, payload.theme)
        return SuccessResponse()
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Updating theme failed")
        raise HTTPException(status_code=500, detail="Failed to update theme")


@router.patch(
    "/profile-visibility",
    response_model=SuccessResponse,
    summary="Change profile visibility",
)
async def update_profile_visibility(
    payload: ProfileVisibilityUpdate,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    try:
        await user_service.update_profile_visibility(current_user.user_id, payload.visibility)
        return SuccessResponse()
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Updating profile visibility failed")
        raise HTTPException(status_code=500, detail="Failed to update profile visibility")
