# app/api/v1/auth.py

import logging
from fastapi import APIRouter, HTTPException, Depends, Query, status
from fastapi.responses import RedirectResponse
from app.schemas.user import User, UserWithVerifications, GoogleLoginRequest, TokenResponse
from app.schemas.common import SuccessResponse
from app.services.user_service import UserService
from app.services.google_oauth_service import GoogleOAuthService
from app.core.auth import create_access_token
from app.core.config import get_settings
from app.core.dependencies import get_current_user, get_user_service
from app.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_google_service() -> GoogleOAuthService:
    return GoogleOAuthService()


@router.get(
    "/google",
    summary="Google login",
    description="Redirects to the Google consent screen.",
)
async def google_login(google_service: GoogleOAuthService = Depends(get_google_service)):
    if not get_settings().google_oauth_configured:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Google OAuth is not configured"
        )
    return RedirectResponse(google_service.get_login_url())


@router.get(
    "/google/callback",
    summary="Google OAuth callback",
    description="Exchanges the code, signs the user in and hands the token to the frontend.",
)
async def google_callback(
    code: str = Query(description="Authorization code"),
    google_service: GoogleOAuthService = Depends(get_google_service),
    user_service: UserService = Depends(get_user_service),
):
    try:
        profile = google_service.get_user_info_from_code(code)
        if not profile:
            raise HTTPException(status_code=400, detail="Google login failed")

        user = await user_service.upsert_user(google_service.to_user_upsert(profile))
        access_token = create_access_token(data={"sub": user.user_id})
        return RedirectResponse(f"{get_settings().frontend_url}#token={access_token}")

    except HTTPException:
        raise
    except Exception:
        logger.exception("Google callback failed")
        raise HTTPException(status_code=500, detail="Failed to complete Google login")


@router.post(
    "/login/google",
    response_model=TokenResponse,
    summary="Google login with id_token",
    description="Verifies a Google id_token issued to the frontend and returns an access token.",
)
async def login_google(
    payload: GoogleLoginRequest,
    google_service: GoogleOAuthService = Depends(get_google_service),
    user_service: UserService = Depends(get_user_service),
):
    try:
        token_info = google_service.verify_id_token(payload.id_token)
        user = await user_service.upsert_user(google_service.to_user_upsert(token_info))
        access_token = create_access_token(data={"sub": user.user_id})

        return TokenResponse(access_token=access_token, user=user)

    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Google id_token login failed")
        raise HTTPException(status_code=500, detail="Failed to log in with Google")


@router.get(
    "/user",
    response_model=UserWithVerifications,
    summary="Current user",
    description="The signed-in user with social-media verifications.",
)
async def get_auth_user(
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.get_user_with_verifications(current_user.user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/logout", response_model=SuccessResponse, summary="Logout")
async def logout():
    """Tokens are stateless; the client drops its copy"""
    return SuccessResponse(message="Logged out")
