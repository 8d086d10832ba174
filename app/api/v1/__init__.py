# app/api/v1/__init__.py

from fastapi import APIRouter
from . import (
    admin,
    auth,
    characters,
    creator,
    friend_requests,
    messages,
    social_verification,
    system,
    tags,
    user_settings,
    users,
)

api_router = APIRouter()

api_router.include_router(system.router, prefix="/system", tags=["System"])
api_router.include_router(auth.router, prefix="/auth", tags=["Auth"])
api_router.include_router(user_settings.router, prefix="/user", tags=["Settings"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(characters.router, prefix="/characters", tags=["Characters"])
api_router.include_router(friend_requests.router, prefix="/friend-requests", tags=["Friends"])
api_router.include_router(messages.router, prefix="/messages", tags=["Messages"])
api_router.include_router(creator.router, prefix="/creator", tags=["Creators"])
api_router.include_router(creator.directory_router, prefix="/creators", tags=["Creators"])
api_router.include_router(
    social_verification.router, prefix="/social-verification", tags=["Verification"]
)
api_router.include_router(tags.router, prefix="/tags", tags=["Tags"])
api_router.include_router(admin.router, prefix="/admin", tags=["Admin"])
