# app/api/v1/characters.py

import logging
from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Path, Query
from app.schemas.user import User
from app.schemas.character import (
    Character,
    CharacterCreate,
    CharacterUpdate,
    CharacterWithCreator,
    CharacterStatus,
    LikeToggleResponse,
    FavoriteToggleResponse,
)
from app.schemas.common import SuccessResponse
from app.services.character_service import CharacterService
from app.services.interaction_service import InteractionService
from app.core.dependencies import get_current_user, get_optional_current_user
from app.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_character_service() -> CharacterService:
    return CharacterService()


def get_interaction_service() -> InteractionService:
    return InteractionService()


@router.get(
    "",
    response_model=List[CharacterWithCreator],
    summary="Discover characters",
    description=(
        "Public characters. `query` searches names, descriptions and tags; `tags` "
        "(comma separated) matches any of them; otherwise `type` picks newest or most liked."
    ),
)
async def list_characters(
    type: Literal["public", "featured"] = Query(default="public", description="Listing"),
    limit: Optional[int] = Query(default=None, description="Maximum results, capped at 100"),
    tags: Optional[str] = Query(default=None, description="Comma separated tags"),
    query: Optional[str] = Query(default=None, description="Search text"),
    character_service: CharacterService = Depends(get_character_service),
):
    try:
        if query:
            return await character_service.search_characters(query, limit)
        if tags:
            return await character_service.get_characters_by_tags(tags.split(","), limit)
        if type == "featured":
            return await character_service.get_featured_characters(limit)
        return await character_service.get_public_characters(limit)
    except Exception:
        logger.exception("Listing characters failed")
        raise HTTPException(status_code=500, detail="Failed to fetch characters")


@router.get(
    "/following/feed",
    response_model=List[CharacterWithCreator],
    summary="Following feed",
)
async def get_following_feed(
    limit: Optional[int] = Query(default=None, description="Maximum results, capped at 100"),
    current_user: User = Depends(get_current_user),
    character_service: CharacterService = Depends(get_character_service),
):
    try:
        return await character_service.get_following_characters(current_user.user_id, limit)
    except Exception:
        logger.exception("Fetching following feed failed")
        raise HTTPException(status_code=500, detail="Failed to fetch following feed")


@router.get(
    "/recently-viewed",
    response_model=List[CharacterWithCreator],
    summary="Recently viewed",
)
async def get_recently_viewed(
    limit: Optional[int] = Query(default=None, description="Maximum results, capped at 20"),
    current_user: User = Depends(get_current_user),
    character_service: CharacterService = Depends(get_character_service),
):
    try:
        return await character_service.get_recently_viewed(current_user.user_id, limit)
    except Exception:
        logger.exception("Fetching recently viewed failed")
        raise HTTPException(status_code=500, detail="Failed to fetch recently viewed")


@router.post("", response_model=Character, summary="Create character")
async def create_character(
    payload: CharacterCreate,
    current_user: User = Depends(get_current_user),
    character_service: CharacterService = Depends(get_character_service),
):
    try:
        return await character_service.create_character(current_user.user_id, payload)
    except Exception:
        logger.exception("Creating character failed")
        raise HTTPException(status_code=500, detail="Failed to create character")


@router.get(
    "/{character_id}",
    response_model=CharacterWithCreator,
    summary="Character detail",
    description="Signed-in visitors other than the owner get the view recorded.",
)
async def get_character(
    character_id: int = Path(description="Character ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    character_service: CharacterService = Depends(get_character_service),
):
    try:
        viewer_id = current_user.user_id if current_user else None
        return await character_service.get_character_with_creator(character_id, viewer_id)
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Fetching character %s failed", character_id)
        raise HTTPException(status_code=500, detail="Failed to fetch character")


@router.patch("/{character_id}", response_model=Character, summary="Update character")
async def update_character(
    payload: CharacterUpdate,
    character_id: int = Path(description="Character ID"),
    current_user: User = Depends(get_current_user),
    character_service: CharacterService = Depends(get_character_service),
):
    try:
        return await character_service.update_character(
            character_id, current_user.user_id, payload
        )
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Updating character %s failed", character_id)
        raise HTTPException(status_code=500, detail="Failed to update character")


@router.delete("/{character_id}", response_model=SuccessResponse, summary="Delete character")
async def delete_character(
    character_id: int = Path(description="Character ID"),
    current_user: User = Depends(get_current_user),
    character_service: CharacterService = Depends(get_character_service),
):
    try:
        await character_service.delete_character(character_id, current_user.user_id)
        return SuccessResponse()
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Deleting character %s failed", character_id)
        raise HTTPException(status_code=500, detail="Failed to delete character")


@router.post("/{character_id}/like", response_model=LikeToggleResponse, summary="Toggle like")
async def toggle_like(
    character_id: int = Path(description="Character ID"),
    current_user: User = Depends(get_current_user),
    interaction_service: InteractionService = Depends(get_interaction_service),
):
    try:
        liked = await interaction_service.toggle_like(current_user.user_id, character_id)
        return LikeToggleResponse(liked=liked)
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Toggling like failed")
        raise HTTPException(status_code=500, detail="Failed to toggle like")


@router.post(
    "/{character_id}/favorite",
    response_model=FavoriteToggleResponse,
    summary="Toggle favorite",
)
async def toggle_favorite(
    character_id: int = Path(description="Character ID"),
    current_user: User = Depends(get_current_user),
    interaction_service: InteractionService = Depends(get_interaction_service),
):
    try:
        favorited = await interaction_service.toggle_favorite(current_user.user_id, character_id)
        return FavoriteToggleResponse(favorited=favorited)
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Toggling favorite failed")
        raise HTTPException(status_code=500, detail="Failed to toggle favorite")


@router.get("/{character_id}/status", response_model=CharacterStatus, summary="Like/favorite status")
async def get_character_status(
    character_id: int = Path(description="Character ID"),
    current_user: User = Depends(get_current_user),
    interaction_service: InteractionService = Depends(get_interaction_service),
):
    try:
        return await interaction_service.get_character_status(current_user.user_id, character_id)
    except ServiceError as e:
        raise e.to_http()
    except Exception:
        logger.exception("Fetching character status failed")
        raise HTTPException(status_code=500, detail="Failed to fetch character status")
