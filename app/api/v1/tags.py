# app/api/v1/tags.py

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from app.schemas.tag import TrendingTag
from app.services.tag_service import TagService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_tag_service() -> TagService:
    return TagService()


@router.get("/trending", response_model=List[TrendingTag], summary="Trending tags")
async def get_trending_tags(
    limit: Optional[int] = Query(default=None, description="Maximum results, capped at 100"),
    tag_service: TagService = Depends(get_tag_service),
):
    try:
        return await tag_service.get_trending_tags(limit)
    except Exception:
        logger.exception("Fetching trending tags failed")
        raise HTTPException(status_code=500, detail="Failed to fetch trending tags")


@router.get(
    "",
    response_model=List[str],
    summary="All tags",
    description="Predefined tags followed by custom tags in use on public characters.",
)
async def get_tags(tag_service: TagService = Depends(get_tag_service)):
    try:
        return await tag_service.get_available_tags()
    except Exception:
        logger.exception("Fetching tags failed")
        raise HTTPException(status_code=500, detail="Failed to fetch tags")
