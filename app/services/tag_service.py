# app/services/tag_service.py

from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy import select, func, distinct, true
from app.models.character import CharacterModel
from app.models.user_profile import Visibility
from app.schemas.tag import TrendingTag
from app.core.tags import get_available_tags
from app.database import SessionLocal, json_array_elements
from app.services.character_service import clamp_limit

DEFAULT_TRENDING_LIMIT = 20
MAX_TRENDING_LIMIT = 100


class TagService:

    def __init__(self):
        pass

    def _get_db(self) -> Session:
        return SessionLocal()

    async def get_trending_tags(self, limit: int = DEFAULT_TRENDING_LIMIT) -> List[TrendingTag]:
        """Tag usage over public characters, most used first, ties alphabetical"""
        limit = clamp_limit(limit, DEFAULT_TRENDING_LIMIT, MAX_TRENDING_LIMIT)
        return [
            TrendingTag(tag=tag, count=count) for tag, count in self._count_public_tags(limit)
        ]

    async def get_all_tags(self) -> List[str]:
        """Distinct tags used on public characters"""
        return sorted(tag for tag, _ in self._count_public_tags())

    async def get_available_tags(self) -> List[str]:
        """Predefined tags first, then custom ones in use"""
        tags = get_available_tags()
        for tag in await self.get_all_tags():
            if tag not in tags:
                tags.append(tag)
        return tags

    def _count_public_tags(self, limit: Optional[int] = None) -> List[Tuple[str, int]]:
        db = self._get_db()
        try:
            tag = json_array_elements(CharacterModel.tags)
            # a tag counts once per character
            usage = func.count(distinct(CharacterModel.character_id))
            stmt = (
                select(tag.c.value, usage)
                .select_from(CharacterModel)
                .join(tag, true())
                .where(CharacterModel.visibility == Visibility.public)
                .group_by(tag.c.value)
                .order_by(usage.desc(), tag.c.value)
            )
            if limit:
                stmt = stmt.limit(limit)
            return [(value, count) for value, count in db.execute(stmt).all()]
        finally:
            db.close()
