# app/services/character_service.py

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, exists, or_
from app.models.character import CharacterModel
from app.models.character_favorite import CharacterFavoriteModel
from app.models.recently_viewed import RecentlyViewedModel
from app.models.user import UserModel
from app.models.user_follow import UserFollowModel
from app.models.user_profile import Visibility
from app.schemas.character import (
    Character,
    CharacterCreate,
    CharacterUpdate,
    CharacterWithCreator,
)
from app.schemas.user import UserPublic
from app.core.exceptions import ForbiddenError, NotFoundError
from app.core.tags import normalize_tags
from app.database import SessionLocal, json_array_elements
from app.services.interaction_service import InteractionService

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 20
MAX_LIST_LIMIT = 100
DEFAULT_RECENT_LIMIT = 10
MAX_RECENT_LIMIT = 20


def clamp_limit(limit: Optional[int], default: int, maximum: int) -> int:
    """Fall back to the default for missing or non-positive limits, cap at the maximum"""
    if not limit or limit < 1:
        return default
    return min(limit, maximum)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def tag_clause(tag: str):
    """Exact, case-sensitive membership in the character's tag list"""
    elements = json_array_elements(CharacterModel.tags)
    return exists(select(elements.c.value).where(elements.c.value == tag))


class CharacterService:

    def __init__(self):
        self.interaction_service = InteractionService()

    def _get_db(self) -> Session:
        """Open a database session"""
        return SessionLocal()

    async def create_character(self, creator_id: str, data: CharacterCreate) -> Character:
        db = self._get_db()
        try:
            character = CharacterModel(
                creator_id=creator_id,
                name=data.name,
                nickname=data.nickname,
                personality=data.personality,
                about=data.about,
                avatar_url=data.avatar_url,
                visibility=data.visibility,
                tags=normalize_tags(data.tags),
            )
            db.add(character)
            db.commit()
            db.refresh(character)
            logger.info("Character %s created by %s", character.character_id, creator_id)
            return Character.model_validate(character)

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def update_character(
        self, character_id: int, user_id: str, updates: CharacterUpdate
    ) -> Character:
        """Owner-only partial update; a supplied tag list gets OC back if it was dropped"""
        db = self._get_db()
        try:
            character = self._get_owned_character_with_db(character_id, user_id, db)

            for field, value in updates.model_dump(exclude_unset=True).items():
                if field == "tags":
                    value = normalize_tags(value or [])
                elif value is None and field in ("name", "visibility"):
                    continue
                setattr(character, field, value)

            db.commit()
            db.refresh(character)
            return Character.model_validate(character)

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def delete_character(self, character_id: int, user_id: str) -> bool:
        db = self._get_db()
        try:
            character = self._get_owned_character_with_db(character_id, user_id, db)
            db.delete(character)
            db.commit()
            logger.info("Character %s deleted by %s", character_id, user_id)
            return True
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def get_character_with_creator(
        self, character_id: int, viewer_id: Optional[str] = None
    ) -> CharacterWithCreator:
        """Character detail; an authenticated non-owner's visit is recorded as a view"""
        db = self._get_db()
        try:
            character = self.interaction_service.get_visible_character_with_db(
                character_id, viewer_id, db
            )

            if viewer_id and viewer_id != character.creator_id:
                self.interaction_service.add_recently_viewed_with_db(viewer_id, character_id, db)
                db.commit()
                db.refresh(character)

            creator = db.get(UserModel, character.creator_id)
            return self._with_creator(character, creator)

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def get_user_characters(
        self, user_id: str, viewer_id: Optional[str] = None
    ) -> List[Character]:
        """All of a user's characters for the owner, public ones for everybody else"""
        db = self._get_db()
        try:
            stmt = select(CharacterModel).where(CharacterModel.creator_id == user_id)
            if viewer_id != user_id:
                stmt = stmt.where(CharacterModel.visibility == Visibility.public)
            stmt = stmt.order_by(
                CharacterModel.created_at.desc(), CharacterModel.character_id.desc()
            )
            return [Character.model_validate(c) for c in db.execute(stmt).scalars().all()]
        finally:
            db.close()

    async def get_public_characters(
        self, limit: int = DEFAULT_LIST_LIMIT
    ) -> List[CharacterWithCreator]:
        stmt = self._public_with_creator_stmt().order_by(
            CharacterModel.created_at.desc(), CharacterModel.character_id.desc()
        )
        return self._fetch_with_creator(stmt, clamp_limit(limit, DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT))

    async def get_featured_characters(
        self, limit: int = DEFAULT_LIST_LIMIT
    ) -> List[CharacterWithCreator]:
        stmt = self._public_with_creator_stmt().order_by(
            CharacterModel.likes_count.desc(), CharacterModel.character_id.desc()
        )
        return self._fetch_with_creator(stmt, clamp_limit(limit, DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT))

    async def get_following_characters(
        self, user_id: str, limit: int = DEFAULT_LIST_LIMIT
    ) -> List[CharacterWithCreator]:
        """Public characters by creators the user follows"""
        stmt = (
            self._public_with_creator_stmt()
            .join(UserFollowModel, UserFollowModel.following_id == CharacterModel.creator_id)
            .where(UserFollowModel.follower_id == user_id)
            .order_by(CharacterModel.created_at.desc(), CharacterModel.character_id.desc())
        )
        return self._fetch_with_creator(stmt, clamp_limit(limit, DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT))

    async def search_characters(
        self, query: str, limit: int = DEFAULT_LIST_LIMIT
    ) -> List[CharacterWithCreator]:
        """Name or about substring (case-insensitive), or an exact tag"""
        query = (query or "").strip()
        if not query:
            return []

        pattern = f"%{_escape_like(query)}%"
        stmt = (
            self._public_with_creator_stmt()
            .where(
                or_(
                    CharacterModel.name.ilike(pattern, escape="\\"),
                    CharacterModel.about.ilike(pattern, escape="\\"),
                    tag_clause(query),
                )
            )
            .order_by(CharacterModel.likes_count.desc(), CharacterModel.character_id.desc())
        )
        return self._fetch_with_creator(stmt, clamp_limit(limit, DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT))

    async def get_characters_by_tags(
        self, tags: List[str], limit: int = DEFAULT_LIST_LIMIT
    ) -> List[CharacterWithCreator]:
        """Public characters carrying any of the tags"""
        tags = [t.strip() for t in tags or [] if t and t.strip()]
        if not tags:
            return []

        stmt = (
            self._public_with_creator_stmt()
            .where(or_(*[tag_clause(tag) for tag in tags]))
            .order_by(CharacterModel.likes_count.desc(), CharacterModel.character_id.desc())
        )
        return self._fetch_with_creator(stmt, clamp_limit(limit, DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT))

    async def get_recently_viewed(
        self, user_id: str, limit: int = DEFAULT_RECENT_LIMIT
    ) -> List[CharacterWithCreator]:
        """The user's viewed characters, latest view first; ones that went private drop out"""
        stmt = (
            select(CharacterModel, UserModel)
            .join(RecentlyViewedModel, RecentlyViewedModel.character_id == CharacterModel.character_id)
            .join(UserModel, UserModel.user_id == CharacterModel.creator_id)
            .where(RecentlyViewedModel.user_id == user_id)
            .where(
                or_(
                    CharacterModel.visibility == Visibility.public,
                    CharacterModel.creator_id == user_id,
                )
            )
            .order_by(RecentlyViewedModel.viewed_at.desc(), RecentlyViewedModel.view_id.desc())
        )
        return self._fetch_with_creator(
            stmt, clamp_limit(limit, DEFAULT_RECENT_LIMIT, MAX_RECENT_LIMIT)
        )

    async def get_user_favorites(self, user_id: str) -> List[CharacterWithCreator]:
        stmt = (
            select(CharacterModel, UserModel)
            .join(
                CharacterFavoriteModel,
                CharacterFavoriteModel.character_id == CharacterModel.character_id,
            )
            .join(UserModel, UserModel.user_id == CharacterModel.creator_id)
            .where(CharacterFavoriteModel.user_id == user_id)
            .where(
                or_(
                    CharacterModel.visibility == Visibility.public,
                    CharacterModel.creator_id == user_id,
                )
            )
            .order_by(
                CharacterFavoriteModel.created_at.desc(), CharacterFavoriteModel.favorite_id.desc()
            )
        )
        return self._fetch_with_creator(stmt)

    def _public_with_creator_stmt(self):
        return (
            select(CharacterModel, UserModel)
            .join(UserModel, UserModel.user_id == CharacterModel.creator_id)
            .where(CharacterModel.visibility == Visibility.public)
        )

    def _fetch_with_creator(self, stmt, limit: Optional[int] = None) -> List[CharacterWithCreator]:
        if limit is not None:
            stmt = stmt.limit(limit)
        db = self._get_db()
        try:
            return [self._with_creator(c, u) for c, u in db.execute(stmt).all()]
        finally:
            db.close()

    def _with_creator(self, character: CharacterModel, creator: UserModel) -> CharacterWithCreator:
        return CharacterWithCreator(
            **Character.model_validate(character).model_dump(),
            creator=UserPublic.model_validate(creator),
        )

    def _get_owned_character_with_db(
        self, character_id: int, user_id: str, db: Session
    ) -> CharacterModel:
        character = db.get(CharacterModel, character_id)
        if not character:
            raise NotFoundError("Character not found")
        if character.creator_id != user_id:
            raise ForbiddenError("Only the owner can modify this character")
        return character
