# app/services/interaction_service.py

import logging
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, update, delete, and_
from app.models.character import CharacterModel
from app.models.character_like import CharacterLikeModel
from app.models.character_favorite import CharacterFavoriteModel
from app.models.recently_viewed import RecentlyViewedModel
from app.models.user_profile import Visibility
from app.schemas.character import CharacterStatus
from app.core.exceptions import NotFoundError
from app.database import SessionLocal, insert_or_ignore

logger = logging.getLogger(__name__)


def is_visible_to(character: CharacterModel, viewer_id: Optional[str]) -> bool:
    """Public characters are visible to everyone, the rest to their owner only"""
    return character.visibility == Visibility.public or character.creator_id == viewer_id


class InteractionService:
    """Likes, favorites and views.

    Every join-table write is paired with the matching counter update in the
    same transaction, and the counter only moves when a row was really
    inserted or deleted, so ``likes_count``, ``favorites_count`` and
    ``views_count`` always equal the row counts behind them.
    """

    def __init__(self):
        pass

    def _get_db(self) -> Session:
        return SessionLocal()

    async def toggle_like(self, user_id: str, character_id: int) -> bool:
        return await self._toggle(user_id, character_id, CharacterLikeModel, CharacterModel.likes_count)

    async def toggle_favorite(self, user_id: str, character_id: int) -> bool:
        return await self._toggle(
            user_id, character_id, CharacterFavoriteModel, CharacterModel.favorites_count
        )

    async def add_recently_viewed(self, user_id: str, character_id: int) -> None:
        db = self._get_db()
        try:
            self.get_visible_character_with_db(character_id, user_id, db)
            self.add_recently_viewed_with_db(user_id, character_id, db)
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def is_character_liked(self, user_id: str, character_id: int) -> bool:
        db = self._get_db()
        try:
            return self._has_row_with_db(CharacterLikeModel, user_id, character_id, db)
        finally:
            db.close()

    async def is_character_favorited(self, user_id: str, character_id: int) -> bool:
        db = self._get_db()
        try:
            return self._has_row_with_db(CharacterFavoriteModel, user_id, character_id, db)
        finally:
            db.close()

    async def get_character_status(self, user_id: str, character_id: int) -> CharacterStatus:
        db = self._get_db()
        try:
            self.get_visible_character_with_db(character_id, user_id, db)
            return CharacterStatus(
                liked=self._has_row_with_db(CharacterLikeModel, user_id, character_id, db),
                favorited=self._has_row_with_db(CharacterFavoriteModel, user_id, character_id, db),
            )
        finally:
            db.close()

    def add_recently_viewed_with_db(self, user_id: str, character_id: int, db: Session) -> None:
        """Delete-then-insert so the view moves to the top; views_count counts distinct viewers"""
        result = db.execute(
            delete(RecentlyViewedModel).where(
                and_(
                    RecentlyViewedModel.user_id == user_id,
                    RecentlyViewedModel.character_id == character_id,
                )
            )
        )
        inserted = insert_or_ignore(
            db, RecentlyViewedModel(user_id=user_id, character_id=character_id)
        )
        if inserted and result.rowcount == 0:
            self._bump_counter_with_db(character_id, CharacterModel.views_count, 1, db)

    def get_visible_character_with_db(
        self, character_id: int, viewer_id: Optional[str], db: Session
    ) -> CharacterModel:
        character = db.get(CharacterModel, character_id)
        if not character or not is_visible_to(character, viewer_id):
            raise NotFoundError("Character not found")
        return character

    async def _toggle(self, user_id: str, character_id: int, join_model, counter) -> bool:
        db = self._get_db()
        try:
            self.get_visible_character_with_db(character_id, user_id, db)

            if self._has_row_with_db(join_model, user_id, character_id, db):
                result = db.execute(
                    delete(join_model).where(
                        and_(
                            join_model.user_id == user_id,
                            join_model.character_id == character_id,
                        )
                    )
                )
                if result.rowcount > 0:
                    self._bump_counter_with_db(character_id, counter, -1, db)
                active = False
            else:
                if insert_or_ignore(db, join_model(user_id=user_id, character_id=character_id)):
                    self._bump_counter_with_db(character_id, counter, 1, db)
                active = True

            db.commit()
            return active

        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def _bump_counter_with_db(self, character_id: int, counter, delta: int, db: Session) -> None:
        db.execute(
            update(CharacterModel)
            .where(CharacterModel.character_id == character_id)
            .values({counter.key: counter + delta})
            .execution_options(synchronize_session=False)
        )

    def _has_row_with_db(self, join_model, user_id: str, character_id: int, db: Session) -> bool:
        stmt = select(join_model).where(
            and_(
                join_model.user_id == user_id,
                join_model.character_id == character_id,
            )
        )
        return db.execute(stmt).first() is not None
