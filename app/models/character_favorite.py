# app/models/character_favorite.py

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from app.database import Base


class CharacterFavoriteModel(Base):
    __tablename__ = "character_favorites"

    favorite_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    character_id = Column(
        Integer, ForeignKey("characters.character_id", ondelete="CASCADE"), nullable=False
    )
    created_at = Column(DateTime, default=func.current_timestamp())

    __table_args__ = (
        UniqueConstraint("user_id", "character_id", name="unique_character_favorite"),
    )

    def __repr__(self):
        return f"<CharacterFavoriteModel(user_id={self.user_id}, character_id={self.character_id})>"
