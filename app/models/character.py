# app/models/character.py

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum, JSON
from sqlalchemy.sql import func
from app.database import Base
from app.models.user_profile import Visibility


class CharacterModel(Base):
    __tablename__ = "characters"

    character_id = Column(Integer, primary_key=True, autoincrement=True)
    creator_id = Column(
        String(255), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    nickname = Column(String(255), nullable=True)
    personality = Column(Text, nullable=True)
    about = Column(Text, nullable=True)
    avatar_url = Column(Text, nullable=True)
    visibility = Column(
        Enum(Visibility, native_enum=False), default=Visibility.public, nullable=False
    )
    # always contains "OC"
    tags = Column(JSON, default=list, nullable=False)

    # kept equal to the row counts of the matching join tables
    likes_count = Column(Integer, default=0, nullable=False)
    favorites_count = Column(Integer, default=0, nullable=False)
    views_count = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime, default=func.current_timestamp())
    updated_at = Column(DateTime, default=func.current_timestamp(), onupdate=func.current_timestamp())

    def __repr__(self):
        return f"<CharacterModel(id={self.character_id}, name='{self.name}')>"
