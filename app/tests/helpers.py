from typing import List, Optional

from app.core.auth import create_access_token
from app.database import SessionLocal
from app.models import (
    CharacterModel,
    UserFollowModel,
    UserFriendshipModel,
    UserModel,
    FriendshipStatus,
    Visibility,
)


def make_user(user_id: str, **fields) -> str:
    db = SessionLocal()
    try:
        fields.setdefault("email", f"{user_id}@example.com")
        db.add(UserModel(user_id=user_id, **fields))
        db.commit()
        return user_id
    finally:
        db.close()


def make_character(
    creator_id: str,
    name: str,
    tags: Optional[List[str]] = None,
    visibility: Visibility = Visibility.public,
    **fields,
) -> int:
    db = SessionLocal()
    try:
        character = CharacterModel(
            creator_id=creator_id,
            name=name,
            tags=tags if tags is not None else ["OC"],
            visibility=visibility,
            **fields,
        )
        db.add(character)
        db.commit()
        return character.character_id
    finally:
        db.close()


def make_friends(user_id_1: str, user_id_2: str) -> None:
    db = SessionLocal()
    try:
        db.add(
            UserFriendshipModel(
                requester_id=user_id_1,
                addressee_id=user_id_2,
                status=FriendshipStatus.accepted,
            )
        )
        db.commit()
    finally:
        db.close()


def make_follow(follower_id: str, following_id: str) -> None:
    db = SessionLocal()
    try:
        db.add(UserFollowModel(follower_id=follower_id, following_id=following_id))
        db.commit()
    finally:
        db.close()


def get_character(character_id: int) -> Optional[CharacterModel]:
    db = SessionLocal()
    try:
        return db.get(CharacterModel, character_id)
    finally:
        db.close()


def auth_headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': user_id})}"}
