# app/core/tags.py

from typing import Iterable, List

# Original Character, mandatory on every character
DEFAULT_TAG = "OC"

PREDEFINED_TAGS = [
    # character types
    DEFAULT_TAG,
    "Anime",
    "Furry",
    "Human",
    "Fantasy",
    "Sci-Fi",
    "Horror",
    "Romance",
    "Adventure",
    "Mystery",
    # character traits
    "Cute",
    "Dark",
    "Mysterious",
    "Funny",
    "Serious",
    "Friendly",
    "Villain",
    "Hero",
    "Anti-Hero",
    "Magical",
]


def is_valid_tag(tag: str) -> bool:
    return tag in PREDEFINED_TAGS


def get_available_tags() -> List[str]:
    return list(PREDEFINED_TAGS)


def normalize_tags(tags: Iterable[str]) -> List[str]:
    """Trim, drop blanks and duplicates, and make sure OC is present.

    OC goes to the front when it has to be added; an OC the caller already
    placed keeps its position.
    """
    result: List[str] = []
    for tag in tags or []:
        tag = tag.strip()
        if tag and tag not in result:
            result.append(tag)
    if DEFAULT_TAG not in result:
        result.insert(0, DEFAULT_TAG)
    return result
