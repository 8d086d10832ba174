# app/schemas/tag.py

from pydantic import BaseModel, Field


class TrendingTag(BaseModel):
    tag: str = Field(description="Tag")
    count: int = Field(description="Public characters carrying the tag")
