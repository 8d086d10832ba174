# app/schemas/common.py

from typing import Optional
from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    success: bool = Field(default=True)
    message: Optional[str] = Field(default=None)
