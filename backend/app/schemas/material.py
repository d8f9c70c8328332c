"""Material request/response schemas."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MaterialType(str, Enum):
    LESSON_PLAN = "lesson_plan"
    PRESENTATION = "presentation"
    TEST = "test"
    DOCUMENT = "document"


class MaterialCreate(BaseModel):
    type: MaterialType
    title: str = Field(min_length=1, max_length=255)
    content: Optional[str] = None
    file_url: Optional[str] = None
    ai_generated: bool = False
    thread_id: Optional[str] = None


class MaterialUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = None
    file_url: Optional[str] = None


class MaterialResponse(BaseModel):
    id: str
    class_id: str
    thread_id: Optional[str] = None
    type: MaterialType
    title: str
    content: Optional[str] = None
    file_url: Optional[str] = None
    ai_generated: bool
    created_at: str
    updated_at: str

    class Config:
        from_attributes = True


class MaterialListResponse(BaseModel):
    materials: list[MaterialResponse]
    total: int
