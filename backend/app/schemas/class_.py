"""Class request/response schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class ClassCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)


class ClassUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)


class ClassResponse(BaseModel):
    id: str
    user_id: str
    title: str
    created_at: str

    class Config:
        from_attributes = True


class ClassListResponse(BaseModel):
    classes: list[ClassResponse]
