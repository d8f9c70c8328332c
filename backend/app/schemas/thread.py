"""Thread and message request/response schemas."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

Role = Literal["user", "assistant", "system"]


class ThreadCreate(BaseModel):
    title: Optional[str] = None


class ThreadUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)


class ThreadResponse(BaseModel):
    id: str
    class_id: str
    title: str
    created_at: str
    updated_at: str

    class Config:
        from_attributes = True


class ThreadListResponse(BaseModel):
    threads: list[ThreadResponse]


class MessageCreate(BaseModel):
    role: Role
    content: str


class MessageResponse(BaseModel):
    id: str
    thread_id: str
    role: Role
    content: str
    created_at: str

    class Config:
        from_attributes = True


class MessageListResponse(BaseModel):
    messages: list[MessageResponse]
