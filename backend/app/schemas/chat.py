"""Chat and material-generation request/response schemas."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Discriminator, Field

from app.i18n import Language, default_language
from app.schemas.material import MaterialResponse


class ChatMessage(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str

    class Config:
        frozen = True


class ChatRequest(BaseModel):
    messages: list[ChatMessage]
    language: Language = Field(default_factory=default_language)


class ChatResponse(BaseModel):
    content: str


class ClassChatRequest(ChatRequest):
    thread_id: Optional[str] = None


class ClassChatResponse(BaseModel):
    content: str
    material: Optional[MaterialResponse] = None


# ── Structured generation ───────────────────────────────────────────────────

class LessonPlanData(BaseModel):
    subject: str
    grade: str
    topic: str
    duration: int = Field(default=45, ge=1)
    objectives: list[str] = []


class PresentationData(BaseModel):
    topic: str
    grade: str
    slides: int = Field(default=10, ge=1, le=100)
    style: Literal["academic", "creative", "minimal"] = "academic"


class TestData(BaseModel):
    subject: str
    grade: str
    topic: str
    questions: int = Field(default=10, ge=1, le=100)
    difficulty: Literal["easy", "medium", "hard"] = "medium"


class _GenerateBase(BaseModel):
    # Save the result into this class when given
    class_id: Optional[str] = None
    language: Language = Field(default_factory=default_language)


class LessonPlanRequest(_GenerateBase):
    type: Literal["lesson_plan"]
    data: LessonPlanData


class PresentationRequest(_GenerateBase):
    type: Literal["presentation"]
    data: PresentationData


class TestRequest(_GenerateBase):
    type: Literal["test"]
    data: TestData


AnyGenerationRequest = Union[LessonPlanRequest, PresentationRequest, TestRequest]

GenerationRequest = Annotated[AnyGenerationRequest, Discriminator("type")]


class GenerateMaterialResponse(BaseModel):
    content: str
    material: Optional[MaterialResponse] = None
