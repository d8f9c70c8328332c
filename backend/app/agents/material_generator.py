"""Structured material generator — lesson plan, presentation and test forms."""

from app.agents.prompts import (
    LESSON_PLAN_PROMPTS,
    NO_OBJECTIVES,
    PRESENTATION_PROMPTS,
    TEST_PROMPTS,
)
from app.config import settings
from app.i18n import Language, material_label, system_prompt
from app.schemas.chat import (
    AnyGenerationRequest,
    LessonPlanRequest,
    PresentationRequest,
    TestRequest,
)
from app.schemas.material import MaterialCreate, MaterialType
from app.services.ai_client import chat


def build_generation_prompt(req: AnyGenerationRequest, language: Language) -> str:
    """Render the generation prompt for one of the form variants."""
    if isinstance(req, LessonPlanRequest):
        d = req.data
        objectives = [o.strip() for o in d.objectives if o.strip()]
        return LESSON_PLAN_PROMPTS[language].format(
            subject=d.subject,
            grade=d.grade,
            topic=d.topic,
            duration=d.duration,
            objectives=", ".join(objectives) if objectives else NO_OBJECTIVES[language],
        )
    if isinstance(req, PresentationRequest):
        d = req.data
        return PRESENTATION_PROMPTS[language].format(
            topic=d.topic,
            grade=d.grade,
            slides=d.slides,
            style=d.style,
            body_end=d.slides - 1,
        )
    if isinstance(req, TestRequest):
        d = req.data
        return TEST_PROMPTS[language].format(
            subject=d.subject,
            grade=d.grade,
            topic=d.topic,
            questions=d.questions,
            difficulty=d.difficulty,
        )
    raise ValueError(f"Unknown material request: {type(req).__name__}")


def generated_material(req: AnyGenerationRequest, content: str, language: Language) -> MaterialCreate:
    """Material record for a generated result, titled "<label>: <topic>"."""
    material_type = MaterialType(req.type)
    return MaterialCreate(
        type=material_type,
        title=f"{material_label(material_type, language)}: {req.data.topic}",
        content=content,
        ai_generated=True,
    )


async def generate_material(req: AnyGenerationRequest, language: Language) -> str:
    """Generate the material text. AIClientError propagates to the caller."""
    prompt = build_generation_prompt(req, language)
    return await chat(
        system=system_prompt(language),
        messages=[{"role": "user", "content": prompt}],
        max_tokens=settings.GENERATE_MAX_TOKENS,
        temperature=settings.CHAT_TEMPERATURE,
    )
