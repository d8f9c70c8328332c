"""Material classifier — decides whether a chat exchange produced a material.

After each class-chat turn the teacher's prompt and the model's reply are
matched against keyword sets. The first category that matches, in the fixed
order below, decides the material type; the reply is then stored under that
type. Storing is best effort: a failing store never breaks the chat.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from app.i18n import Language, class_material_title
from app.schemas.material import MaterialCreate, MaterialResponse, MaterialType
from app.services.storage import Storage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Category:
    type: MaterialType
    prompt_keywords: tuple[str, ...]
    response_keywords: tuple[str, ...]

    def matches(self, prompt: str, response: str) -> bool:
        return (
            any(k in prompt for k in self.prompt_keywords)
            or any(k in response for k in self.response_keywords)
        )


# Priority order matters: an exchange often satisfies several categories
# (a lesson plan mentions tests, a presentation mentions the lesson).
CATEGORIES: tuple[Category, ...] = (
    Category(
        MaterialType.LESSON_PLAN,
        prompt_keywords=("план урока", "урок", "сабақ", "lesson plan", "lesson"),
        response_keywords=("план урока", "сабақ жоспары", "lesson plan"),
    ),
    Category(
        MaterialType.PRESENTATION,
        prompt_keywords=("презентац", "слайд", "presentation", "slide"),
        response_keywords=("презентац", "слайд", "presentation", "slide"),
    ),
    Category(
        MaterialType.TEST,
        prompt_keywords=("тест", "задание", "тапсырма", "test", "assignment", "quiz"),
        response_keywords=("тест", "вопрос", "сұрақ", "test", "question"),
    ),
    Category(
        MaterialType.DOCUMENT,
        prompt_keywords=("документ", "файл", "құжат", "document", "file"),
        response_keywords=("документ", "құжат", "document"),
    ),
)


def classify(prompt: str, response: str) -> Optional[MaterialType]:
    """Return the material type of a (prompt, response) pair, or None."""
    prompt_lower = prompt.lower()
    response_lower = response.lower()

    for category in CATEGORIES:
        if category.matches(prompt_lower, response_lower):
            return category.type
    return None


class MaterialClassifier:
    """Classifies chat exchanges and stores the matching ones as materials."""

    def __init__(self, storage: Storage, language: Language):
        self.storage = storage
        self.language = language

    def save_exchange(
        self,
        class_id: str,
        class_name: str,
        prompt: str,
        response: str,
        thread_id: Optional[str] = None,
    ) -> Optional[MaterialResponse]:
        """Store `response` as a material of the detected type.

        Returns the stored material, or None when nothing matched or the
        storage call failed.
        """
        material_type = classify(prompt, response)
        if material_type is None:
            return None

        request = MaterialCreate(
            type=material_type,
            title=class_material_title(material_type, class_name, self.language),
            content=response,
            ai_generated=True,
            thread_id=thread_id,
        )
        try:
            material = self.storage.create_material(class_id, request)
        except Exception as e:
            logger.error(f"Auto-save of {material_type.value} for class {class_id} failed: {e}")
            return None

        logger.info(f"Auto-saved {material_type.value} {material.id} for class {class_id}")
        return material
