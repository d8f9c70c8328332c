"""Localized strings used by the chat and material pipeline.

The language is always passed in explicitly; there is no process-wide
"current language".
"""

from enum import Enum

from app.config import settings
from app.schemas.material import MaterialType


class Language(str, Enum):
    RU = "ru"
    KK = "kk"
    EN = "en"


def default_language() -> Language:
    try:
        return Language(settings.DEFAULT_LANGUAGE)
    except ValueError:
        return Language.RU


MATERIAL_LABELS: dict[Language, dict[MaterialType, str]] = {
    Language.RU: {
        MaterialType.LESSON_PLAN: "План урока",
        MaterialType.PRESENTATION: "Презентация",
        MaterialType.TEST: "Тест",
        MaterialType.DOCUMENT: "Документ",
    },
    Language.KK: {
        MaterialType.LESSON_PLAN: "Сабақ жоспары",
        MaterialType.PRESENTATION: "Презентация",
        MaterialType.TEST: "Тест",
        MaterialType.DOCUMENT: "Құжат",
    },
    Language.EN: {
        MaterialType.LESSON_PLAN: "Lesson plan",
        MaterialType.PRESENTATION: "Presentation",
        MaterialType.TEST: "Test",
        MaterialType.DOCUMENT: "Document",
    },
}

# Title of a material saved automatically from a class chat
CLASS_TITLE_TEMPLATES: dict[Language, str] = {
    Language.RU: "{label} для {class_name}",
    Language.KK: "{label} ({class_name})",
    Language.EN: "{label} for {class_name}",
}

SYSTEM_PROMPTS: dict[Language, str] = {
    Language.RU: (
        "Ты - SmartUstaz, образовательный помощник для учителей. "
        "Ты помогаешь создавать планы уроков, презентации, тесты и другие учебные материалы. "
        "Отвечай на русском языке, будь дружелюбным и профессиональным."
    ),
    Language.KK: (
        "Сен SmartUstaz - мұғалімдерге арналған білім беру көмекшісісің. "
        "Сабақ жоспарларын, презентацияларды, тесттерді және басқа оқу материалдарын жасауға көмектесесің. "
        "Қазақ тілінде жауап бер, мейірімді және кәсіби бол."
    ),
    Language.EN: (
        "You are SmartUstaz, an educational assistant for teachers. "
        "You help create lesson plans, presentations, tests and other learning materials. "
        "Answer in English, be friendly and professional."
    ),
}

# {count} is the requested number of slides, {outline} the numbered skeleton
SLIDE_INSTRUCTIONS: dict[Language, str] = {
    Language.RU: (
        "\n\nКРИТИЧЕСКИ ВАЖНО: количество слайдов - ровно {count}, не больше и не меньше!\n"
        "Пронумеруй каждый слайд: \"Слайд 1:\", \"Слайд 2:\" и так далее до \"Слайд {count}:\".\n"
        "У каждого слайда должен быть заголовок и подробное содержание.\n\n"
        "ФОРМАТ:\n{outline}\n\n"
        "ОБЯЗАТЕЛЬНО СОЗДАЙ ВСЕ {count} СЛАЙДОВ ПОЛНОСТЬЮ! НЕ ОСТАНАВЛИВАЙСЯ НА СЕРЕДИНЕ!"
    ),
    Language.KK: (
        "\n\nӨТЕ МАҢЫЗДЫ: слайдтар саны - дәл {count}, артық та, кем де емес!\n"
        "Әр слайдты нөмірле: \"Слайд 1:\", \"Слайд 2:\" және т.с.с. \"Слайд {count}:\" дейін.\n"
        "Әр слайдтың тақырыбы мен толық мазмұны болуы керек.\n\n"
        "ПІШІМ:\n{outline}\n\n"
        "БАРЛЫҚ {count} СЛАЙДТЫ ТОЛЫҚ ЖАСА! ОРТАСЫНДА ТОҚТАМА!"
    ),
    Language.EN: (
        "\n\nCRITICAL: the number of slides is exactly {count}, no more and no fewer!\n"
        "Number every slide: \"Slide 1:\", \"Slide 2:\" and so on up to \"Slide {count}:\".\n"
        "Every slide must have a title and detailed content.\n\n"
        "FORMAT:\n{outline}\n\n"
        "YOU MUST WRITE ALL {count} SLIDES IN FULL! DO NOT STOP HALFWAY!"
    ),
}

SLIDE_OUTLINE_LINES: dict[Language, str] = {
    Language.RU: "Слайд {number}: [Заголовок]\n[Содержание]",
    Language.KK: "Слайд {number}: [Тақырып]\n[Мазмұны]",
    Language.EN: "Slide {number}: [Title]\n[Content]",
}

AI_FALLBACK_REPLY: dict[Language, str] = {
    Language.RU: "Извините, произошла ошибка.",
    Language.KK: "Кешіріңіз, қате орын алды.",
    Language.EN: "Sorry, something went wrong.",
}


def material_label(material_type: MaterialType, language: Language) -> str:
    return MATERIAL_LABELS[language][material_type]


def class_material_title(material_type: MaterialType, class_name: str, language: Language) -> str:
    """Title for a material auto-saved from a chat in `class_name`, e.g. "Lesson plan for 9-A"."""
    return CLASS_TITLE_TEMPLATES[language].format(
        label=material_label(material_type, language),
        class_name=class_name,
    )


def system_prompt(language: Language) -> str:
    return SYSTEM_PROMPTS[language]
