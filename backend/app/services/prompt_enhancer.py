"""Presentation-request enhancer.

Chat models tend to stop after a handful of slides. When the teacher's last
message asks for a presentation, the message is rewritten so the model is
told the exact slide count and the numbered format it must produce.
"""

import re
from dataclasses import dataclass

from app.config import settings
from app.i18n import Language, SLIDE_INSTRUCTIONS, SLIDE_OUTLINE_LINES
from app.schemas.chat import ChatMessage

PRESENTATION_KEYWORDS = [
    "presentation", "slide",
    "презентац", "слайд",
]

# "<integer> slide(s)" in any supported language, e.g. "7 slides", "10 слайдов"
SLIDE_COUNT_PATTERN = re.compile(r"(\d+)\s*(?:slides?|слайд\w*)")


@dataclass(frozen=True)
class EnhancementResult:
    content: str
    slide_count: int


def is_presentation_request(text: str) -> bool:
    text_lower = text.lower()
    return any(keyword in text_lower for keyword in PRESENTATION_KEYWORDS)


def extract_slide_count(text: str, default: int | None = None) -> int:
    """Return the number in the first "<integer> slides" phrase of `text`.

    Falls back to `default` (settings.DEFAULT_SLIDE_COUNT) when no count is
    given or the count is below 1. Counts above settings.MAX_SLIDE_COUNT are
    clamped to it.
    """
    if default is None:
        default = settings.DEFAULT_SLIDE_COUNT
    max_count = settings.MAX_SLIDE_COUNT

    match = SLIDE_COUNT_PATTERN.search(text.lower())
    if not match:
        return default

    # Over-long digit strings are clamped without int() conversion
    digits = match.group(1).lstrip("0")
    if len(digits) > len(str(max_count)):
        return max_count

    count = int(digits or "0")
    if count < 1:
        return default
    return min(count, max_count)


def slide_outline(count: int, language: Language) -> str:
    line = SLIDE_OUTLINE_LINES[language]
    return "\n\n".join(line.format(number=n) for n in range(1, count + 1))


def enhance_content(content: str, language: Language) -> EnhancementResult:
    """Append the exact-slide-count instruction block to `content`."""
    count = extract_slide_count(content)
    instruction = SLIDE_INSTRUCTIONS[language].format(
        count=count,
        outline=slide_outline(count, language),
    )
    return EnhancementResult(content=content + instruction, slide_count=count)


def enhance_messages(messages: list[ChatMessage], language: Language) -> list[ChatMessage]:
    """Rewrite the last message when it is a user presentation request.

    Returns a new list with only the last element replaced; any other
    conversation is returned as-is. The caller's list is never mutated.
    """
    if not messages:
        return messages

    last = messages[-1]
    if last.role != "user" or not is_presentation_request(last.content):
        return messages

    result = enhance_content(last.content, language)
    return [*messages[:-1], last.model_copy(update={"content": result.content})]
