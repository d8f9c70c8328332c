"""
Chat turn pipeline.

  user messages → prompt enhancer → LLM (localized system prompt) → reply
                                                          ↓ (class chat)
                                  thread messages + material classifier → storage

If the LLM call fails the error propagates; nothing is stored or classified
for that turn.
"""

from dataclasses import dataclass
from typing import Optional

from app.config import settings
from app.i18n import AI_FALLBACK_REPLY, Language, system_prompt
from app.schemas.chat import ChatMessage
from app.schemas.class_ import ClassResponse
from app.schemas.material import MaterialResponse
from app.schemas.thread import MessageCreate
from app.services.ai_client import chat
from app.services.material_classifier import MaterialClassifier
from app.services.prompt_enhancer import enhance_messages
from app.services.storage import Storage


@dataclass
class ClassChatResult:
    content: str
    material: Optional[MaterialResponse] = None


async def run_chat_turn(messages: list[ChatMessage], language: Language) -> str:
    """Send one conversation turn to the LLM and return its reply."""
    outgoing = enhance_messages(messages, language)
    reply = await chat(
        system=system_prompt(language),
        messages=[m.model_dump() for m in outgoing],
        max_tokens=settings.CHAT_MAX_TOKENS,
        temperature=settings.CHAT_TEMPERATURE,
    )
    return reply or AI_FALLBACK_REPLY[language]


def _last_user_prompt(messages: list[ChatMessage]) -> str:
    for m in reversed(messages):
        if m.role == "user":
            return m.content
    return ""


async def run_class_chat_turn(
    storage: Storage,
    cls: ClassResponse,
    messages: list[ChatMessage],
    language: Language,
    thread_id: Optional[str] = None,
) -> ClassChatResult:
    """Chat turn inside a class: store the exchange and auto-save materials.

    The thread (when given) receives the teacher's original message, not the
    enhanced one.
    """
    reply = await run_chat_turn(messages, language)
    prompt = _last_user_prompt(messages)

    if thread_id:
        if prompt:
            storage.create_message(thread_id, MessageCreate(role="user", content=prompt))
        storage.create_message(thread_id, MessageCreate(role="assistant", content=reply))

    classifier = MaterialClassifier(storage, language)
    material = classifier.save_exchange(
        class_id=cls.id,
        class_name=cls.title,
        prompt=prompt,
        response=reply,
        thread_id=thread_id,
    )
    return ClassChatResult(content=reply, material=material)
