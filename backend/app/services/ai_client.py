"""
Unified AI client.

Primary provider:
  OpenAI chat completions (when OPENAI_API_KEY is set).

Optional fallback:
  Anthropic (only when OpenAI is not configured).
"""

import logging

from app.config import settings

logger = logging.getLogger(__name__)


class AIClientError(RuntimeError):
    """The configured provider could not produce a reply."""


# ─────────────────────────────────────────────────────────────────────────────
# OpenAI
# ─────────────────────────────────────────────────────────────────────────────

def _openai_messages(system: str, messages: list[dict]) -> list[dict]:
    """System prompt first, then the conversation as role/content pairs."""
    out = []
    if system:
        out.append({"role": "system", "content": system})
    for m in messages:
        out.append({"role": m.get("role", "user"), "content": m.get("content", "")})
    return out


async def _openai_chat(
    system: str,
    messages: list[dict],
    max_tokens: int,
    temperature: float,
) -> str:
    from openai import AsyncOpenAI

    client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY)
    try:
        response = await client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=_openai_messages(system, messages),
            max_tokens=max_tokens,
            temperature=temperature,
        )
    except Exception as e:
        raise AIClientError(f"OpenAI error: {e}") from e
    finally:
        await client.close()

    if not response.choices:
        return ""
    return response.choices[0].message.content or ""


# ─────────────────────────────────────────────────────────────────────────────
# Anthropic — only used when OPENAI_API_KEY is NOT set
# ─────────────────────────────────────────────────────────────────────────────

def _anthropic_messages(messages: list[dict]) -> list[dict]:
    # Anthropic takes the system prompt separately and only user/assistant turns
    return [
        {"role": m.get("role", "user"), "content": m.get("content", "")}
        for m in messages
        if m.get("role") in ("user", "assistant")
    ]


async def _anthropic_chat(
    system: str,
    messages: list[dict],
    max_tokens: int,
    temperature: float,
) -> str:
    import anthropic

    client = anthropic.AsyncAnthropic(api_key=settings.ANTHROPIC_API_KEY)
    kwargs: dict = {}
    if system:
        kwargs["system"] = system
    try:
        response = await client.messages.create(
            model=settings.ANTHROPIC_MODEL,
            max_tokens=max_tokens,
            temperature=temperature,
            messages=_anthropic_messages(messages),
            **kwargs,
        )
    except Exception as e:
        raise AIClientError(f"Anthropic error: {e}") from e
    return response.content[0].text if response.content else ""


# ─────────────────────────────────────────────────────────────────────────────
# Status helpers
# ─────────────────────────────────────────────────────────────────────────────

def _openai_configured() -> bool:
    return bool(settings.OPENAI_API_KEY and settings.OPENAI_MODEL)


def _anthropic_configured() -> bool:
    return bool(settings.ANTHROPIC_API_KEY)


def ai_provider_name() -> str:
    if _openai_configured():
        return f"OpenAI ({settings.OPENAI_MODEL})"
    if _anthropic_configured():
        return f"Anthropic ({settings.ANTHROPIC_MODEL})"
    return "none"


async def ai_health_check() -> dict:
    """Live connectivity test — called by /api/health/ai."""
    provider = ai_provider_name()
    if provider == "none":
        return {
            "provider": "none",
            "status": "unconfigured",
            "message": "Set OPENAI_API_KEY (or ANTHROPIC_API_KEY) in backend/.env.",
        }

    try:
        reply = await chat(
            system="You are a test assistant.",
            messages=[{"role": "user", "content": "Reply with exactly: OK"}],
            max_tokens=10,
            temperature=0.0,
        )
        return {"provider": provider, "status": "ok", "test_reply": reply.strip()}
    except AIClientError as e:
        return {"provider": provider, "status": "error", "error": str(e)}


# ─────────────────────────────────────────────────────────────────────────────
# Public chat() — the single entry point used by the chat and generator
# ─────────────────────────────────────────────────────────────────────────────

async def chat(
    system: str,
    messages: list[dict],
    max_tokens: int = 2000,
    temperature: float = 0.7,
) -> str:
    """
    Send a chat completion request.

    Provider priority:
      1. OpenAI     — when OPENAI_API_KEY is set
      2. Anthropic  — when ANTHROPIC_API_KEY is set (and OpenAI is NOT)
      3. Stub       — when neither key is configured

    Anthropic is NEVER used as a silent fallback when OpenAI is configured;
    an OpenAI failure surfaces as AIClientError.
    """
    if _openai_configured():
        logger.debug(f"OpenAI chat: {len(messages)} messages, max_tokens={max_tokens}")
        return await _openai_chat(system, messages, max_tokens, temperature)

    if _anthropic_configured():
        logger.debug(f"Anthropic chat: {len(messages)} messages, max_tokens={max_tokens}")
        return await _anthropic_chat(system, messages, max_tokens, temperature)

    return (
        "[AI not configured] Set OPENAI_API_KEY (or ANTHROPIC_API_KEY) in backend/.env,\n"
        "then restart the backend and open /api/health/ai."
    )
