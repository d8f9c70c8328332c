"""Chat router — free chat, class chat with material auto-save, structured generation."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from app.agents.material_generator import generate_material, generated_material
from app.agents.tutor import run_chat_turn, run_class_chat_turn
from app.config import settings
from app.middleware.auth import get_current_user_id
from app.middleware.ownership import owned_class, owned_thread
from app.middleware.rate_limit import limiter
from app.schemas.chat import (
    ChatRequest,
    ChatResponse,
    ClassChatRequest,
    ClassChatResponse,
    GenerateMaterialResponse,
    GenerationRequest,
)
from app.services.ai_client import AIClientError
from app.services.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

CHAT_FAILED = "Failed to get a response from the AI"
GENERATE_FAILED = "Failed to generate the material"


@router.post("/chat", response_model=ChatResponse)
@limiter.limit(settings.CHAT_RATE_LIMIT)
async def chat_with_ai(
    request: Request,
    req: ChatRequest,
    user_id: str = Depends(get_current_user_id),
):
    """Send a conversation to the assistant and return its reply."""
    if not req.messages:
        raise HTTPException(status_code=400, detail="Invalid messages format")

    try:
        content = await run_chat_turn(req.messages, req.language)
    except AIClientError as e:
        logger.error(f"Chat failed for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail=CHAT_FAILED)
    return ChatResponse(content=content)


@router.post("/classes/{class_id}/chat", response_model=ClassChatResponse)
@limiter.limit(settings.CHAT_RATE_LIMIT)
async def chat_in_class(
    request: Request,
    class_id: str,
    req: ClassChatRequest,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Chat inside a class.

    The exchange is appended to the thread (when given) and a reply that looks
    like a lesson plan, presentation, test or document is saved as a material.
    """
    if not req.messages:
        raise HTTPException(status_code=400, detail="Invalid messages format")

    cls = owned_class(storage, class_id, user_id)
    if req.thread_id:
        thread = owned_thread(storage, req.thread_id, user_id)
        if thread.class_id != class_id:
            raise HTTPException(status_code=400, detail="Thread belongs to another class")

    try:
        result = await run_class_chat_turn(
            storage, cls, req.messages, req.language, thread_id=req.thread_id,
        )
    except AIClientError as e:
        logger.error(f"Class chat failed for class {class_id}: {e}")
        raise HTTPException(status_code=500, detail=CHAT_FAILED)
    return ClassChatResponse(content=result.content, material=result.material)


@router.post("/generate-material", response_model=GenerateMaterialResponse)
@limiter.limit(settings.CHAT_RATE_LIMIT)
async def generate(
    request: Request,
    req: GenerationRequest,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Generate a lesson plan, presentation or test from a form.

    With `class_id` the result is also saved to that class.
    """
    if req.class_id:
        owned_class(storage, req.class_id, user_id)

    try:
        content = await generate_material(req, req.language)
    except AIClientError as e:
        logger.error(f"Generation of {req.type} failed: {e}")
        raise HTTPException(status_code=500, detail=GENERATE_FAILED)

    material = None
    if req.class_id:
        material = storage.create_material(
            req.class_id, generated_material(req, content, req.language),
        )
    return GenerateMaterialResponse(content=content, material=material)
