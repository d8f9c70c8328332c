"""Threads router — chat sessions of a class and their messages."""

from fastapi import APIRouter, Depends, HTTPException

from app.schemas.thread import (
    MessageCreate,
    MessageListResponse,
    MessageResponse,
    ThreadCreate,
    ThreadListResponse,
    ThreadResponse,
    ThreadUpdate,
)
from app.middleware.auth import get_current_user_id
from app.middleware.ownership import owned_class, owned_message, owned_thread
from app.services.storage import Storage, get_storage

router = APIRouter(prefix="/api", tags=["threads"])


@router.get("/classes/{class_id}/threads", response_model=ThreadListResponse)
def list_threads(
    class_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    owned_class(storage, class_id, user_id)
    return ThreadListResponse(threads=storage.list_threads(class_id))


@router.post("/classes/{class_id}/threads", response_model=ThreadResponse, status_code=201)
def create_thread(
    class_id: str,
    req: ThreadCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    owned_class(storage, class_id, user_id)
    return storage.create_thread(class_id, req)


@router.patch("/threads/{thread_id}", response_model=ThreadResponse)
def update_thread(
    thread_id: str,
    req: ThreadUpdate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    owned_thread(storage, thread_id, user_id)
    try:
        return storage.update_thread(thread_id, req)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/threads/{thread_id}", status_code=204)
def delete_thread(
    thread_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Delete a thread and its messages. Materials saved from it are kept."""
    owned_thread(storage, thread_id, user_id)
    storage.delete_thread(thread_id)


@router.get("/threads/{thread_id}/messages", response_model=MessageListResponse)
def list_messages(
    thread_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Messages of a thread, oldest first."""
    owned_thread(storage, thread_id, user_id)
    return MessageListResponse(messages=storage.list_messages(thread_id))


@router.post("/threads/{thread_id}/messages", response_model=MessageResponse, status_code=201)
def create_message(
    thread_id: str,
    req: MessageCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    owned_thread(storage, thread_id, user_id)
    return storage.create_message(thread_id, req)


@router.delete("/messages/{message_id}", status_code=204)
def delete_message(
    message_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    owned_message(storage, message_id, user_id)
    storage.delete_message(message_id)
