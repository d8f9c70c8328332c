"""Ownership checks: a class and everything in it is visible only to its owner.

Records owned by someone else are reported as missing (404), not forbidden.
"""

from fastapi import HTTPException

from app.schemas.class_ import ClassResponse
from app.schemas.material import MaterialResponse
from app.schemas.thread import MessageResponse, ThreadResponse
from app.services.storage import Storage


def owned_class(storage: Storage, class_id: str, user_id: str) -> ClassResponse:
    cls = storage.get_class(class_id)
    if not cls or cls.user_id != user_id:
        raise HTTPException(status_code=404, detail="Class not found")
    return cls


def owned_thread(storage: Storage, thread_id: str, user_id: str) -> ThreadResponse:
    thread = storage.get_thread(thread_id)
    if not thread:
        raise HTTPException(status_code=404, detail="Thread not found")
    cls = storage.get_class(thread.class_id)
    if not cls or cls.user_id != user_id:
        raise HTTPException(status_code=404, detail="Thread not found")
    return thread


def owned_message(storage: Storage, message_id: str, user_id: str) -> MessageResponse:
    message = storage.get_message(message_id)
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")
    owned_thread(storage, message.thread_id, user_id)
    return message


def owned_material(storage: Storage, material_id: str, user_id: str) -> MaterialResponse:
    material = storage.get_material(material_id)
    if not material:
        raise HTTPException(status_code=404, detail="Material not found")
    cls = storage.get_class(material.class_id)
    if not cls or cls.user_id != user_id:
        raise HTTPException(status_code=404, detail="Material not found")
    return material
