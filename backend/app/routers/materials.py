"""Materials router — list, create, edit and delete stored materials."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from app.schemas.material import (
    MaterialCreate,
    MaterialListResponse,
    MaterialResponse,
    MaterialType,
    MaterialUpdate,
)
from app.middleware.auth import get_current_user_id
from app.middleware.ownership import owned_class, owned_material, owned_thread
from app.services.storage import Storage, get_storage

router = APIRouter(prefix="/api", tags=["materials"])


@router.get("/classes/{class_id}/materials", response_model=MaterialListResponse)
def list_materials(
    class_id: str,
    type: Optional[MaterialType] = None,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """List a class's materials, newest first, optionally of one type."""
    owned_class(storage, class_id, user_id)
    materials = storage.list_materials(class_id, type)
    return MaterialListResponse(materials=materials, total=len(materials))


@router.post("/classes/{class_id}/materials", response_model=MaterialResponse, status_code=201)
def create_material(
    class_id: str,
    req: MaterialCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    owned_class(storage, class_id, user_id)
    if req.thread_id:
        thread = owned_thread(storage, req.thread_id, user_id)
        if thread.class_id != class_id:
            raise HTTPException(status_code=400, detail="Thread belongs to another class")
    return storage.create_material(class_id, req)


@router.get("/materials/{material_id}", response_model=MaterialResponse)
def get_material(
    material_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    return owned_material(storage, material_id, user_id)


@router.patch("/materials/{material_id}", response_model=MaterialResponse)
def update_material(
    material_id: str,
    req: MaterialUpdate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    owned_material(storage, material_id, user_id)
    try:
        return storage.update_material(material_id, req)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/materials/{material_id}", status_code=204)
def delete_material(
    material_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    owned_material(storage, material_id, user_id)
    storage.delete_material(material_id)
