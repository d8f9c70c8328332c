"""Classes router — create, list, rename and delete classes."""

from fastapi import APIRouter, Depends, HTTPException

from app.schemas.class_ import ClassCreate, ClassUpdate, ClassResponse, ClassListResponse
from app.middleware.auth import get_current_user_id
from app.middleware.ownership import owned_class
from app.services.storage import Storage, get_storage

router = APIRouter(prefix="/api/classes", tags=["classes"])


@router.get("", response_model=ClassListResponse)
def list_classes(
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """List the current user's classes, newest first."""
    return ClassListResponse(classes=storage.list_classes(user_id))


@router.post("", response_model=ClassResponse, status_code=201)
def create_class(
    req: ClassCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    return storage.create_class(user_id, req)


@router.get("/{class_id}", response_model=ClassResponse)
def get_class(
    class_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    return owned_class(storage, class_id, user_id)


@router.patch("/{class_id}", response_model=ClassResponse)
def update_class(
    class_id: str,
    req: ClassUpdate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    owned_class(storage, class_id, user_id)
    try:
        return storage.update_class(class_id, req)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{class_id}", status_code=204)
def delete_class(
    class_id: str,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Delete a class together with its threads, messages and materials."""
    owned_class(storage, class_id, user_id)
    storage.delete_class(class_id)
