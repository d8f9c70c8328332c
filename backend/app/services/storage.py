"""Storage for classes, threads, messages and materials.

`SqlStorage` is backed by the SQLAlchemy session; `MemoryStorage` keeps
everything in process memory and seeds a few demo records. Routers receive
one of them through the `get_storage` dependency.

Conventions shared by both implementations:
  - get_*    -> record or None
  - update_* -> record, ValueError when the id is unknown
  - delete_* -> True when something was deleted
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.class_ import Class
from app.models.material import Material
from app.models.message import Message
from app.models.thread import Thread
from app.schemas.class_ import ClassCreate, ClassResponse, ClassUpdate
from app.schemas.material import MaterialCreate, MaterialResponse, MaterialType, MaterialUpdate
from app.schemas.thread import (
    MessageCreate,
    MessageResponse,
    ThreadCreate,
    ThreadResponse,
    ThreadUpdate,
)

DEMO_USER_ID = "demo-user"
DEFAULT_THREAD_TITLE = "New chat"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _material_updates(data: MaterialUpdate) -> dict:
    """Fields to change on a material. `title` is required, so null means unchanged."""
    updates = data.model_dump(exclude_unset=True)
    if updates.get("title") is None:
        updates.pop("title", None)
    return updates


class Storage(ABC):
    # ── Classes ──────────────────────────────────────────────────────────────
    @abstractmethod
    def list_classes(self, user_id: str) -> list[ClassResponse]: ...

    @abstractmethod
    def get_class(self, class_id: str) -> Optional[ClassResponse]: ...

    @abstractmethod
    def create_class(self, user_id: str, data: ClassCreate) -> ClassResponse: ...

    @abstractmethod
    def update_class(self, class_id: str, data: ClassUpdate) -> ClassResponse: ...

    @abstractmethod
    def delete_class(self, class_id: str) -> bool: ...

    # ── Threads ──────────────────────────────────────────────────────────────
    @abstractmethod
    def list_threads(self, class_id: str) -> list[ThreadResponse]: ...

    @abstractmethod
    def get_thread(self, thread_id: str) -> Optional[ThreadResponse]: ...

    @abstractmethod
    def create_thread(self, class_id: str, data: ThreadCreate) -> ThreadResponse: ...

    @abstractmethod
    def update_thread(self, thread_id: str, data: ThreadUpdate) -> ThreadResponse: ...

    @abstractmethod
    def delete_thread(self, thread_id: str) -> bool: ...

    # ── Messages ─────────────────────────────────────────────────────────────
    @abstractmethod
    def list_messages(self, thread_id: str) -> list[MessageResponse]: ...

    @abstractmethod
    def get_message(self, message_id: str) -> Optional[MessageResponse]: ...

    @abstractmethod
    def create_message(self, thread_id: str, data: MessageCreate) -> MessageResponse: ...

    @abstractmethod
    def delete_message(self, message_id: str) -> bool: ...

    # ── Materials ────────────────────────────────────────────────────────────
    @abstractmethod
    def list_materials(
        self, class_id: str, material_type: Optional[MaterialType] = None
    ) -> list[MaterialResponse]: ...

    @abstractmethod
    def get_material(self, material_id: str) -> Optional[MaterialResponse]: ...

    @abstractmethod
    def create_material(self, class_id: str, data: MaterialCreate) -> MaterialResponse: ...

    @abstractmethod
    def update_material(self, material_id: str, data: MaterialUpdate) -> MaterialResponse: ...

    @abstractmethod
    def delete_material(self, material_id: str) -> bool: ...


# ─────────────────────────────────────────────────────────────────────────────
# SQL
# ─────────────────────────────────────────────────────────────────────────────

def _class_response(c: Class) -> ClassResponse:
    return ClassResponse(
        id=c.id,
        user_id=c.user_id,
        title=c.title,
        created_at=c.created_at.isoformat(),
    )


def _thread_response(t: Thread) -> ThreadResponse:
    return ThreadResponse(
        id=t.id,
        class_id=t.class_id,
        title=t.title,
        created_at=t.created_at.isoformat(),
        updated_at=t.updated_at.isoformat(),
    )


def _message_response(m: Message) -> MessageResponse:
    return MessageResponse(
        id=m.id,
        thread_id=m.thread_id,
        role=m.role,
        content=m.content,
        created_at=m.created_at.isoformat(),
    )


def _material_response(m: Material) -> MaterialResponse:
    return MaterialResponse(
        id=m.id,
        class_id=m.class_id,
        thread_id=m.thread_id,
        type=MaterialType(m.type),
        title=m.title,
        content=m.content,
        file_url=m.file_url,
        ai_generated=m.ai_generated,
        created_at=m.created_at.isoformat(),
        updated_at=m.updated_at.isoformat(),
    )


class SqlStorage(Storage):
    """Storage backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def _get(self, model, row_id: str):
        return self.db.query(model).filter(model.id == row_id).first()

    def _require(self, model, row_id: str, label: str):
        row = self._get(model, row_id)
        if not row:
            raise ValueError(f"{label} not found")
        return row

    def _commit(self):
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _delete(self, model, row_id: str) -> bool:
        row = self._get(model, row_id)
        if not row:
            return False
        self.db.delete(row)
        self._commit()
        return True

    # ── Classes ──────────────────────────────────────────────────────────────
    def list_classes(self, user_id: str) -> list[ClassResponse]:
        rows = (
            self.db.query(Class)
            .filter(Class.user_id == user_id)
            .order_by(Class.created_at.desc())
            .all()
        )
        return [_class_response(c) for c in rows]

    def get_class(self, class_id: str) -> Optional[ClassResponse]:
        c = self._get(Class, class_id)
        return _class_response(c) if c else None

    def create_class(self, user_id: str, data: ClassCreate) -> ClassResponse:
        c = Class(id=str(uuid.uuid4()), user_id=user_id, title=data.title)
        self.db.add(c)
        self._commit()
        self.db.refresh(c)
        return _class_response(c)

    def update_class(self, class_id: str, data: ClassUpdate) -> ClassResponse:
        c = self._require(Class, class_id, "Class")
        for field, value in data.model_dump(exclude_none=True).items():
            setattr(c, field, value)
        self._commit()
        self.db.refresh(c)
        return _class_response(c)

    def delete_class(self, class_id: str) -> bool:
        # Threads, messages and materials go with it (ORM cascades)
        return self._delete(Class, class_id)

    # ── Threads ──────────────────────────────────────────────────────────────
    def list_threads(self, class_id: str) -> list[ThreadResponse]:
        rows = (
            self.db.query(Thread)
            .filter(Thread.class_id == class_id)
            .order_by(Thread.created_at.desc())
            .all()
        )
        return [_thread_response(t) for t in rows]

    def get_thread(self, thread_id: str) -> Optional[ThreadResponse]:
        t = self._get(Thread, thread_id)
        return _thread_response(t) if t else None

    def create_thread(self, class_id: str, data: ThreadCreate) -> ThreadResponse:
        self._require(Class, class_id, "Class")
        t = Thread(
            id=str(uuid.uuid4()),
            class_id=class_id,
            title=data.title or DEFAULT_THREAD_TITLE,
        )
        self.db.add(t)
        self._commit()
        self.db.refresh(t)
        return _thread_response(t)

    def update_thread(self, thread_id: str, data: ThreadUpdate) -> ThreadResponse:
        t = self._require(Thread, thread_id, "Thread")
        for field, value in data.model_dump(exclude_none=True).items():
            setattr(t, field, value)
        t.updated_at = _now()
        self._commit()
        self.db.refresh(t)
        return _thread_response(t)

    def delete_thread(self, thread_id: str) -> bool:
        return self._delete(Thread, thread_id)

    # ── Messages ─────────────────────────────────────────────────────────────
    def list_messages(self, thread_id: str) -> list[MessageResponse]:
        rows = (
            self.db.query(Message)
            .filter(Message.thread_id == thread_id)
            .order_by(Message.created_at.asc())
            .all()
        )
        return [_message_response(m) for m in rows]

    def get_message(self, message_id: str) -> Optional[MessageResponse]:
        m = self._get(Message, message_id)
        return _message_response(m) if m else None

    def create_message(self, thread_id: str, data: MessageCreate) -> MessageResponse:
        thread = self._require(Thread, thread_id, "Thread")
        m = Message(
            id=str(uuid.uuid4()),
            thread_id=thread_id,
            role=data.role,
            content=data.content,
        )
        self.db.add(m)
        thread.updated_at = _now()
        self._commit()
        self.db.refresh(m)
        return _message_response(m)

    def delete_message(self, message_id: str) -> bool:
        return self._delete(Message, message_id)

    # ── Materials ────────────────────────────────────────────────────────────
    def list_materials(
        self, class_id: str, material_type: Optional[MaterialType] = None
    ) -> list[MaterialResponse]:
        query = self.db.query(Material).filter(Material.class_id == class_id)
        if material_type is not None:
            query = query.filter(Material.type == material_type.value)
        rows = query.order_by(Material.created_at.desc()).all()
        return [_material_response(m) for m in rows]

    def get_material(self, material_id: str) -> Optional[MaterialResponse]:
        m = self._get(Material, material_id)
        return _material_response(m) if m else None

    def create_material(self, class_id: str, data: MaterialCreate) -> MaterialResponse:
        self._require(Class, class_id, "Class")
        m = Material(
            id=str(uuid.uuid4()),
            class_id=class_id,
            thread_id=data.thread_id,
            type=data.type.value,
            title=data.title,
            content=data.content,
            file_url=data.file_url,
            ai_generated=data.ai_generated,
        )
        self.db.add(m)
        self._commit()
        self.db.refresh(m)
        return _material_response(m)

    def update_material(self, material_id: str, data: MaterialUpdate) -> MaterialResponse:
        m = self._require(Material, material_id, "Material")
        for field, value in _material_updates(data).items():
            setattr(m, field, value)
        m.updated_at = _now()
        self._commit()
        self.db.refresh(m)
        return _material_response(m)

    def delete_material(self, material_id: str) -> bool:
        return self._delete(Material, material_id)


# ─────────────────────────────────────────────────────────────────────────────
# In-memory (demo mode and tests)
# ─────────────────────────────────────────────────────────────────────────────

class MemoryStorage(Storage):
    """Storage kept in process memory.

    Lists are kept newest-first, so inserts go to the front. With `seed=True`
    the store starts with three demo classes and two demo materials owned by
    DEMO_USER_ID.
    """

    def __init__(self, seed: bool = True):
        self.classes: list[ClassResponse] = []
        self.threads: list[ThreadResponse] = []
        self.messages: list[MessageResponse] = []
        self.materials: list[MaterialResponse] = []
        if seed:
            self._seed()

    def _seed(self):
        now = _now().isoformat()
        for n, title in enumerate(['9-й класс "Е"', '10-й класс "А"', '11-й класс "Б"'], start=1):
            self.classes.append(ClassResponse(
                id=f"demo-class-{n}", user_id=DEMO_USER_ID, title=title, created_at=now,
            ))
        self.materials.append(MaterialResponse(
            id="demo-material-1",
            class_id="demo-class-1",
            type=MaterialType.LESSON_PLAN,
            title="Квадратные уравнения",
            content="План урока по решению квадратных уравнений",
            ai_generated=True,
            created_at=now,
            updated_at=now,
        ))
        self.materials.append(MaterialResponse(
            id="demo-material-2",
            class_id="demo-class-1",
            type=MaterialType.PRESENTATION,
            title="Геометрические фигуры",
            content="Презентация о треугольниках и четырехугольниках",
            ai_generated=False,
            created_at=now,
            updated_at=now,
        ))

    @staticmethod
    def _find(items: list, item_id: str):
        return next((i for i in items if i.id == item_id), None)

    @staticmethod
    def _replace(items: list, item_id: str, updates: dict, label: str):
        for index, item in enumerate(items):
            if item.id == item_id:
                items[index] = item.model_copy(update=updates)
                return items[index]
        raise ValueError(f"{label} not found")

    @staticmethod
    def _remove(items: list, item_id: str) -> bool:
        for index, item in enumerate(items):
            if item.id == item_id:
                del items[index]
                return True
        return False

    # ── Classes ──────────────────────────────────────────────────────────────
    def list_classes(self, user_id: str) -> list[ClassResponse]:
        return [c for c in self.classes if c.user_id == user_id]

    def get_class(self, class_id: str) -> Optional[ClassResponse]:
        return self._find(self.classes, class_id)

    def create_class(self, user_id: str, data: ClassCreate) -> ClassResponse:
        c = ClassResponse(
            id=str(uuid.uuid4()), user_id=user_id, title=data.title, created_at=_now().isoformat(),
        )
        self.classes.insert(0, c)
        return c

    def update_class(self, class_id: str, data: ClassUpdate) -> ClassResponse:
        return self._replace(self.classes, class_id, data.model_dump(exclude_none=True), "Class")

    def delete_class(self, class_id: str) -> bool:
        if not self._remove(self.classes, class_id):
            return False
        thread_ids = {t.id for t in self.threads if t.class_id == class_id}
        self.threads = [t for t in self.threads if t.id not in thread_ids]
        self.messages = [m for m in self.messages if m.thread_id not in thread_ids]
        self.materials = [m for m in self.materials if m.class_id != class_id]
        return True

    # ── Threads ──────────────────────────────────────────────────────────────
    def list_threads(self, class_id: str) -> list[ThreadResponse]:
        return [t for t in self.threads if t.class_id == class_id]

    def get_thread(self, thread_id: str) -> Optional[ThreadResponse]:
        return self._find(self.threads, thread_id)

    def create_thread(self, class_id: str, data: ThreadCreate) -> ThreadResponse:
        if not self.get_class(class_id):
            raise ValueError("Class not found")
        now = _now().isoformat()
        t = ThreadResponse(
            id=str(uuid.uuid4()),
            class_id=class_id,
            title=data.title or DEFAULT_THREAD_TITLE,
            created_at=now,
            updated_at=now,
        )
        self.threads.insert(0, t)
        return t

    def update_thread(self, thread_id: str, data: ThreadUpdate) -> ThreadResponse:
        updates = data.model_dump(exclude_none=True)
        updates["updated_at"] = _now().isoformat()
        return self._replace(self.threads, thread_id, updates, "Thread")

    def delete_thread(self, thread_id: str) -> bool:
        if not self._remove(self.threads, thread_id):
            return False
        self.messages = [m for m in self.messages if m.thread_id != thread_id]
        self.materials = [
            m.model_copy(update={"thread_id": None}) if m.thread_id == thread_id else m
            for m in self.materials
        ]
        return True

    # ── Messages ─────────────────────────────────────────────────────────────
    def list_messages(self, thread_id: str) -> list[MessageResponse]:
        # Stored oldest-first, unlike the other collections
        return [m for m in self.messages if m.thread_id == thread_id]

    def get_message(self, message_id: str) -> Optional[MessageResponse]:
        return self._find(self.messages, message_id)

    def create_message(self, thread_id: str, data: MessageCreate) -> MessageResponse:
        if not self.get_thread(thread_id):
            raise ValueError("Thread not found")
        now = _now().isoformat()
        m = MessageResponse(
            id=str(uuid.uuid4()),
            thread_id=thread_id,
            role=data.role,
            content=data.content,
            created_at=now,
        )
        self.messages.append(m)
        self._replace(self.threads, thread_id, {"updated_at": now}, "Thread")
        return m

    def delete_message(self, message_id: str) -> bool:
        return self._remove(self.messages, message_id)

    # ── Materials ────────────────────────────────────────────────────────────
    def list_materials(
        self, class_id: str, material_type: Optional[MaterialType] = None
    ) -> list[MaterialResponse]:
        return [
            m for m in self.materials
            if m.class_id == class_id and (material_type is None or m.type == material_type)
        ]

    def get_material(self, material_id: str) -> Optional[MaterialResponse]:
        return self._find(self.materials, material_id)

    def create_material(self, class_id: str, data: MaterialCreate) -> MaterialResponse:
        if not self.get_class(class_id):
            raise ValueError("Class not found")
        now = _now().isoformat()
        m = MaterialResponse(
            id=str(uuid.uuid4()),
            class_id=class_id,
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        self.materials.insert(0, m)
        return m

    def update_material(self, material_id: str, data: MaterialUpdate) -> MaterialResponse:
        updates = _material_updates(data)
        updates["updated_at"] = _now().isoformat()
        return self._replace(self.materials, material_id, updates, "Material")

    def delete_material(self, material_id: str) -> bool:
        return self._remove(self.materials, material_id)


# ─────────────────────────────────────────────────────────────────────────────
# FastAPI dependency
# ─────────────────────────────────────────────────────────────────────────────

def get_storage(request: Request, db: Session = Depends(get_db)) -> Storage:
    """Demo store when the app was started in demo mode, otherwise the database."""
    demo_storage = getattr(request.app.state, "demo_storage", None)
    if demo_storage is not None:
        return demo_storage
    return SqlStorage(db)
