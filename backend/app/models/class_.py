"""Class model — a teacher-defined grouping (e.g. a school grade) of threads and materials."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.database import Base


class Class(Base):
    __tablename__ = "classes"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    # Relationships
    threads = relationship("Thread", back_populates="class_", cascade="all, delete-orphan")
    materials = relationship("Material", back_populates="class_", cascade="all, delete-orphan")
