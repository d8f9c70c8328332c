"""Material model — a stored lesson plan, presentation, test or document."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, ForeignKey, Text, Boolean
from sqlalchemy.orm import relationship

from app.database import Base


class Material(Base):
    __tablename__ = "materials"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    class_id = Column(String(36), ForeignKey("classes.id"), nullable=False, index=True)
    thread_id = Column(String(36), ForeignKey("threads.id", ondelete="SET NULL"), nullable=True)
    type = Column(String(20), nullable=False)  # lesson_plan | presentation | test | document
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=True)
    file_url = Column(Text, nullable=True)
    ai_generated = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    # Relationships
    class_ = relationship("Class", back_populates="materials")
    thread = relationship("Thread", back_populates="materials")
