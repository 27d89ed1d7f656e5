from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from app.core.timetable import DEFAULT_SUBJECT_COLOR, DEFAULT_SUBJECT_ICON
from app.db.base import Base


class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    icon = Column(String, nullable=False, default=DEFAULT_SUBJECT_ICON)
    color = Column(String(7), nullable=False, default=DEFAULT_SUBJECT_COLOR)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    schedules = relationship("Schedule", back_populates="subject", cascade="all, delete-orphan")
    teacher_links = relationship("TeacherSubject", back_populates="subject", cascade="all, delete-orphan")
