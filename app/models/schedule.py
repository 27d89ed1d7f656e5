from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base


class Schedule(Base):
    __tablename__ = "schedules"
    __table_args__ = (
        UniqueConstraint("class_id", "day_of_week", "time_slot", name="uq_schedules_class_slot"),
        UniqueConstraint("teacher_id", "day_of_week", "time_slot", name="uq_schedules_teacher_slot"),
        CheckConstraint("day_of_week BETWEEN 1 AND 5", name="ck_schedules_weekday"),
    )

    id = Column(Integer, primary_key=True)
    class_id = Column(Integer, ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False)
    teacher_id = Column(Integer, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True, index=True)

    day_of_week = Column(Integer, nullable=False)
    time_slot = Column(String, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    class_group = relationship("ClassGroup", back_populates="schedules")
    subject = relationship("Subject", back_populates="schedules")
    teacher = relationship("Profile", back_populates="schedules")
