import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base


class UserRole(str, enum.Enum):
    admin = "admin"
    teacher = "teacher"


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, ForeignKey("auth_users.id", ondelete="CASCADE"), primary_key=True)
    email = Column(String, nullable=False)
    role = Column(Enum(UserRole, name="user_role"), nullable=False)
    full_name = Column(String, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("AuthUser", back_populates="profile")
    subject_links = relationship("TeacherSubject", back_populates="teacher", cascade="all, delete-orphan")
    schedules = relationship("Schedule", back_populates="teacher")

    @property
    def subjects(self):
        return sorted((link.subject for link in self.subject_links), key=lambda subject: subject.name)
