from app.models.auth_user import AuthUser, AuthSession
from app.models.profile import Profile, UserRole
from app.models.class_group import ClassGroup
from app.models.subject import Subject
from app.models.teacher_subject import TeacherSubject
from app.models.schedule import Schedule

__all__ = [
    "AuthUser",
    "AuthSession",
    "Profile",
    "UserRole",
    "ClassGroup",
    "Subject",
    "TeacherSubject",
    "Schedule",
]
