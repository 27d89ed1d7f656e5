"""Role-based gating of the dashboard views.

Every caller is exactly one of admin, teacher or guest. A view declares the
role it is for, and ``redirect_for`` decides where anyone else goes.
"""
import enum
from dataclasses import dataclass
from typing import Optional

from app.models import AuthSession, AuthUser, Profile, UserRole

LOGIN_PATH = "/login"
HOME_PATH = "/"


class Role(str, enum.Enum):
    admin = "admin"
    teacher = "teacher"
    guest = "guest"


@dataclass(frozen=True)
class CallerContext:
    role: Role
    user: Optional[AuthUser] = None
    session: Optional[AuthSession] = None
    profile: Optional[Profile] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


GUEST = CallerContext(role=Role.guest)


def role_for(profile: Optional[Profile]) -> Role:
    if profile is None:
        return Role.guest
    if profile.role == UserRole.admin:
        return Role.admin
    if profile.role == UserRole.teacher:
        return Role.teacher
    return Role.guest


def redirect_for(required: Role, caller: Role) -> Optional[str]:
    """Return the path to send ``caller`` to, or ``None`` when access is allowed."""
    if caller == Role.guest:
        return LOGIN_PATH
    if caller != required:
        return HOME_PATH
    return None
