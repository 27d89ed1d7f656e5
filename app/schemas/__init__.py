from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    MeResponse,
    ProfileOut,
    AdminRegisterRequest,
    AdminRegisterResponse,
    FormDescriptor,
)
from app.schemas.class_group import ClassGroupOut, ClassGroupCreate, ClassGroupUpdate
from app.schemas.subject import SubjectOut, SubjectCreate, SubjectUpdate
from app.schemas.teacher import TeacherOut, TeacherCreate, TeacherUpdate
from app.schemas.schedule import (
    ScheduleCreate,
    ScheduleUpdate,
    ScheduleOut,
    ScheduleDay,
    DeleteResponse,
    TimetableMeta,
)
from app.schemas.dashboard import ScheduleBoard, AdminOverview, TeacherDashboardOut

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "MeResponse",
    "ProfileOut",
    "AdminRegisterRequest",
    "AdminRegisterResponse",
    "FormDescriptor",
    "ClassGroupOut",
    "ClassGroupCreate",
    "ClassGroupUpdate",
    "SubjectOut",
    "SubjectCreate",
    "SubjectUpdate",
    "TeacherOut",
    "TeacherCreate",
    "TeacherUpdate",
    "ScheduleCreate",
    "ScheduleUpdate",
    "ScheduleOut",
    "ScheduleDay",
    "DeleteResponse",
    "TimetableMeta",
    "ScheduleBoard",
    "AdminOverview",
    "TeacherDashboardOut",
]
