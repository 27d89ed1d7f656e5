from typing import List, Optional
from pydantic import BaseModel

from app.schemas.auth import ProfileOut
from app.schemas.class_group import ClassGroupOut
from app.schemas.schedule import ScheduleDay
from app.schemas.subject import SubjectOut


class ScheduleBoard(BaseModel):
    classes: List[ClassGroupOut]
    selected_class: Optional[ClassGroupOut] = None
    lesson_slots: List[str]
    days: List[ScheduleDay]
    total_entries: int


class AdminOverview(BaseModel):
    profile: ProfileOut
    total_classes: int
    total_subjects: int
    total_teachers: int
    total_schedules: int


class TeacherStats(BaseModel):
    total_classes: int
    total_subjects: int
    weekly_hours: int


class TeacherDashboardOut(BaseModel):
    profile: ProfileOut
    subjects: List[SubjectOut]
    days: List[ScheduleDay]
    stats: TeacherStats
