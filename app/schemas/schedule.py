from typing import List, Optional, Literal
from pydantic import BaseModel, ConfigDict, Field

from app.core.timetable import TIME_SLOTS
from app.schemas.class_group import ClassGroupRef
from app.schemas.subject import SubjectOut
from app.schemas.teacher import TeacherRef


TimeSlot = Literal[TIME_SLOTS]


class ScheduleCreate(BaseModel):
    class_id: int
    subject_id: int
    teacher_id: Optional[int] = None
    day_of_week: int = Field(ge=1, le=5)
    time_slot: TimeSlot


class ScheduleUpdate(BaseModel):
    class_id: Optional[int] = None
    subject_id: Optional[int] = None
    teacher_id: Optional[int] = None
    day_of_week: Optional[int] = Field(default=None, ge=1, le=5)
    time_slot: Optional[TimeSlot] = None


class ScheduleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    day_of_week: int
    time_slot: str
    class_group: ClassGroupRef
    subject: SubjectOut
    teacher: Optional[TeacherRef] = None


class ScheduleDay(BaseModel):
    day_of_week: int
    label: str
    entries: List[ScheduleOut]


class DeleteResponse(BaseModel):
    ok: bool
    deleted: int


class TimeSlotOut(BaseModel):
    value: str
    is_break: bool


class DayOut(BaseModel):
    value: int
    label: str


class TimetableMeta(BaseModel):
    days: List[DayOut]
    time_slots: List[TimeSlotOut]
    subject_icons: List[str]
    subject_colors: List[str]
