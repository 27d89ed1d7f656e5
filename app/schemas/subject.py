from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict, Field

from app.core.timetable import DEFAULT_SUBJECT_COLOR, DEFAULT_SUBJECT_ICON, SUBJECT_ICONS


SubjectIcon = Literal[SUBJECT_ICONS]

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class SubjectRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str


class SubjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    icon: str
    color: str


class SubjectCreate(BaseModel):
    name: str = Field(min_length=1)
    icon: SubjectIcon = DEFAULT_SUBJECT_ICON
    color: str = Field(default=DEFAULT_SUBJECT_COLOR, pattern=HEX_COLOR)


class SubjectUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    icon: Optional[SubjectIcon] = None
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR)
