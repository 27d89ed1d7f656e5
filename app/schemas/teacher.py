from typing import List, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.core.security import MAX_PASSWORD_BYTES, MIN_PASSWORD_LENGTH, password_too_long
from app.schemas.subject import SubjectRef


class TeacherRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str


class TeacherOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    full_name: str
    subjects: List[SubjectRef] = []


class TeacherCreate(BaseModel):
    full_name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    subject_ids: List[int] = []

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        if password_too_long(value):
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class TeacherUpdate(BaseModel):
    full_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    subject_ids: Optional[List[int]] = None
