from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from app.core.security import MAX_PASSWORD_BYTES, MIN_PASSWORD_LENGTH, password_too_long
from app.models import UserRole


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: UserRole
    full_name: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str
    role: Literal["admin", "teacher", "guest"]
    profile: Optional[ProfileOut] = None


class LogoutResponse(BaseModel):
    ok: bool


class MeResponse(BaseModel):
    role: Literal["admin", "teacher", "guest"]
    email: str
    profile: Optional[ProfileOut] = None


class AdminRegisterRequest(BaseModel):
    email: EmailStr
    full_name: str = Field(min_length=1)
    password: str
    confirm_password: str

    @model_validator(mode="after")
    def check_passwords(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if password_too_long(self.password):
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return self


class AdminRegisterResponse(BaseModel):
    ok: bool
    profile: ProfileOut


class FormField(BaseModel):
    name: str
    type: str
    required: bool = True


class FormDescriptor(BaseModel):
    view: str
    action: str
    fields: list[FormField]
    min_password_length: int = MIN_PASSWORD_LENGTH
    signup_enabled: Optional[bool] = None
