from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ClassGroupRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ClassGroupOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None


class ClassGroupCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None


class ClassGroupUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
