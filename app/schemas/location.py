"""지점/직원 Pydantic 스키마.

Location and employee request/response schemas.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class LocationCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    address: str | None = None
    phone: str | None = None


class LocationResponse(BaseModel):
    id: str
    name: str
    address: str | None
    phone: str | None
    is_active: bool
    created_at: datetime


class EmployeeCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    phone: str | None = None
    email: str | None = None
    employment_type: str | None = None


class EmployeeUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    phone: str | None = None
    email: str | None = None
    employment_type: str | None = None
    is_active: bool | None = None


class EmployeeResponse(BaseModel):
    id: str
    location_id: str
    name: str
    phone: str | None
    email: str | None
    employment_type: str | None
    is_active: bool
    created_at: datetime
