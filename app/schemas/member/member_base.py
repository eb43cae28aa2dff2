from datetime import datetime
from typing import Dict, Optional

from pydantic import EmailStr, Field, field_validator

from app.schemas.common.camel_model import CamelModel
from app.services.choices import Gender, MemberRole, MemberStatus

PHONE_PATTERN = r"^1[3-9]\d{9}$"


class MemberBase(CamelModel):
    student_id: Optional[str] = Field(None, min_length=8, max_length=20)
    name: Optional[str] = Field(None, max_length=50)
    gender: Optional[Gender] = None
    grade: Optional[str] = Field(None, max_length=10)
    major: Optional[str] = Field(None, max_length=100)
    role: Optional[MemberRole] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    research_direction: Optional[str] = Field(None, max_length=200)
    bio: Optional[str] = Field(None, max_length=500)
    avatar_url: Optional[str] = Field(None, max_length=200)
    status: Optional[MemberStatus] = None
    featured: Optional[bool] = None
    display_order: Optional[int] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    personal_website: Optional[str] = None

    @field_validator("email")
    @classmethod
    def email_length(cls, value):
        if value is not None and len(value) > 100:
            raise ValueError("email must be at most 100 characters")
        return value


class MemberCreate(MemberBase):
    student_id: str = Field(..., min_length=8, max_length=20)
    name: str = Field(..., min_length=1, max_length=50)


class MemberUpdate(MemberBase):
    """Partial update: fields left out (or null) keep their stored value."""


class MemberOut(CamelModel):
    id: int
    student_id: str
    name: str
    gender: Optional[Gender] = None
    grade: Optional[str] = None
    major: Optional[str] = None
    role: Optional[MemberRole] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    research_direction: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    status: Optional[MemberStatus] = None
    featured: Optional[bool] = None
    display_order: Optional[int] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    personal_website: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MemberStatistics(CamelModel):
    total_members: int
    status_counts: Dict[str, int]
    role_counts: Dict[str, int]
