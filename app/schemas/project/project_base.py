from datetime import date, datetime
from typing import Dict, Optional

from pydantic import Field, field_validator

from app.schemas.common.camel_model import CamelModel
from app.services.choices import ProjectCategory, ProjectStatus


class ProjectBase(CamelModel):
    name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    status: Optional[ProjectStatus] = None
    category: Optional[ProjectCategory] = None
    is_public: Optional[bool] = None
    featured: Optional[bool] = None
    goals: Optional[str] = Field(None, max_length=500)
    tech_stack: Optional[str] = Field(None, max_length=1000)
    achievements: Optional[str] = Field(None, max_length=500)
    budget: Optional[int] = Field(None, ge=0)
    progress: Optional[int] = Field(None, ge=0, le=100)
    image_url: Optional[str] = Field(None, max_length=200)
    repository_url: Optional[str] = Field(None, max_length=200)
    demo_url: Optional[str] = Field(None, max_length=200)
    documentation_url: Optional[str] = Field(None, max_length=200)
    display_order: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ProjectCreate(ProjectBase):
    @field_validator("start_date", "end_date")
    @classmethod
    def must_be_future(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value <= date.today():
            raise ValueError("must be a future date")
        return value


class ProjectUpdate(ProjectBase):
    """Full replacement of a project; budget has no fallback and is required."""

    budget: int = Field(..., ge=0)


class ProjectOut(CamelModel):
    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    category: Optional[ProjectCategory] = None
    is_public: Optional[bool] = None
    featured: Optional[bool] = None
    goals: Optional[str] = None
    tech_stack: Optional[str] = None
    achievements: Optional[str] = None
    budget: int = 0
    progress: Optional[int] = None
    image_url: Optional[str] = None
    repository_url: Optional[str] = None
    demo_url: Optional[str] = None
    documentation_url: Optional[str] = None
    display_order: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProjectStatistics(CamelModel):
    total_projects: int
    status_counts: Dict[str, int]
    category_counts: Dict[str, int]
