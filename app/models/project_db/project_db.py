from sqlalchemy import Column, Integer, String, Boolean, Date, DateTime, Float, Text, Enum
from datetime import datetime
from app.core.database import Base
from app.services.choices import ProjectStatus, ProjectCategory


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=True)
    description = Column(Text, nullable=True)

    # every column stays nullable: a project update overwrites all fields
    status = Column(Enum(ProjectStatus), nullable=True, index=True)
    category = Column(Enum(ProjectCategory), nullable=True, index=True)
    is_public = Column(Boolean, nullable=True, default=False)
    featured = Column(Boolean, nullable=True, default=False)

    goals = Column(String(500), nullable=True)
    tech_stack = Column(String(1000), nullable=True)
    achievements = Column(String(500), nullable=True)

    budget = Column(Float, nullable=True, default=0.0)
    progress = Column(Integer, nullable=True, default=0)

    image_url = Column(String(200), nullable=True)
    github_url = Column(String(200), nullable=True)
    project_url = Column(String(200), nullable=True)
    display_order = Column(Integer, nullable=True, default=0)

    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
