from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum
from datetime import datetime
from app.core.database import Base
from app.services.choices import Gender, MemberRole, MemberStatus


class Member(Base):
    __tablename__ = "members"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(String(20), unique=True, nullable=False, index=True)
    name = Column(String(50), nullable=False)
    gender = Column(Enum(Gender), nullable=True)
    grade = Column(String(10), nullable=True)  # enrolment year, ex: '2022'
    major = Column(String(100), nullable=True)
    role = Column(Enum(MemberRole), nullable=True, default=MemberRole.MEMBER)

    email = Column(String(100), nullable=True)
    phone = Column(String(20), nullable=True)
    research_direction = Column(String(200), nullable=True)
    bio = Column(String(500), nullable=True)
    avatar_url = Column(String(200), nullable=True)

    status = Column(Enum(MemberStatus), nullable=True, default=MemberStatus.ACTIVE, index=True)
    featured = Column(Boolean, default=False)
    display_order = Column(Integer, default=0)

    github_url = Column(String(200), nullable=True)
    linkedin_url = Column(String(200), nullable=True)
    personal_website = Column(String(200), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
