from sqlalchemy import Column, Integer, String, DateTime, Text, Enum
from datetime import datetime
from app.core.database import Base
from app.services.choices import MeetingType, MeetingStatus


class Meeting(Base):
    __tablename__ = "meetings"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    meeting_date = Column(DateTime, nullable=True, index=True)
    location = Column(String(200), nullable=True)

    type = Column(Enum(MeetingType), nullable=True, default=MeetingType.REGULAR, index=True)
    status = Column(Enum(MeetingStatus), nullable=False, default=MeetingStatus.SCHEDULED, index=True)

    # comma separated names, ex: 'Alice,Bob'
    attendees = Column(Text, nullable=True)
    absentees = Column(Text, nullable=True)

    minutes = Column(Text, nullable=True)
    conclusion = Column(Text, nullable=True)
    action_items = Column(Text, nullable=True)
    tags = Column(String(500), nullable=True)
    display_order = Column(Integer, nullable=True, default=0)

    created_by = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
