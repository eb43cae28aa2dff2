from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from app.schemas.common.camel_model import CamelModel
from app.services.choices import MeetingStatus, MeetingType


class MeetingBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: Optional[str] = None
    meeting_time: Optional[datetime] = None
    location: Optional[str] = Field(None, max_length=200)
    meeting_type: Optional[MeetingType] = None
    status: Optional[MeetingStatus] = None
    attendees: Optional[List[str]] = None
    absentees: Optional[List[str]] = None
    meeting_notes: Optional[str] = None
    conclusion: Optional[str] = None
    action_items: Optional[str] = None
    tags: Optional[str] = Field(None, max_length=500)
    display_order: Optional[int] = None
    created_by: Optional[str] = Field(None, pattern=r"^\d+$")


class MeetingCreate(MeetingBase):
    pass


class MeetingUpdate(MeetingBase):
    pass


class MeetingOut(CamelModel):
    id: int
    title: str
    content: Optional[str] = None
    meeting_time: Optional[datetime] = None
    location: Optional[str] = None
    meeting_type: Optional[MeetingType] = None
    status: Optional[MeetingStatus] = None
    attendees: List[str] = []
    absentees: List[str] = []
    meeting_notes: Optional[str] = None
    conclusion: Optional[str] = None
    action_items: Optional[str] = None
    tags: Optional[str] = None
    display_order: int = 0
    created_by: str = "0"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MeetingStatistics(CamelModel):
    total_meetings: int
    scheduled_meetings: int
    in_progress_meetings: int
    completed_meetings: int
    cancelled_meetings: int
    type_regular: int
    type_emergency: int
    type_planning: int
    type_review: int
    type_training: int
    status_counts: Dict[str, int]
