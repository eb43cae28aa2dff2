from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.pagination import PageRequest, page_request_params
from app.schemas.common.page_response import PageResponse
from app.schemas.meeting.meeting_base import MeetingCreate, MeetingOut, MeetingStatistics, MeetingUpdate
from app.services import meeting_service
from app.services.choices import MeetingStatus, MeetingType

meeting_router = APIRouter(prefix="/api/meetings", tags=["Meetings"])


@meeting_router.get("", response_model=PageResponse[MeetingOut])
def list_meetings(page_request: PageRequest = Depends(page_request_params), db: Session = Depends(get_db)):
    return meeting_service.list_meetings(db, page_request)


@meeting_router.get("/completed", response_model=List[MeetingOut])
def completed_meetings(db: Session = Depends(get_db)):
    return meeting_service.get_completed_meetings(db)


@meeting_router.get("/upcoming", response_model=List[MeetingOut])
def upcoming_meetings(db: Session = Depends(get_db)):
    return meeting_service.get_upcoming_meetings(db)


@meeting_router.get("/statistics", response_model=MeetingStatistics)
def meeting_statistics(db: Session = Depends(get_db)):
    return meeting_service.get_meeting_statistics(db)


@meeting_router.get("/search", response_model=PageResponse[MeetingOut])
def search_meetings(
    keyword: str = Query(...),
    page_request: PageRequest = Depends(page_request_params),
    db: Session = Depends(get_db)
):
    return meeting_service.search_meetings(db, keyword, page_request)


@meeting_router.get("/status/{status}", response_model=PageResponse[MeetingOut])
def meetings_by_status(
    status: MeetingStatus,
    page_request: PageRequest = Depends(page_request_params),
    db: Session = Depends(get_db)
):
    return meeting_service.get_meetings_by_status(db, status, page_request)


@meeting_router.get("/type/{meeting_type}", response_model=List[MeetingOut])
def meetings_by_type(meeting_type: MeetingType, db: Session = Depends(get_db)):
    return meeting_service.get_meetings_by_type(db, meeting_type)


@meeting_router.get("/{meeting_id}", response_model=MeetingOut)
def get_meeting(meeting_id: int, db: Session = Depends(get_db)):
    return meeting_service.get_meeting(db, meeting_id)


@meeting_router.post("", response_model=MeetingOut)
def create_meeting(meeting_in: MeetingCreate, db: Session = Depends(get_db)):
    return meeting_service.create_meeting(db, meeting_in)


@meeting_router.put("/{meeting_id}", response_model=MeetingOut)
def update_meeting(meeting_id: int, meeting_in: MeetingUpdate, db: Session = Depends(get_db)):
    return meeting_service.update_meeting(db, meeting_id, meeting_in)


@meeting_router.delete("/{meeting_id}")
def delete_meeting(meeting_id: int, db: Session = Depends(get_db)):
    meeting_service.delete_meeting(db, meeting_id)
    return None


@meeting_router.patch("/{meeting_id}/status", response_model=MeetingOut)
def update_meeting_status(meeting_id: int, status: MeetingStatus = Query(...), db: Session = Depends(get_db)):
    return meeting_service.update_meeting_status(db, meeting_id, status)


@meeting_router.patch("/{meeting_id}/display-order")
def update_display_order(
    meeting_id: int,
    display_order: int = Query(..., alias="displayOrder"),
    db: Session = Depends(get_db)
):
    meeting_service.update_display_order(db, meeting_id, display_order)
    return None
