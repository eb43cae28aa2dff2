from datetime import datetime
from typing import List

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.core.pagination import PageRequest, paginate
from app.models.meeting_db.meeting_db import Meeting
from app.services.choices import MeetingStatus, MeetingType


def get_meeting_by_id(db: Session, meeting_id: int):
    return db.query(Meeting).filter(Meeting.id == meeting_id).first()


def meeting_exists(db: Session, meeting_id: int) -> bool:
    return db.query(Meeting.id).filter(Meeting.id == meeting_id).first() is not None


def find_meetings_page(db: Session, page_request: PageRequest):
    return paginate(db.query(Meeting), Meeting, page_request)


def find_all_meetings(db: Session) -> List[Meeting]:
    return db.query(Meeting).order_by(Meeting.id.asc()).all()


def find_completed_meetings(db: Session) -> List[Meeting]:
    return (
        db.query(Meeting)
        .filter(Meeting.status == MeetingStatus.COMPLETED)
        .order_by(Meeting.meeting_date.desc())
        .all()
    )


def find_upcoming_meetings(db: Session, start: datetime, end: datetime) -> List[Meeting]:
    return (
        db.query(Meeting)
        .filter(
            Meeting.status == MeetingStatus.SCHEDULED,
            Meeting.meeting_date >= start,
            Meeting.meeting_date <= end,
        )
        .order_by(Meeting.meeting_date.asc())
        .all()
    )


def find_meetings_by_status(db: Session, status: MeetingStatus, page_request: PageRequest):
    return paginate(db.query(Meeting).filter(Meeting.status == status), Meeting, page_request)


def find_meetings_by_type(db: Session, meeting_type: MeetingType) -> List[Meeting]:
    return (
        db.query(Meeting)
        .filter(Meeting.type == meeting_type)
        .order_by(Meeting.meeting_date.desc())
        .all()
    )


def search_meetings(db: Session, keyword: str, page_request: PageRequest):
    pattern = f"%{keyword}%"
    query = db.query(Meeting).filter(
        or_(
            Meeting.title.ilike(pattern),
            Meeting.description.ilike(pattern),
            Meeting.location.ilike(pattern),
        )
    )
    return paginate(query, Meeting, page_request)


def save_meeting(db: Session, meeting: Meeting) -> Meeting:
    db.add(meeting)
    db.commit()
    db.refresh(meeting)
    return meeting


def delete_meeting_by_id(db: Session, meeting_id: int):
    db.query(Meeting).filter(Meeting.id == meeting_id).delete()
    db.commit()


def count_meetings(db: Session) -> int:
    return db.query(Meeting).count()


def count_meetings_by_status(db: Session):
    return db.query(Meeting.status, func.count(Meeting.id)).group_by(Meeting.status).all()


def count_meetings_by_type(db: Session):
    return db.query(Meeting.type, func.count(Meeting.id)).group_by(Meeting.type).all()
