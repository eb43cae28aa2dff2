import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.core.pagination import PageRequest, build_page, empty_page, slice_items
from app.models.meeting_db import meeting_crud
from app.models.meeting_db.meeting_db import Meeting
from app.schemas.common.page_response import PageResponse
from app.schemas.meeting.meeting_base import MeetingCreate, MeetingOut, MeetingStatistics, MeetingUpdate
from app.services.choices import MeetingStatus, MeetingType
from app.services.statistics import count_by_key, count_by_name

logger = logging.getLogger(__name__)

NAME_SEPARATOR = ","
UPCOMING_WINDOW = timedelta(days=7)

STATUS_KEYS = {
    MeetingStatus.SCHEDULED: "scheduled_meetings",
    MeetingStatus.IN_PROGRESS: "in_progress_meetings",
    MeetingStatus.COMPLETED: "completed_meetings",
    MeetingStatus.CANCELLED: "cancelled_meetings",
}

TYPE_KEYS = {
    MeetingType.REGULAR: "type_regular",
    MeetingType.EMERGENCY: "type_emergency",
    MeetingType.PLANNING: "type_planning",
    MeetingType.REVIEW: "type_review",
    MeetingType.TRAINING: "type_training",
}


def join_names(names: Optional[List[str]]) -> str:
    # names are not escaped: a name containing a comma splits into two
    return NAME_SEPARATOR.join(names) if names else ""


def split_names(value: Optional[str]) -> List[str]:
    if value is None or not value.strip():
        return []
    names = value.split(NAME_SEPARATOR)
    while names and names[-1] == "":
        names.pop()
    return names


def to_dto(meeting: Meeting) -> MeetingOut:
    return MeetingOut(
        id=meeting.id,
        title=meeting.title,
        content=meeting.description,
        meeting_time=meeting.meeting_date,
        location=meeting.location,
        meeting_type=meeting.type,
        status=meeting.status,
        attendees=split_names(meeting.attendees),
        absentees=split_names(meeting.absentees),
        meeting_notes=meeting.minutes,
        conclusion=meeting.conclusion,
        action_items=meeting.action_items,
        tags=meeting.tags,
        display_order=meeting.display_order if meeting.display_order is not None else 0,
        created_by=str(meeting.created_by) if meeting.created_by is not None else "0",
        created_at=meeting.created_at,
        updated_at=meeting.updated_at,
    )


def to_entity(meeting_in: MeetingCreate) -> Meeting:
    return Meeting(
        title=meeting_in.title,
        description=meeting_in.content,
        meeting_date=meeting_in.meeting_time,
        location=meeting_in.location,
        type=meeting_in.meeting_type or MeetingType.REGULAR,
        status=meeting_in.status or MeetingStatus.SCHEDULED,
        attendees=join_names(meeting_in.attendees),
        absentees=join_names(meeting_in.absentees),
        minutes=meeting_in.meeting_notes,
        conclusion=meeting_in.conclusion,
        action_items=meeting_in.action_items,
        tags=meeting_in.tags,
        display_order=meeting_in.display_order,
        created_by=int(meeting_in.created_by) if meeting_in.created_by is not None else None,
    )


def apply_update(meeting: Meeting, meeting_in: MeetingUpdate):
    """Overwrite the meeting; status has its own endpoint and is left alone."""
    meeting.title = meeting_in.title
    meeting.description = meeting_in.content
    meeting.meeting_date = meeting_in.meeting_time
    meeting.location = meeting_in.location
    meeting.type = meeting_in.meeting_type
    meeting.attendees = join_names(meeting_in.attendees)
    if meeting_in.absentees:
        meeting.absentees = join_names(meeting_in.absentees)
    meeting.minutes = meeting_in.meeting_notes
    meeting.conclusion = meeting_in.conclusion
    meeting.action_items = meeting_in.action_items
    meeting.tags = meeting_in.tags
    meeting.display_order = meeting_in.display_order
    meeting.updated_at = datetime.utcnow()


def _get_or_404(db: Session, meeting_id: int) -> Meeting:
    meeting = meeting_crud.get_meeting_by_id(db, meeting_id)
    if not meeting:
        raise NotFoundError("Meeting not found")
    return meeting


def _to_dtos(meetings) -> List[MeetingOut]:
    return [to_dto(meeting) for meeting in meetings]


def _page_from_full_scan(db: Session, page_request: PageRequest) -> PageResponse[MeetingOut]:
    meetings = meeting_crud.find_all_meetings(db)
    return build_page(_to_dtos(slice_items(meetings, page_request)), len(meetings), page_request)


def list_meetings(db: Session, page_request: PageRequest) -> PageResponse[MeetingOut]:
    """
    Paged meeting list that never raises.

    If the paged query fails (bad sort field, database hiccup) or comes back
    empty-handed, the whole table is loaded and sliced in memory instead. If
    that fails too, an empty page is returned.
    """
    try:
        total = meeting_crud.count_meetings(db)
        result = meeting_crud.find_meetings_page(db, page_request)

        if result is None:
            logger.warning("Paged meeting query returned nothing, total is %s", total)
            if total > 0:
                return _page_from_full_scan(db, page_request)
            return empty_page(page_request)

        rows, total = result
        return build_page(_to_dtos(rows), total, page_request)

    except Exception:
        logger.exception("Paged meeting query failed, falling back to a full scan")
        try:
            db.rollback()
            return _page_from_full_scan(db, page_request)
        except Exception:
            logger.exception("Meeting full scan failed, returning an empty page")
            return empty_page(page_request)


def get_completed_meetings(db: Session) -> List[MeetingOut]:
    return _to_dtos(meeting_crud.find_completed_meetings(db))


def get_upcoming_meetings(db: Session, now: Optional[datetime] = None) -> List[MeetingOut]:
    now = now or datetime.utcnow()
    return _to_dtos(meeting_crud.find_upcoming_meetings(db, now, now + UPCOMING_WINDOW))


def get_meeting(db: Session, meeting_id: int) -> MeetingOut:
    return to_dto(_get_or_404(db, meeting_id))


def get_meetings_by_status(db: Session, status: MeetingStatus, page_request: PageRequest) -> PageResponse[MeetingOut]:
    rows, total = meeting_crud.find_meetings_by_status(db, status, page_request)
    return build_page(_to_dtos(rows), total, page_request)


def get_meetings_by_type(db: Session, meeting_type: MeetingType) -> List[MeetingOut]:
    return _to_dtos(meeting_crud.find_meetings_by_type(db, meeting_type))


def search_meetings(db: Session, keyword: str, page_request: PageRequest) -> PageResponse[MeetingOut]:
    rows, total = meeting_crud.search_meetings(db, keyword, page_request)
    return build_page(_to_dtos(rows), total, page_request)


def create_meeting(db: Session, meeting_in: MeetingCreate) -> MeetingOut:
    meeting = meeting_crud.save_meeting(db, to_entity(meeting_in))
    logger.info("Created meeting %s - %s", meeting.id, meeting.title)
    return to_dto(meeting)


def update_meeting(db: Session, meeting_id: int, meeting_in: MeetingUpdate) -> MeetingOut:
    meeting = _get_or_404(db, meeting_id)
    apply_update(meeting, meeting_in)
    meeting = meeting_crud.save_meeting(db, meeting)
    logger.info("Updated meeting %s - %s", meeting.id, meeting.title)
    return to_dto(meeting)


def delete_meeting(db: Session, meeting_id: int):
    if not meeting_crud.meeting_exists(db, meeting_id):
        raise NotFoundError("Meeting not found")
    meeting_crud.delete_meeting_by_id(db, meeting_id)
    logger.info("Deleted meeting %s", meeting_id)


def update_meeting_status(db: Session, meeting_id: int, status: MeetingStatus) -> MeetingOut:
    meeting = _get_or_404(db, meeting_id)
    meeting.status = status
    meeting.updated_at = datetime.utcnow()
    meeting = meeting_crud.save_meeting(db, meeting)
    logger.info("Meeting %s status -> %s", meeting.id, status.value)
    return to_dto(meeting)


def update_display_order(db: Session, meeting_id: int, display_order: int):
    meeting = _get_or_404(db, meeting_id)
    meeting.display_order = display_order
    meeting.updated_at = datetime.utcnow()
    meeting_crud.save_meeting(db, meeting)
    logger.info("Meeting %s display order -> %s", meeting_id, display_order)


def get_meeting_statistics(db: Session) -> MeetingStatistics:
    status_rows = meeting_crud.count_meetings_by_status(db)
    type_rows = meeting_crud.count_meetings_by_type(db)
    return MeetingStatistics(
        total_meetings=meeting_crud.count_meetings(db),
        status_counts=count_by_name(MeetingStatus, status_rows),
        **count_by_key(STATUS_KEYS, status_rows),
        **count_by_key(TYPE_KEYS, type_rows),
    )
