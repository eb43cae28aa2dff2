import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.core.pagination import PageRequest, build_page
from app.models.member_db import member_crud
from app.models.member_db.member_db import Member
from app.schemas.common.page_response import PageResponse
from app.schemas.member.member_base import MemberCreate, MemberOut, MemberStatistics, MemberUpdate
from app.services.choices import MemberRole, MemberStatus
from app.services.filters import FilterKind, normalize_keyword, resolve_filter
from app.services.statistics import count_by_name

logger = logging.getLogger(__name__)

# fields copied one-to-one between the schema and the record
_PLAIN_FIELDS = (
    "student_id",
    "name",
    "gender",
    "major",
    "role",
    "email",
    "phone",
    "research_direction",
    "bio",
    "avatar_url",
    "status",
    "featured",
    "display_order",
    "github_url",
    "linkedin_url",
    "personal_website",
)


def normalize_grade(grade: Optional[str]) -> Optional[str]:
    """'03' -> '3'; non-numeric grades are returned untouched."""
    if grade is None:
        return None
    stripped = grade.strip()
    if stripped.isdigit():
        return str(int(stripped))
    return grade


def to_dto(member: Member) -> MemberOut:
    return MemberOut(
        id=member.id,
        student_id=member.student_id,
        name=member.name,
        gender=member.gender,
        grade=normalize_grade(member.grade),
        major=member.major,
        role=member.role,
        email=member.email,
        phone=member.phone,
        research_direction=member.research_direction,
        bio=member.bio,
        avatar_url=member.avatar_url,
        status=member.status,
        featured=member.featured,
        display_order=member.display_order,
        github_url=member.github_url,
        linkedin_url=member.linkedin_url,
        personal_website=member.personal_website,
        created_at=member.created_at,
        updated_at=member.updated_at,
    )


def to_entity(member_in: MemberCreate) -> Member:
    member = Member(**{field: getattr(member_in, field) for field in _PLAIN_FIELDS})
    member.grade = member_in.grade
    if member.featured is None:
        member.featured = False
    if member.display_order is None:
        member.display_order = 0
    if member.status is None:
        member.status = MemberStatus.ACTIVE
    return member


def apply_update(member: Member, member_in: MemberUpdate):
    """Copy only the fields the caller sent; None keeps the stored value."""
    for field in _PLAIN_FIELDS:
        value = getattr(member_in, field)
        if value is not None:
            setattr(member, field, value)
    if member_in.grade is not None and member_in.grade.strip():
        member.grade = member_in.grade


def _get_or_404(db: Session, member_id: int) -> Member:
    member = member_crud.get_member_by_id(db, member_id)
    if not member:
        raise NotFoundError("Member not found")
    return member


def _to_dtos(members) -> List[MemberOut]:
    return [to_dto(member) for member in members]


def list_members(
    db: Session,
    page_request: PageRequest,
    keyword: Optional[str] = None,
    status: Optional[MemberStatus] = None,
    role: Optional[MemberRole] = None,
) -> PageResponse[MemberOut]:
    kind = resolve_filter(keyword, status, role)
    keyword = normalize_keyword(keyword)

    if kind == FilterKind.keyword_and_status:
        rows, total = member_crud.find_members_by_keyword_and_status(db, keyword, status, page_request)
    elif kind == FilterKind.keyword:
        rows, total = member_crud.find_members_by_keyword(db, keyword, page_request)
    elif kind == FilterKind.status:
        rows, total = member_crud.find_members_by_status_page(db, status, page_request)
    elif kind == FilterKind.category:
        rows, total = member_crud.find_members_by_role_page(db, role, page_request)
    else:
        rows, total = member_crud.find_members_page(db, page_request)

    return build_page(_to_dtos(rows), total, page_request)


def get_active_members(db: Session) -> List[MemberOut]:
    return _to_dtos(member_crud.find_members_by_status(db, MemberStatus.ACTIVE))


def get_members_by_status(db: Session, status: MemberStatus) -> List[MemberOut]:
    return _to_dtos(member_crud.find_members_by_status(db, status))


def get_featured_members(db: Session) -> List[MemberOut]:
    return _to_dtos(member_crud.find_featured_members(db))


def get_member(db: Session, member_id: int) -> MemberOut:
    return to_dto(_get_or_404(db, member_id))


def get_member_by_student_id(db: Session, student_id: str) -> MemberOut:
    member = member_crud.get_member_by_student_id(db, student_id)
    if not member:
        raise NotFoundError("Member not found")
    return to_dto(member)


def get_members_by_role(db: Session, role: MemberRole) -> List[MemberOut]:
    return _to_dtos(member_crud.find_members_by_role(db, role))


def get_members_by_grade(db: Session, grade: str) -> List[MemberOut]:
    return _to_dtos(member_crud.find_members_by_grade(db, grade))


def search_members(db: Session, keyword: str) -> List[MemberOut]:
    return _to_dtos(member_crud.search_members(db, keyword))


def create_member(db: Session, member_in: MemberCreate) -> MemberOut:
    if member_crud.student_id_exists(db, member_in.student_id):
        raise ConflictError("Student ID already exists")

    member = member_crud.save_member(db, to_entity(member_in))
    logger.info("Created member %s - %s", member.student_id, member.name)
    return to_dto(member)


def update_member(db: Session, member_id: int, member_in: MemberUpdate) -> MemberOut:
    member = _get_or_404(db, member_id)

    if member_in.student_id is not None and member_in.student_id != member.student_id:
        if member_crud.student_id_exists(db, member_in.student_id):
            raise ConflictError("Student ID already exists")

    apply_update(member, member_in)
    member = member_crud.save_member(db, member)
    logger.info("Updated member %s - %s", member.student_id, member.name)
    return to_dto(member)


def delete_member(db: Session, member_id: int):
    member = _get_or_404(db, member_id)
    member_crud.delete_member(db, member)
    logger.info("Deleted member %s - %s", member.student_id, member.name)


def update_member_status(db: Session, member_id: int, status: MemberStatus) -> MemberOut:
    member = _get_or_404(db, member_id)
    member.status = status
    member = member_crud.save_member(db, member)
    logger.info("Member %s status -> %s", member.student_id, status.value)
    return to_dto(member)


def update_display_order(db: Session, member_id: int, display_order: int):
    member = _get_or_404(db, member_id)
    member.display_order = display_order
    member_crud.save_member(db, member)
    logger.info("Member %s display order -> %s", member.student_id, display_order)


def get_member_statistics(db: Session) -> MemberStatistics:
    return MemberStatistics(
        total_members=member_crud.count_members(db),
        status_counts=count_by_name(MemberStatus, member_crud.count_members_by_status(db)),
        role_counts=count_by_name(MemberRole, member_crud.count_members_by_role(db)),
    )
