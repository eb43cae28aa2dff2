from typing import List

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.core.pagination import PageRequest, paginate
from app.models.member_db.member_db import Member
from app.services.choices import MemberRole, MemberStatus


def _keyword_clause(keyword: str):
    pattern = f"%{keyword}%"
    return or_(
        Member.name.ilike(pattern),
        Member.student_id.ilike(pattern),
        Member.major.ilike(pattern),
        Member.research_direction.ilike(pattern),
    )


def get_member_by_id(db: Session, member_id: int):
    return db.query(Member).filter(Member.id == member_id).first()


def get_member_by_student_id(db: Session, student_id: str):
    return db.query(Member).filter(Member.student_id == student_id).first()


def student_id_exists(db: Session, student_id: str) -> bool:
    return db.query(Member.id).filter(Member.student_id == student_id).first() is not None


def find_members_page(db: Session, page_request: PageRequest):
    return paginate(db.query(Member), Member, page_request)


def find_members_by_keyword_and_status(db: Session, keyword: str, status: MemberStatus, page_request: PageRequest):
    query = db.query(Member).filter(_keyword_clause(keyword), Member.status == status)
    return paginate(query, Member, page_request)


def find_members_by_keyword(db: Session, keyword: str, page_request: PageRequest):
    return paginate(db.query(Member).filter(_keyword_clause(keyword)), Member, page_request)


def find_members_by_status_page(db: Session, status: MemberStatus, page_request: PageRequest):
    return paginate(db.query(Member).filter(Member.status == status), Member, page_request)


def find_members_by_role_page(db: Session, role: MemberRole, page_request: PageRequest):
    return paginate(db.query(Member).filter(Member.role == role), Member, page_request)


def find_members_by_status(db: Session, status: MemberStatus) -> List[Member]:
    return (
        db.query(Member)
        .filter(Member.status == status)
        .order_by(Member.display_order.asc(), Member.id.asc())
        .all()
    )


def find_featured_members(db: Session) -> List[Member]:
    return (
        db.query(Member)
        .filter(Member.featured.is_(True))
        .order_by(Member.display_order.asc(), Member.id.asc())
        .all()
    )


def find_members_by_role(db: Session, role: MemberRole) -> List[Member]:
    return db.query(Member).filter(Member.role == role).order_by(Member.display_order.asc()).all()


def find_members_by_grade(db: Session, grade: str) -> List[Member]:
    return db.query(Member).filter(Member.grade == grade).order_by(Member.display_order.asc()).all()


def search_members(db: Session, keyword: str) -> List[Member]:
    return db.query(Member).filter(_keyword_clause(keyword)).order_by(Member.display_order.asc()).all()


def save_member(db: Session, member: Member) -> Member:
    db.add(member)
    db.commit()
    db.refresh(member)
    return member


def delete_member(db: Session, member: Member):
    db.delete(member)
    db.commit()


def count_members(db: Session) -> int:
    return db.query(Member).count()


def count_members_by_status(db: Session):
    return db.query(Member.status, func.count(Member.id)).group_by(Member.status).all()


def count_members_by_role(db: Session):
    return db.query(Member.role, func.count(Member.id)).group_by(Member.role).all()
