from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.pagination import PageRequest, page_request_params
from app.schemas.common.page_response import PageResponse
from app.schemas.member.member_base import MemberCreate, MemberOut, MemberStatistics, MemberUpdate
from app.services import member_service
from app.services.choices import MemberRole, MemberStatus

member_router = APIRouter(prefix="/api/members", tags=["Members"])


@member_router.get("", response_model=PageResponse[MemberOut])
def list_members(
    keyword: Optional[str] = Query(None),
    status: Optional[MemberStatus] = Query(None),
    role: Optional[MemberRole] = Query(None),
    page_request: PageRequest = Depends(page_request_params),
    db: Session = Depends(get_db)
):
    return member_service.list_members(db, page_request, keyword, status, role)


@member_router.get("/active", response_model=List[MemberOut])
def active_members(db: Session = Depends(get_db)):
    return member_service.get_active_members(db)


@member_router.get("/featured", response_model=List[MemberOut])
def featured_members(db: Session = Depends(get_db)):
    return member_service.get_featured_members(db)


@member_router.get("/statistics", response_model=MemberStatistics)
def member_statistics(db: Session = Depends(get_db)):
    return member_service.get_member_statistics(db)


@member_router.get("/search", response_model=List[MemberOut])
def search_members(keyword: str = Query(...), db: Session = Depends(get_db)):
    return member_service.search_members(db, keyword)


@member_router.get("/student/{student_id}", response_model=MemberOut)
def member_by_student_id(student_id: str, db: Session = Depends(get_db)):
    return member_service.get_member_by_student_id(db, student_id)


@member_router.get("/role/{role}", response_model=List[MemberOut])
def members_by_role(role: MemberRole, db: Session = Depends(get_db)):
    return member_service.get_members_by_role(db, role)


@member_router.get("/grade/{grade}", response_model=List[MemberOut])
def members_by_grade(grade: str, db: Session = Depends(get_db)):
    return member_service.get_members_by_grade(db, grade)


@member_router.get("/status/{status}", response_model=List[MemberOut])
def members_by_status(status: MemberStatus, db: Session = Depends(get_db)):
    return member_service.get_members_by_status(db, status)


@member_router.get("/{member_id}", response_model=MemberOut)
def get_member(member_id: int, db: Session = Depends(get_db)):
    return member_service.get_member(db, member_id)


@member_router.post("", response_model=MemberOut)
def create_member(member_in: MemberCreate, db: Session = Depends(get_db)):
    return member_service.create_member(db, member_in)


@member_router.put("/{member_id}", response_model=MemberOut)
def update_member(member_id: int, member_in: MemberUpdate, db: Session = Depends(get_db)):
    return member_service.update_member(db, member_id, member_in)


@member_router.delete("/{member_id}")
def delete_member(member_id: int, db: Session = Depends(get_db)):
    member_service.delete_member(db, member_id)
    return None


@member_router.patch("/{member_id}/status", response_model=MemberOut)
def update_member_status(member_id: int, status: MemberStatus = Query(...), db: Session = Depends(get_db)):
    return member_service.update_member_status(db, member_id, status)


@member_router.patch("/{member_id}/display-order")
def update_display_order(
    member_id: int,
    display_order: int = Query(..., alias="displayOrder"),
    db: Session = Depends(get_db)
):
    member_service.update_display_order(db, member_id, display_order)
    return None
