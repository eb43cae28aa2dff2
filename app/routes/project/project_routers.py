from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.pagination import PageRequest, page_request_params
from app.schemas.common.page_response import PageResponse
from app.schemas.project.project_base import ProjectCreate, ProjectOut, ProjectStatistics, ProjectUpdate
from app.services import project_service
from app.services.choices import ProjectCategory, ProjectStatus

project_router = APIRouter(prefix="/api/projects", tags=["Projects"])


@project_router.get("", response_model=PageResponse[ProjectOut])
def list_projects(
    keyword: Optional[str] = Query(None),
    status: Optional[ProjectStatus] = Query(None),
    category: Optional[ProjectCategory] = Query(None),
    page_request: PageRequest = Depends(page_request_params),
    db: Session = Depends(get_db)
):
    return project_service.list_projects(db, page_request, keyword, status, category)


@project_router.get("/public", response_model=List[ProjectOut])
def public_projects(db: Session = Depends(get_db)):
    return project_service.get_public_projects(db)


@project_router.get("/featured", response_model=List[ProjectOut])
def featured_projects(db: Session = Depends(get_db)):
    return project_service.get_featured_projects(db)


@project_router.get("/ongoing", response_model=List[ProjectOut])
def ongoing_projects(db: Session = Depends(get_db)):
    return project_service.get_ongoing_projects(db)


@project_router.get("/completed", response_model=List[ProjectOut])
def completed_projects(db: Session = Depends(get_db)):
    return project_service.get_completed_projects(db)


@project_router.get("/statistics", response_model=ProjectStatistics)
def project_statistics(db: Session = Depends(get_db)):
    return project_service.get_project_statistics(db)


@project_router.get("/search", response_model=List[ProjectOut])
def search_projects(keyword: str = Query(...), db: Session = Depends(get_db)):
    return project_service.search_projects(db, keyword)


@project_router.get("/status/{status}", response_model=List[ProjectOut])
def projects_by_status(status: ProjectStatus, db: Session = Depends(get_db)):
    return project_service.get_projects_by_status(db, status)


@project_router.get("/category/{category}", response_model=List[ProjectOut])
def projects_by_category(category: ProjectCategory, db: Session = Depends(get_db)):
    return project_service.get_projects_by_category(db, category)


@project_router.get("/date-range", response_model=List[ProjectOut])
def projects_by_date_range(
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    db: Session = Depends(get_db)
):
    return project_service.get_projects_by_date_range(db, start_date, end_date)


@project_router.get("/budget-range", response_model=List[ProjectOut])
def projects_by_budget_range(
    min_budget: int = Query(..., alias="minBudget", ge=0),
    max_budget: int = Query(..., alias="maxBudget", ge=0),
    db: Session = Depends(get_db)
):
    return project_service.get_projects_by_budget_range(db, min_budget, max_budget)


@project_router.get("/progress-range", response_model=List[ProjectOut])
def projects_by_progress_range(
    min_progress: int = Query(..., alias="minProgress", ge=0, le=100),
    max_progress: int = Query(..., alias="maxProgress", ge=0, le=100),
    db: Session = Depends(get_db)
):
    return project_service.get_projects_by_progress_range(db, min_progress, max_progress)


@project_router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: int, db: Session = Depends(get_db)):
    return project_service.get_project(db, project_id)


@project_router.post("", response_model=ProjectOut)
def create_project(project_in: ProjectCreate, db: Session = Depends(get_db)):
    return project_service.create_project(db, project_in)


@project_router.put("/{project_id}", response_model=ProjectOut)
def update_project(project_id: int, project_in: ProjectUpdate, db: Session = Depends(get_db)):
    return project_service.update_project(db, project_id, project_in)


@project_router.delete("/{project_id}")
def delete_project(project_id: int, db: Session = Depends(get_db)):
    project_service.delete_project(db, project_id)
    return None


@project_router.patch("/{project_id}/status", response_model=ProjectOut)
def update_project_status(project_id: int, status: ProjectStatus = Query(...), db: Session = Depends(get_db)):
    return project_service.update_project_status(db, project_id, status)


@project_router.patch("/{project_id}/progress", response_model=ProjectOut)
def update_project_progress(
    project_id: int,
    progress: int = Query(..., ge=0, le=100),
    db: Session = Depends(get_db)
):
    return project_service.update_project_progress(db, project_id, progress)


@project_router.patch("/{project_id}/display-order")
def update_display_order(
    project_id: int,
    display_order: int = Query(..., alias="displayOrder"),
    db: Session = Depends(get_db)
):
    project_service.update_display_order(db, project_id, display_order)
    return None
