from datetime import date
from typing import List

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.core.pagination import PageRequest, paginate
from app.models.project_db.project_db import Project
from app.services.choices import ProjectCategory, ProjectStatus


def _display_ordered(query):
    return query.order_by(Project.display_order.asc(), Project.id.asc())


def get_project_by_id(db: Session, project_id: int):
    return db.query(Project).filter(Project.id == project_id).first()


def find_projects_page(db: Session, page_request: PageRequest):
    return paginate(db.query(Project), Project, page_request)


def find_projects_by_name_and_status(db: Session, keyword: str, status: ProjectStatus, page_request: PageRequest):
    query = db.query(Project).filter(Project.name.ilike(f"%{keyword}%"), Project.status == status)
    return paginate(query, Project, page_request)


def find_projects_by_name(db: Session, keyword: str, page_request: PageRequest):
    query = db.query(Project).filter(Project.name.ilike(f"%{keyword}%"))
    return paginate(query, Project, page_request)


def find_projects_by_status_page(db: Session, status: ProjectStatus, page_request: PageRequest):
    return paginate(db.query(Project).filter(Project.status == status), Project, page_request)


def find_projects_by_category_page(db: Session, category: ProjectCategory, page_request: PageRequest):
    return paginate(db.query(Project).filter(Project.category == category), Project, page_request)


def find_public_projects(db: Session) -> List[Project]:
    return _display_ordered(db.query(Project).filter(Project.is_public.is_(True))).all()


def find_featured_public_projects(db: Session) -> List[Project]:
    query = db.query(Project).filter(Project.featured.is_(True), Project.is_public.is_(True))
    return _display_ordered(query).all()


def find_public_projects_by_status(db: Session, status: ProjectStatus) -> List[Project]:
    query = db.query(Project).filter(Project.status == status, Project.is_public.is_(True))
    return _display_ordered(query).all()


def find_projects_by_status(db: Session, status: ProjectStatus) -> List[Project]:
    return _display_ordered(db.query(Project).filter(Project.status == status)).all()


def find_public_projects_by_category(db: Session, category: ProjectCategory) -> List[Project]:
    query = db.query(Project).filter(Project.category == category, Project.is_public.is_(True))
    return _display_ordered(query).all()


def search_projects(db: Session, keyword: str) -> List[Project]:
    pattern = f"%{keyword}%"
    query = db.query(Project).filter(
        or_(
            Project.name.ilike(pattern),
            Project.description.ilike(pattern),
            Project.tech_stack.ilike(pattern),
        )
    )
    return _display_ordered(query).all()


def find_projects_by_start_date_range(db: Session, start: date, end: date) -> List[Project]:
    query = db.query(Project).filter(Project.start_date >= start, Project.start_date <= end)
    return query.order_by(Project.start_date.asc()).all()


def find_projects_by_budget_range(db: Session, min_budget: float, max_budget: float) -> List[Project]:
    query = db.query(Project).filter(Project.budget >= min_budget, Project.budget <= max_budget)
    return query.order_by(Project.budget.asc()).all()


def find_projects_by_progress_range(db: Session, min_progress: int, max_progress: int) -> List[Project]:
    query = db.query(Project).filter(Project.progress >= min_progress, Project.progress <= max_progress)
    return query.order_by(Project.progress.asc()).all()


def save_project(db: Session, project: Project) -> Project:
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


def delete_project(db: Session, project: Project):
    db.delete(project)
    db.commit()


def count_projects(db: Session) -> int:
    return db.query(Project).count()


def count_projects_by_status(db: Session):
    return db.query(Project.status, func.count(Project.id)).group_by(Project.status).all()


def count_projects_by_category(db: Session):
    return db.query(Project.category, func.count(Project.id)).group_by(Project.category).all()
