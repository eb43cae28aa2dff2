import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.core.pagination import PageRequest, build_page
from app.models.project_db import project_crud
from app.models.project_db.project_db import Project
from app.schemas.common.page_response import PageResponse
from app.schemas.project.project_base import ProjectCreate, ProjectOut, ProjectStatistics, ProjectUpdate
from app.services.choices import ProjectCategory, ProjectStatus
from app.services.filters import FilterKind, normalize_keyword, resolve_filter
from app.services.statistics import count_by_name

logger = logging.getLogger(__name__)

COMPLETE_PROGRESS = 100


def to_dto(project: Project) -> ProjectOut:
    return ProjectOut(
        id=project.id,
        name=project.name,
        description=project.description,
        status=project.status,
        category=project.category,
        is_public=project.is_public,
        featured=project.featured,
        goals=project.goals,
        tech_stack=project.tech_stack,
        achievements=project.achievements,
        budget=int(project.budget) if project.budget is not None else 0,
        progress=project.progress,
        image_url=project.image_url,
        repository_url=project.github_url,
        # one stored URL backs both the demo and documentation links
        demo_url=project.project_url,
        documentation_url=project.project_url,
        display_order=project.display_order,
        start_date=project.start_date,
        end_date=project.end_date,
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


def to_entity(project_in: ProjectCreate) -> Project:
    return Project(
        name=project_in.name,
        description=project_in.description,
        status=project_in.status,
        category=project_in.category,
        is_public=project_in.is_public if project_in.is_public is not None else False,
        featured=project_in.featured if project_in.featured is not None else False,
        goals=project_in.goals,
        tech_stack=project_in.tech_stack,
        achievements=project_in.achievements,
        budget=float(project_in.budget) if project_in.budget is not None else 0.0,
        progress=project_in.progress if project_in.progress is not None else 0,
        image_url=project_in.image_url,
        github_url=project_in.repository_url,
        project_url=project_in.demo_url,
        display_order=project_in.display_order if project_in.display_order is not None else 0,
        start_date=project_in.start_date,
        end_date=project_in.end_date,
    )


def apply_update(project: Project, project_in: ProjectUpdate):
    """Overwrite every field, nulls included (unlike the member update)."""
    project.name = project_in.name
    project.description = project_in.description
    project.status = project_in.status
    project.category = project_in.category
    project.is_public = project_in.is_public
    project.featured = project_in.featured
    project.goals = project_in.goals
    project.tech_stack = project_in.tech_stack
    project.achievements = project_in.achievements
    project.budget = float(project_in.budget)
    project.progress = project_in.progress
    project.image_url = project_in.image_url
    project.github_url = project_in.repository_url
    project.project_url = project_in.demo_url
    project.display_order = project_in.display_order
    project.start_date = project_in.start_date
    project.end_date = project_in.end_date


def _get_or_404(db: Session, project_id: int) -> Project:
    project = project_crud.get_project_by_id(db, project_id)
    if not project:
        raise NotFoundError("Project not found")
    return project


def _to_dtos(projects) -> List[ProjectOut]:
    return [to_dto(project) for project in projects]


def list_projects(
    db: Session,
    page_request: PageRequest,
    keyword: Optional[str] = None,
    status: Optional[ProjectStatus] = None,
    category: Optional[ProjectCategory] = None,
) -> PageResponse[ProjectOut]:
    kind = resolve_filter(keyword, status, category)
    keyword = normalize_keyword(keyword)

    if kind == FilterKind.keyword_and_status:
        rows, total = project_crud.find_projects_by_name_and_status(db, keyword, status, page_request)
    elif kind == FilterKind.keyword:
        rows, total = project_crud.find_projects_by_name(db, keyword, page_request)
    elif kind == FilterKind.status:
        rows, total = project_crud.find_projects_by_status_page(db, status, page_request)
    elif kind == FilterKind.category:
        rows, total = project_crud.find_projects_by_category_page(db, category, page_request)
    else:
        rows, total = project_crud.find_projects_page(db, page_request)

    return build_page(_to_dtos(rows), total, page_request)


def get_public_projects(db: Session) -> List[ProjectOut]:
    return _to_dtos(project_crud.find_public_projects(db))


def get_featured_projects(db: Session) -> List[ProjectOut]:
    return _to_dtos(project_crud.find_featured_public_projects(db))


def get_ongoing_projects(db: Session) -> List[ProjectOut]:
    return _to_dtos(project_crud.find_public_projects_by_status(db, ProjectStatus.ONGOING))


def get_completed_projects(db: Session) -> List[ProjectOut]:
    return _to_dtos(project_crud.find_public_projects_by_status(db, ProjectStatus.COMPLETED))


def get_project(db: Session, project_id: int) -> ProjectOut:
    return to_dto(_get_or_404(db, project_id))


def get_projects_by_status(db: Session, status: ProjectStatus) -> List[ProjectOut]:
    return _to_dtos(project_crud.find_projects_by_status(db, status))


def get_projects_by_category(db: Session, category: ProjectCategory) -> List[ProjectOut]:
    return _to_dtos(project_crud.find_public_projects_by_category(db, category))


def search_projects(db: Session, keyword: str) -> List[ProjectOut]:
    return _to_dtos(project_crud.search_projects(db, keyword))


def get_projects_by_date_range(db: Session, start_date: date, end_date: date) -> List[ProjectOut]:
    return _to_dtos(project_crud.find_projects_by_start_date_range(db, start_date, end_date))


def get_projects_by_budget_range(db: Session, min_budget: int, max_budget: int) -> List[ProjectOut]:
    return _to_dtos(project_crud.find_projects_by_budget_range(db, float(min_budget), float(max_budget)))


def get_projects_by_progress_range(db: Session, min_progress: int, max_progress: int) -> List[ProjectOut]:
    return _to_dtos(project_crud.find_projects_by_progress_range(db, min_progress, max_progress))


def create_project(db: Session, project_in: ProjectCreate) -> ProjectOut:
    project = project_crud.save_project(db, to_entity(project_in))
    logger.info("Created project %s - %s", project.id, project.name)
    return to_dto(project)


def update_project(db: Session, project_id: int, project_in: ProjectUpdate) -> ProjectOut:
    project = _get_or_404(db, project_id)
    apply_update(project, project_in)
    project = project_crud.save_project(db, project)
    logger.info("Updated project %s - %s", project.id, project.name)
    return to_dto(project)


def delete_project(db: Session, project_id: int):
    project = _get_or_404(db, project_id)
    project_crud.delete_project(db, project)
    logger.info("Deleted project %s - %s", project_id, project.name)


def update_project_status(db: Session, project_id: int, status: ProjectStatus) -> ProjectOut:
    project = _get_or_404(db, project_id)
    project.status = status
    project = project_crud.save_project(db, project)
    logger.info("Project %s status -> %s", project.id, status.value)
    return to_dto(project)


def update_project_progress(db: Session, project_id: int, progress: int) -> ProjectOut:
    project = _get_or_404(db, project_id)
    project.progress = progress
    if progress >= COMPLETE_PROGRESS:
        project.status = ProjectStatus.COMPLETED

    project = project_crud.save_project(db, project)
    logger.info("Project %s progress -> %s", project.id, progress)
    return to_dto(project)


def update_display_order(db: Session, project_id: int, display_order: int):
    project = _get_or_404(db, project_id)
    project.display_order = display_order
    project_crud.save_project(db, project)
    logger.info("Project %s display order -> %s", project_id, display_order)


def get_project_statistics(db: Session) -> ProjectStatistics:
    return ProjectStatistics(
        total_projects=project_crud.count_projects(db),
        status_counts=count_by_name(ProjectStatus, project_crud.count_projects_by_status(db)),
        category_counts=count_by_name(ProjectCategory, project_crud.count_projects_by_category(db)),
    )
