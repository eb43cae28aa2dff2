from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.pagination import PageRequest, page_request_params
from app.core.security import get_current_user_optional
from app.models.user_db.user_db import User
from app.schemas.common.page_response import PageResponse
from app.schemas.post.post_base import PostCreate, PostOut, PostStatistics, PostUpdate
from app.services import post_service
from app.services.choices import PostStatus

post_router = APIRouter(prefix="/api/posts", tags=["Posts"])


@post_router.get("", response_model=PageResponse[PostOut])
def list_posts(page_request: PageRequest = Depends(page_request_params), db: Session = Depends(get_db)):
    return post_service.list_published_posts(db, page_request)


@post_router.get("/featured", response_model=List[PostOut])
def featured_posts(db: Session = Depends(get_db)):
    return post_service.get_featured_posts(db)


@post_router.get("/latest", response_model=List[PostOut])
def latest_posts(limit: int = Query(5, ge=1), db: Session = Depends(get_db)):
    return post_service.get_latest_posts(db, limit)


@post_router.get("/statistics", response_model=PostStatistics)
def post_statistics(db: Session = Depends(get_db)):
    return post_service.get_post_statistics(db)


@post_router.get("/search", response_model=PageResponse[PostOut])
def search_posts(
    keyword: str = Query(...),
    page_request: PageRequest = Depends(page_request_params),
    db: Session = Depends(get_db)
):
    return post_service.search_posts(db, keyword, page_request)


@post_router.get("/status/{status}", response_model=PageResponse[PostOut])
def posts_by_status(
    status: PostStatus,
    page_request: PageRequest = Depends(page_request_params),
    db: Session = Depends(get_db)
):
    return post_service.get_posts_by_status(db, status, page_request)


@post_router.get("/tag/{tag}", response_model=List[PostOut])
def posts_by_tag(tag: str, db: Session = Depends(get_db)):
    return post_service.get_posts_by_tag(db, tag)


@post_router.get("/{post_id}", response_model=PostOut)
def get_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional)
):
    return post_service.get_post(db, post_id, current_user)


@post_router.post("", response_model=PostOut)
def create_post(
    post_in: PostCreate,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional)
):
    return post_service.create_post(db, post_in, current_user)


@post_router.put("/{post_id}", response_model=PostOut)
def update_post(
    post_id: int,
    post_in: PostUpdate,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional)
):
    return post_service.update_post(db, post_id, post_in, current_user)


@post_router.delete("/{post_id}")
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional)
):
    post_service.delete_post(db, post_id, current_user)
    return None


@post_router.patch("/{post_id}/status", response_model=PostOut)
def update_post_status(post_id: int, status: PostStatus = Query(...), db: Session = Depends(get_db)):
    return post_service.update_post_status(db, post_id, status)


@post_router.post("/{post_id}/like")
def like_post(post_id: int, db: Session = Depends(get_db)):
    post_service.like_post(db, post_id)
    return None


@post_router.delete("/{post_id}/like")
def unlike_post(post_id: int, db: Session = Depends(get_db)):
    post_service.unlike_post(db, post_id)
    return None


@post_router.post("/{post_id}/view")
def view_post(post_id: int, db: Session = Depends(get_db)):
    post_service.increment_view_count(db, post_id)
    return None


@post_router.patch("/{post_id}/display-order")
def update_display_order(
    post_id: int,
    display_order: int = Query(..., alias="displayOrder"),
    db: Session = Depends(get_db)
):
    post_service.update_display_order(db, post_id, display_order)
    return None
