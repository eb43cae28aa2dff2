import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import ForbiddenError, NotFoundError, NotPublishedError
from app.core.pagination import PageRequest, build_page
from app.core.security import is_admin
from app.models.post_db import post_crud
from app.models.post_db.post_db import Post
from app.models.user_db.user_db import User
from app.models.user_db.user_db_crud import get_user_by_id
from app.schemas.common.page_response import PageResponse
from app.schemas.post.post_base import PostCreate, PostOut, PostStatistics, PostUpdate
from app.services.choices import PostStatus, UserRole
from app.services.statistics import count_by_name

logger = logging.getLogger(__name__)


def to_dto(db: Session, post: Post) -> PostOut:
    author = get_user_by_id(db, post.author_id) if post.author_id is not None else None
    return PostOut(
        id=post.id,
        title=post.title,
        content=post.content,
        summary=post.summary,
        cover_image=post.cover_image,
        status=post.status,
        allow_comments=post.allow_comments,
        featured=post.featured,
        tags=post.tags,
        author_id=post.author_id,
        author_name=(author.full_name or author.username) if author else None,
        author_avatar=author.avatar_url if author else None,
        view_count=post.view_count or 0,
        like_count=post.like_count or 0,
        comment_count=post.comment_count or 0,
        display_order=post.display_order,
        published_at=post.published_at,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def to_entity(post_in: PostCreate) -> Post:
    optional = {
        "status": post_in.status,
        "allow_comments": post_in.allow_comments,
        "featured": post_in.featured,
    }
    # unset flags fall back to the column defaults
    return Post(
        title=post_in.title,
        content=post_in.content,
        summary=post_in.summary,
        cover_image=post_in.cover_image,
        tags=post_in.tags,
        view_count=0,
        like_count=0,
        comment_count=0,
        **{key: value for key, value in optional.items() if value is not None},
    )


def apply_update(post: Post, post_in: PostUpdate):
    post.title = post_in.title
    post.content = post_in.content
    post.summary = post_in.summary
    post.cover_image = post_in.cover_image
    post.status = post_in.status
    post.allow_comments = post_in.allow_comments
    post.featured = post_in.featured
    post.tags = post_in.tags


def _stamp_published(post: Post):
    if post.status == PostStatus.PUBLISHED and post.published_at is None:
        post.published_at = datetime.utcnow()


def _get_or_404(db: Session, post_id: int) -> Post:
    post = post_crud.get_post_by_id(db, post_id)
    if not post:
        raise NotFoundError("Post not found")
    return post


def check_post_permission(post: Post, current_user: Optional[User]):
    """
    Author-or-admin check for mutations.

    Routes are public, so anonymous callers are never blocked; the check only
    applies when the request identified a caller.
    """
    if current_user is None:
        return
    if post.author_id != current_user.id and current_user.role != UserRole.ADMIN:
        raise ForbiddenError("Not allowed to modify this post")


def _page(db: Session, rows_and_total, page_request: PageRequest) -> PageResponse[PostOut]:
    rows, total = rows_and_total
    return build_page([to_dto(db, post) for post in rows], total, page_request)


def list_published_posts(db: Session, page_request: PageRequest) -> PageResponse[PostOut]:
    return _page(db, post_crud.find_posts_by_status(db, PostStatus.PUBLISHED, page_request), page_request)


def get_featured_posts(db: Session) -> List[PostOut]:
    return [to_dto(db, post) for post in post_crud.find_featured_published_posts(db)]


def get_latest_posts(db: Session, limit: int) -> List[PostOut]:
    return [to_dto(db, post) for post in post_crud.find_latest_published_posts(db, limit)]


def get_post(db: Session, post_id: int, current_user: Optional[User] = None) -> PostOut:
    post = _get_or_404(db, post_id)
    if post.status != PostStatus.PUBLISHED and not is_admin(current_user):
        raise NotPublishedError()
    return to_dto(db, post)


def get_posts_by_status(db: Session, status: PostStatus, page_request: PageRequest) -> PageResponse[PostOut]:
    return _page(db, post_crud.find_posts_by_status(db, status, page_request), page_request)


def search_posts(db: Session, keyword: str, page_request: PageRequest) -> PageResponse[PostOut]:
    return _page(db, post_crud.search_published_posts(db, keyword, page_request), page_request)


def get_posts_by_tag(db: Session, tag: str) -> List[PostOut]:
    return [to_dto(db, post) for post in post_crud.find_published_posts_by_tag(db, tag)]


def create_post(db: Session, post_in: PostCreate, current_user: Optional[User] = None) -> PostOut:
    post = to_entity(post_in)
    post.author_id = current_user.id if current_user else None
    if post.status is None:
        post.status = PostStatus.DRAFT
    _stamp_published(post)

    post = post_crud.save_post(db, post)
    logger.info("Created post %s - %s", post.id, post.title)
    return to_dto(db, post)


def update_post(db: Session, post_id: int, post_in: PostUpdate, current_user: Optional[User] = None) -> PostOut:
    post = _get_or_404(db, post_id)
    check_post_permission(post, current_user)

    apply_update(post, post_in)
    _stamp_published(post)

    post = post_crud.save_post(db, post)
    logger.info("Updated post %s - %s", post.id, post.title)
    return to_dto(db, post)


def delete_post(db: Session, post_id: int, current_user: Optional[User] = None):
    post = _get_or_404(db, post_id)
    check_post_permission(post, current_user)

    post_crud.delete_post(db, post)
    logger.info("Deleted post %s - %s", post_id, post.title)


def update_post_status(db: Session, post_id: int, status: PostStatus) -> PostOut:
    post = _get_or_404(db, post_id)
    post.status = status
    _stamp_published(post)

    post = post_crud.save_post(db, post)
    logger.info("Post %s status -> %s", post.id, status.value)
    return to_dto(db, post)


def like_post(db: Session, post_id: int):
    post = _get_or_404(db, post_id)
    post.like_count = (post.like_count or 0) + 1
    post_crud.save_post(db, post)
    logger.info("Post %s liked", post_id)


def unlike_post(db: Session, post_id: int):
    post = _get_or_404(db, post_id)
    if (post.like_count or 0) > 0:
        post.like_count -= 1
        post_crud.save_post(db, post)
        logger.info("Post %s unliked", post_id)


def update_display_order(db: Session, post_id: int, display_order: int):
    post = _get_or_404(db, post_id)
    post.display_order = display_order
    post_crud.save_post(db, post)
    logger.info("Post %s display order -> %s", post_id, display_order)


def increment_view_count(db: Session, post_id: int):
    if post_crud.increment_view_count(db, post_id) == 0:
        raise NotFoundError("Post not found")


def get_post_statistics(db: Session) -> PostStatistics:
    return PostStatistics(
        total_posts=post_crud.count_posts(db),
        status_counts=count_by_name(PostStatus, post_crud.count_posts_by_status(db)),
        total_views=post_crud.sum_view_count(db),
        total_likes=post_crud.sum_like_count(db),
        total_comments=post_crud.sum_comment_count(db),
    )
