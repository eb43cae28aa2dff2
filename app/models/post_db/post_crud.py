from typing import List

from sqlalchemy import func, or_, update
from sqlalchemy.orm import Session

from app.core.pagination import PageRequest, paginate
from app.models.post_db.post_db import Post
from app.services.choices import PostStatus


def get_post_by_id(db: Session, post_id: int):
    return db.query(Post).filter(Post.id == post_id).first()


def find_posts_by_status(db: Session, status: PostStatus, page_request: PageRequest):
    query = db.query(Post).filter(Post.status == status)
    return paginate(query, Post, page_request)


def find_featured_published_posts(db: Session) -> List[Post]:
    return (
        db.query(Post)
        .filter(Post.featured.is_(True), Post.status == PostStatus.PUBLISHED)
        .order_by(Post.display_order.asc(), Post.created_at.desc())
        .all()
    )


def find_latest_published_posts(db: Session, limit: int) -> List[Post]:
    return (
        db.query(Post)
        .filter(Post.status == PostStatus.PUBLISHED)
        .order_by(Post.published_at.desc(), Post.id.desc())
        .limit(limit)
        .all()
    )


def search_published_posts(db: Session, keyword: str, page_request: PageRequest):
    pattern = f"%{keyword}%"
    query = db.query(Post).filter(
        Post.status == PostStatus.PUBLISHED,
        or_(Post.title.ilike(pattern), Post.content.ilike(pattern), Post.summary.ilike(pattern)),
    )
    return paginate(query, Post, page_request)


def find_published_posts_by_tag(db: Session, tag: str) -> List[Post]:
    # literal substring match on the delimited tag string
    return (
        db.query(Post)
        .filter(Post.status == PostStatus.PUBLISHED, Post.tags.contains(tag, autoescape=True))
        .order_by(Post.published_at.desc())
        .all()
    )


def save_post(db: Session, post: Post) -> Post:
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def delete_post(db: Session, post: Post):
    db.delete(post)
    db.commit()


def increment_view_count(db: Session, post_id: int) -> int:
    result = db.execute(
        update(Post).where(Post.id == post_id).values(view_count=Post.view_count + 1)
    )
    db.commit()
    return result.rowcount


def count_posts(db: Session) -> int:
    return db.query(Post).count()


def count_posts_by_status(db: Session):
    return db.query(Post.status, func.count(Post.id)).group_by(Post.status).all()


def _sum(db: Session, column) -> int:
    return int(db.query(func.coalesce(func.sum(column), 0)).scalar() or 0)


def sum_view_count(db: Session) -> int:
    return _sum(db, Post.view_count)


def sum_like_count(db: Session) -> int:
    return _sum(db, Post.like_count)


def sum_comment_count(db: Session) -> int:
    return _sum(db, Post.comment_count)
