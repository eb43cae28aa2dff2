from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, Enum, ForeignKey
from datetime import datetime
from app.core.database import Base
from app.services.choices import PostStatus


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    summary = Column(String(500), nullable=True)
    cover_image = Column(String(200), nullable=True)

    status = Column(Enum(PostStatus), nullable=False, default=PostStatus.DRAFT, index=True)
    allow_comments = Column(Boolean, default=True)
    featured = Column(Boolean, default=False)
    tags = Column(String(500), nullable=True)  # comma separated, ex: 'consensus,zk'

    author_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)

    view_count = Column(Integer, nullable=False, default=0)
    like_count = Column(Integer, nullable=False, default=0)
    comment_count = Column(Integer, nullable=False, default=0)
    display_order = Column(Integer, nullable=True, default=0)

    published_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
