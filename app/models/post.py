from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text

from app.db.base import Base
from app.utils import utcnow

POST_STATUSES = ("draft", "scheduled", "published")


class Post(Base):
    __tablename__ = "blog_posts"

    id = Column(Integer, primary_key=True)
    title = Column(String(500), nullable=False)
    slug = Column(String(512), nullable=False, unique=True, index=True)
    excerpt = Column(Text)
    content = Column(Text, nullable=False, default="")
    content_html = Column(Text)
    author = Column(String(255), nullable=False)
    category = Column(String(255), index=True)
    tags = Column(JSON, nullable=False, default=list)
    featured_image = Column(String(1024))

    # SEO
    meta_title = Column(String(500))
    meta_description = Column(Text)
    focus_keyword = Column(String(255))

    status = Column(String(20), nullable=False, default="draft", index=True)
    scheduled_at = Column(DateTime(timezone=True))
    # Stamped once, on the first transition into "published"
    published_at = Column(DateTime(timezone=True), index=True)

    views_count = Column(Integer, nullable=False, default=0, server_default="0")
    allow_comments = Column(Boolean, nullable=False, default=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_sticky = Column(Boolean, nullable=False, default=False)
    revision_number = Column(Integer, nullable=False, default=0, server_default="0")

    created_by = Column(String(255))
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
