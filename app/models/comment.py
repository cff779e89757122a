from sqlalchemy import Column, DateTime, Integer, String, Text

from app.db.base import Base
from app.utils import utcnow

COMMENT_STATUSES = ("pending", "approved", "rejected", "spam")


class Comment(Base):
    __tablename__ = "blog_comments"

    id = Column(Integer, primary_key=True)
    post_id = Column(Integer, nullable=False, index=True)
    author_name = Column(String(255), nullable=False)
    author_email = Column(String(255))
    content = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="pending", index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
