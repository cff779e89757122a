from sqlalchemy import Column, DateTime, Integer, String, Text, UniqueConstraint

from app.db.base import Base
from app.utils import utcnow


class Revision(Base):
    """Snapshot of a post's content taken just before an edit replaced it."""

    __tablename__ = "blog_revisions"
    __table_args__ = (
        # Two concurrent edits cannot both claim the same revision number
        UniqueConstraint("post_id", "revision_number", name="uq_revision_post_number"),
    )

    id = Column(Integer, primary_key=True)
    # No foreign key: revisions outlive a deleted post
    post_id = Column(Integer, nullable=False, index=True)
    revision_number = Column(Integer, nullable=False)

    title = Column(String(500), nullable=False)
    content = Column(Text, nullable=False, default="")
    content_html = Column(Text)

    changed_by = Column(String(255))
    change_summary = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
