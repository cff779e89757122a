from sqlalchemy import Column, DateTime, Integer, String

from app.db.base import Base
from app.utils import utcnow


class Media(Base):
    __tablename__ = "blog_media"

    id = Column(Integer, primary_key=True)
    filename = Column(String(512), nullable=False, index=True)
    original_name = Column(String(512))
    mime_type = Column(String(255), nullable=False)
    size = Column(Integer, nullable=False, default=0)
    url = Column(String(1024), nullable=False)
    uploaded_by = Column(String(255))
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
