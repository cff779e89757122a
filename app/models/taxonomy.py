from sqlalchemy import Column, DateTime, Integer, String, Text

from app.db.base import Base
from app.utils import utcnow


class Category(Base):
    __tablename__ = "blog_categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, unique=True)
    slug = Column(String(255), nullable=False, unique=True)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class Tag(Base):
    __tablename__ = "blog_tags"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, unique=True)
    slug = Column(String(255), nullable=False, unique=True)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
