from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.orm import Session

from app.models.post import Post
from app.utils import like_pattern

SORTABLE_FIELDS = {
    "created_at": Post.created_at,
    "updated_at": Post.updated_at,
    "published_at": Post.published_at,
    "title": Post.title,
    "slug": Post.slug,
    "status": Post.status,
    "views_count": Post.views_count,
}


class PostsRepo:
    def __init__(self, db: Session):
        self.db = db

    def get(self, post_id: int) -> Optional[Post]:
        return self.db.get(Post, post_id)

    def get_by_slug(
        self, slug: str, visible_at: Optional[datetime] = None
    ) -> Optional[Post]:
        """Fetch by slug; with ``visible_at`` only a post published by then."""
        stmt = select(Post).where(Post.slug == slug)
        if visible_at is not None:
            stmt = self._published_by(stmt, visible_at)
        return self.db.scalars(stmt).first()

    def slug_exists(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        stmt = select(Post.id).where(Post.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(Post.id != exclude_id)
        return self.db.scalars(stmt.limit(1)).first() is not None

    def list_posts(
        self,
        *,
        page: int = 1,
        limit: int = 10,
        status: Optional[str] = None,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
        search: Optional[str] = None,
        sort_by: str = "created_at",
        sort_order: str = "desc",
    ) -> Tuple[List[Post], int]:
        stmt = select(Post)
        if status:
            stmt = stmt.where(Post.status == status)
        if category:
            stmt = stmt.where(Post.category == category)
        if featured:
            stmt = stmt.where(Post.is_featured.is_(True))
        if search:
            pattern = like_pattern(search)
            stmt = stmt.where(
                or_(
                    Post.title.ilike(pattern, escape="\\"),
                    Post.content.ilike(pattern, escape="\\"),
                    Post.excerpt.ilike(pattern, escape="\\"),
                )
            )

        total = self.db.scalar(select(func.count()).select_from(stmt.subquery())) or 0

        column = SORTABLE_FIELDS.get(sort_by, Post.created_at)
        if sort_order == "asc":
            stmt = stmt.order_by(column.asc(), Post.id.asc())
        else:
            stmt = stmt.order_by(column.desc(), Post.id.desc())

        offset = (page - 1) * limit
        items = list(self.db.scalars(stmt.offset(offset).limit(limit)))
        return items, total

    def list_published(
        self,
        *,
        limit: int,
        featured: bool = False,
        visible_at: Optional[datetime] = None,
    ) -> List[Post]:
        stmt = select(Post)
        if visible_at is not None:
            stmt = self._published_by(stmt, visible_at)
        if featured:
            stmt = stmt.where(Post.is_featured.is_(True))
        stmt = stmt.order_by(Post.published_at.desc(), Post.id.desc()).limit(limit)
        return list(self.db.scalars(stmt))

    def add(self, post: Post) -> Post:
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)
        return post

    def save(self, post: Post) -> Post:
        self.db.commit()
        self.db.refresh(post)
        return post

    def rollback(self) -> None:
        self.db.rollback()

    def delete(self, post_id: int) -> bool:
        result = self.db.execute(delete(Post).where(Post.id == post_id))
        self.db.commit()
        return result.rowcount > 0

    def increment_views(self, post_id: int) -> None:
        self.db.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(views_count=Post.views_count + 1)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()

    def count(self, status: Optional[str] = None) -> int:
        stmt = select(func.count(Post.id))
        if status:
            stmt = stmt.where(Post.status == status)
        return self.db.scalar(stmt) or 0

    def total_views(self) -> int:
        return self.db.scalar(select(func.coalesce(func.sum(Post.views_count), 0))) or 0

    def top_by_views(self, limit: int) -> List[Post]:
        stmt = select(Post).order_by(Post.views_count.desc(), Post.id.asc()).limit(limit)
        return list(self.db.scalars(stmt))

    @staticmethod
    def _published_by(stmt, moment: datetime):
        return stmt.where(
            Post.status == "published",
            Post.published_at.is_not(None),
            Post.published_at <= moment,
        )
