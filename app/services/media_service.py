from typing import List, Optional, Tuple

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from app.errors import NotFoundError
from app.models.media import Media
from app.schemas.blog import MediaCreate
from app.utils import like_pattern


class MediaService:
    def __init__(self, db: Session):
        self.db = db

    def list_media(
        self,
        *,
        page: int = 1,
        limit: int = 20,
        search: Optional[str] = None,
        mime_type: Optional[str] = None,
    ) -> Tuple[List[Media], int]:
        stmt = select(Media)
        if search:
            stmt = stmt.where(Media.filename.ilike(like_pattern(search), escape="\\"))
        if mime_type:
            stmt = stmt.where(Media.mime_type.like(f"{mime_type}%"))

        total = self.db.scalar(select(func.count()).select_from(stmt.subquery())) or 0
        stmt = (
            stmt.order_by(Media.created_at.desc(), Media.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        return list(self.db.scalars(stmt)), total

    def create_media(self, data: MediaCreate, user_id: Optional[str] = None) -> Media:
        media = Media(
            filename=data.filename,
            original_name=data.originalName,
            mime_type=data.mimeType,
            size=data.size,
            url=data.url,
            uploaded_by=user_id,
        )
        self.db.add(media)
        self.db.commit()
        self.db.refresh(media)
        return media

    def delete_media(self, media_id: int) -> None:
        result = self.db.execute(delete(Media).where(Media.id == media_id))
        self.db.commit()
        if not result.rowcount:
            raise NotFoundError("Media", media_id)
