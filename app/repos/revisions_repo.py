from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.revision import Revision


class RevisionsRepo:
    """Append-only store of post revisions."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, revision_id: int) -> Optional[Revision]:
        return self.db.get(Revision, revision_id)

    def list_for_post(self, post_id: int) -> List[Revision]:
        stmt = (
            select(Revision)
            .where(Revision.post_id == post_id)
            .order_by(Revision.revision_number.desc(), Revision.id.desc())
        )
        return list(self.db.scalars(stmt))

    def add(self, revision: Revision) -> Revision:
        self.db.add(revision)
        self.db.commit()
        self.db.refresh(revision)
        return revision
