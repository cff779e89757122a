from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.taxonomy import Category, Tag


class TaxonomyService:
    def __init__(self, db: Session):
        self.db = db

    def list_categories(self) -> List[Category]:
        return list(self.db.scalars(select(Category).order_by(Category.name)))

    def list_tags(self) -> List[Tag]:
        return list(self.db.scalars(select(Tag).order_by(Tag.name)))
