from typing import List

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.errors import CommentsClosedError, NotFoundError
from app.models.comment import Comment
from app.models.post import Post
from app.schemas.blog import CommentCreate
from app.utils import utcnow


class CommentsService:
    def __init__(self, db: Session):
        self.db = db

    def list_for_post(self, post_id: int, status: str = "all") -> List[Comment]:
        stmt = select(Comment).where(Comment.post_id == post_id)
        if status and status != "all":
            stmt = stmt.where(Comment.status == status)
        stmt = stmt.order_by(Comment.created_at.desc(), Comment.id.desc())
        return list(self.db.scalars(stmt))

    def submit(self, post: Post, data: CommentCreate) -> Comment:
        """New comments always wait for moderation."""
        if not post.allow_comments:
            raise CommentsClosedError(post.slug)
        comment = Comment(
            post_id=post.id,
            author_name=data.author_name,
            author_email=data.author_email,
            content=data.content,
            status="pending",
        )
        self.db.add(comment)
        self.db.commit()
        self.db.refresh(comment)
        return comment

    def set_status(self, comment_id: int, status: str) -> Comment:
        comment = self.db.get(Comment, comment_id)
        if comment is None:
            raise NotFoundError("Comment", comment_id)
        comment.status = status
        comment.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(comment)
        return comment

    def delete_comment(self, comment_id: int) -> None:
        result = self.db.execute(delete(Comment).where(Comment.id == comment_id))
        self.db.commit()
        if not result.rowcount:
            raise NotFoundError("Comment", comment_id)
