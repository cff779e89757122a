from app.models.comment import COMMENT_STATUSES, Comment
from app.models.media import Media
from app.models.post import POST_STATUSES, Post
from app.models.revision import Revision
from app.models.taxonomy import Category, Tag

__all__ = [
    "COMMENT_STATUSES",
    "POST_STATUSES",
    "Category",
    "Comment",
    "Media",
    "Post",
    "Revision",
    "Tag",
]
