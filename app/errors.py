class NotFoundError(Exception):
    """Raised when a post, revision, media item or comment does not exist."""

    def __init__(self, entity: str, key=None):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found")


class CommentsClosedError(Exception):
    """Raised when a comment targets a post with comments disabled."""
