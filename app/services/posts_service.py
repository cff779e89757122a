import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from app.errors import NotFoundError
from app.models.post import Post
from app.models.revision import Revision
from app.repos.posts_repo import PostsRepo
from app.repos.revisions_repo import RevisionsRepo
from app.schemas.blog import Analytics, PostCreate, PostUpdate, TopPost
from app.settings import settings
from app.utils import slugify, utcnow

logger = logging.getLogger(__name__)

# An explicit null for these means "leave as is", never "clear"
NON_NULLABLE_FIELDS = (
    "title",
    "slug",
    "content",
    "author",
    "status",
    "tags",
    "allow_comments",
    "is_featured",
    "is_sticky",
)
FALLBACK_SLUG = "post"


class PostsService:
    def __init__(self, repo: PostsRepo, revisions: RevisionsRepo):
        self.repo = repo
        self.revisions = revisions

    # --- admin ---------------------------------------------------------

    def create_post(self, data: PostCreate, user_id: Optional[str] = None) -> Post:
        fields = data.model_dump(exclude={"slug"})
        fields["author"] = data.author or settings.DEFAULT_AUTHOR
        base = slugify(data.slug or "") or slugify(data.title) or FALLBACK_SLUG

        candidate = base
        counter = 1
        while True:
            if not self.repo.slug_exists(candidate):
                post = Post(**fields, slug=candidate, created_by=user_id)
                if data.status == "published":
                    post.published_at = utcnow()
                try:
                    return self.repo.add(post)
                except IntegrityError:
                    self.repo.rollback()
                    # Only a concurrent writer taking the slug is retried
                    if not self.repo.slug_exists(candidate):
                        raise
                    logger.info(f"Slug '{candidate}' taken concurrently, probing next")
            candidate = f"{base}-{counter}"
            counter += 1

    def get_post(self, post_id: int) -> Post:
        post = self.repo.get(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    def list_posts(self, **filters) -> Tuple[List[Post], int]:
        return self.repo.list_posts(**filters)

    def update_post(
        self,
        post_id: int,
        patch: PostUpdate,
        user_id: Optional[str] = None,
        *,
        force_revision: bool = False,
    ) -> Post:
        """
        Apply a partial update. When the body changes (or ``force_revision``
        is set) the pre-update state is saved as a revision first.
        """
        post = self.get_post(post_id)
        changes = patch.changes()
        change_summary = changes.pop("change_summary", None)
        for field in NON_NULLABLE_FIELDS:
            if field in changes and changes[field] is None:
                changes.pop(field)

        new_content = changes.get("content")
        if force_revision or (new_content is not None and new_content != post.content):
            next_number = (post.revision_number or 0) + 1
            self.revisions.add(
                Revision(
                    post_id=post.id,
                    revision_number=next_number,
                    title=post.title,
                    content=post.content,
                    content_html=post.content_html,
                    changed_by=user_id,
                    change_summary=change_summary,
                )
            )
            logger.debug(f"Saved revision {next_number} of post {post.id}")
            post.revision_number = next_number

        if "slug" in changes:
            requested = slugify(changes.pop("slug"))
            if requested and requested != post.slug:
                post.slug = self._free_slug(requested, exclude_id=post.id)

        if changes.get("status") == "published" and post.published_at is None:
            post.published_at = utcnow()

        for field, value in changes.items():
            setattr(post, field, value)
        post.updated_at = utcnow()
        return self.repo.save(post)

    def delete_post(self, post_id: int) -> None:
        # Revisions and comments of the post are left in place
        if not self.repo.delete(post_id):
            raise NotFoundError("Post", post_id)

    def list_revisions(self, post_id: int) -> List[Revision]:
        return self.revisions.list_for_post(post_id)

    def restore_revision(
        self, post_id: int, revision_id: int, user_id: Optional[str] = None
    ) -> Post:
        revision = self.revisions.get(revision_id)
        if revision is None or revision.post_id != post_id:
            raise NotFoundError("Revision", revision_id)

        patch = PostUpdate(
            title=revision.title,
            content=revision.content,
            content_html=revision.content_html,
            change_summary=f"Restored from revision {revision.revision_number}",
        )
        return self.update_post(post_id, patch, user_id, force_revision=True)

    def get_analytics(self) -> Analytics:
        return Analytics(
            totalPosts=self.repo.count(),
            publishedPosts=self.repo.count("published"),
            draftPosts=self.repo.count("draft"),
            totalViews=self.repo.total_views(),
            topPosts=[
                TopPost.model_validate(post)
                for post in self.repo.top_by_views(settings.TOP_POSTS_LIMIT)
            ],
        )

    # --- public --------------------------------------------------------

    def list_published(
        self, limit: int, featured: bool = False, preview: bool = False
    ) -> List[Post]:
        visible_at = None if preview else utcnow()
        return self.repo.list_published(
            limit=limit, featured=featured, visible_at=visible_at
        )

    def get_by_slug(self, slug: str, preview: bool = False) -> Post:
        visible_at = None if preview else utcnow()
        post = self.repo.get_by_slug(slug, visible_at=visible_at)
        if post is None:
            raise NotFoundError("Post", slug)
        return post

    def record_view(self, post: Post) -> None:
        """Best-effort view bump; a failure never breaks the read."""
        post_id, slug = post.id, post.slug
        try:
            self.repo.increment_views(post_id)
        except Exception as e:
            self.repo.rollback()
            logger.warning(f"Failed to record view for {slug} ({post_id}): {e}")

    def _free_slug(self, base: str, exclude_id: Optional[int] = None) -> str:
        candidate = base
        counter = 1
        while self.repo.slug_exists(candidate, exclude_id=exclude_id):
            candidate = f"{base}-{counter}"
            counter += 1
        return candidate
