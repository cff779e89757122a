import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from app import dependencies as deps
from app.errors import CommentsClosedError, NotFoundError
from app.schemas.blog import CategoryOut, CommentCreate, CommentOut, PostOut, TagOut
from app.schemas.responses import failure, success
from app.services.comments_service import CommentsService
from app.services.posts_service import PostsService
from app.services.taxonomy_service import TaxonomyService
from app.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
def list_published_posts(
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    featured: bool = False,
    preview: bool = False,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Published posts, newest first. ``preview`` also returns drafts."""
    try:
        posts = service.list_published(limit, featured=featured, preview=preview)
        return success([PostOut.model_validate(p) for p in posts])
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing published posts: {e}")
        return failure(500, "Failed to fetch posts", str(e))


@router.get("/post/{slug}")
def get_post(
    slug: str,
    preview: bool = False,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug, counting the view unless previewing."""
    try:
        post = service.get_by_slug(slug, preview=preview)
        if not preview:
            service.record_view(post)
        return success(PostOut.model_validate(post))
    except NotFoundError:
        return failure(404, "Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        return failure(500, "Failed to fetch post", str(e))


@router.get("/post/{slug}/comments")
def list_post_comments(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    comments: CommentsService = Depends(deps.get_comments_service),
):
    try:
        post = service.get_by_slug(slug)
        approved = comments.list_for_post(post.id, status="approved")
        return success([CommentOut.model_validate(c) for c in approved])
    except NotFoundError:
        return failure(404, "Post not found")
    except Exception as e:
        logger.error(f"Unexpected error listing comments for {slug}: {e}")
        return failure(500, "Failed to fetch comments", str(e))


@router.post("/post/{slug}/comments", status_code=201)
def submit_comment(
    slug: str,
    payload: CommentCreate,
    service: PostsService = Depends(deps.get_posts_service),
    comments: CommentsService = Depends(deps.get_comments_service),
):
    try:
        post = service.get_by_slug(slug)
        comment = comments.submit(post, payload)
        return success(
            CommentOut.model_validate(comment),
            message="Comment submitted for moderation",
            status_code=201,
        )
    except NotFoundError:
        return failure(404, "Post not found")
    except CommentsClosedError:
        return failure(403, "Comments are closed for this post")
    except Exception as e:
        logger.error(f"Unexpected error submitting comment on {slug}: {e}")
        return failure(500, "Failed to submit comment", str(e))


@router.get("/categories")
def list_categories(service: TaxonomyService = Depends(deps.get_taxonomy_service)):
    try:
        return success([CategoryOut.model_validate(c) for c in service.list_categories()])
    except Exception as e:
        logger.error(f"Unexpected error listing categories: {e}")
        return failure(500, "Failed to fetch categories", str(e))


@router.get("/tags")
def list_tags(service: TaxonomyService = Depends(deps.get_taxonomy_service)):
    try:
        return success([TagOut.model_validate(t) for t in service.list_tags()])
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        return failure(500, "Failed to fetch tags", str(e))
