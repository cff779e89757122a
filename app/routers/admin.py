import logging
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query

from app import dependencies as deps
from app.errors import NotFoundError
from app.schemas.blog import (
    CommentOut,
    CommentStatusUpdate,
    MediaCreate,
    MediaOut,
    PostCreate,
    PostOut,
    PostUpdate,
    RevisionOut,
)
from app.schemas.responses import Pagination, failure, success
from app.security import get_staff_user
from app.services.comments_service import CommentsService
from app.services.media_service import MediaService
from app.services.posts_service import PostsService
from app.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


def _unless_all(value: Optional[str]) -> Optional[str]:
    return None if value in (None, "", "all") else value


# --- posts -------------------------------------------------------------


@router.get("/posts")
def list_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    status: Optional[str] = None,
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    search: Optional[str] = None,
    sort_by: str = Query("created_at", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query("desc", alias="sortOrder"),
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        posts, total = service.list_posts(
            page=page,
            limit=limit,
            status=_unless_all(status),
            category=_unless_all(category),
            featured=featured,
            search=search or None,
            sort_by=sort_by,
            sort_order=sort_order,
        )
        return success(
            [PostOut.model_validate(p) for p in posts],
            pagination=Pagination.build(page, limit, total),
        )
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        return failure(500, "Failed to fetch posts", str(e))


@router.get("/post/{post_id}")
def get_post(post_id: int, service: PostsService = Depends(deps.get_posts_service)):
    try:
        return success(PostOut.model_validate(service.get_post(post_id)))
    except NotFoundError:
        return failure(404, "Post not found")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {post_id}: {e}")
        return failure(500, "Failed to fetch post", str(e))


@router.post("/posts", status_code=201)
def create_post(
    payload: PostCreate,
    user_id: Optional[str] = Depends(get_staff_user),
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        post = service.create_post(payload, user_id=user_id)
        logger.info(f"Created post {post.id} ({post.slug})")
        return success(
            PostOut.model_validate(post),
            message="Post created successfully",
            status_code=201,
        )
    except Exception as e:
        logger.error(f"Unexpected error creating post: {e}")
        return failure(500, "Failed to create post", str(e))


@router.put("/posts/{post_id}")
def update_post(
    post_id: int,
    payload: PostUpdate,
    user_id: Optional[str] = Depends(get_staff_user),
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        post = service.update_post(post_id, payload, user_id=user_id)
        return success(PostOut.model_validate(post), message="Post updated successfully")
    except NotFoundError:
        return failure(404, "Post not found")
    except Exception as e:
        logger.error(f"Unexpected error updating post {post_id}: {e}")
        return failure(500, "Failed to update post", str(e))


@router.delete("/posts/{post_id}")
def delete_post(post_id: int, service: PostsService = Depends(deps.get_posts_service)):
    try:
        service.delete_post(post_id)
        return success(message="Post deleted successfully")
    except NotFoundError:
        return failure(404, "Post not found")
    except Exception as e:
        logger.error(f"Unexpected error deleting post {post_id}: {e}")
        return failure(500, "Failed to delete post", str(e))


# --- revisions ---------------------------------------------------------


@router.get("/posts/{post_id}/revisions")
def list_revisions(
    post_id: int, service: PostsService = Depends(deps.get_posts_service)
):
    try:
        revisions = service.list_revisions(post_id)
        return success([RevisionOut.model_validate(r) for r in revisions])
    except Exception as e:
        logger.error(f"Unexpected error listing revisions of post {post_id}: {e}")
        return failure(500, "Failed to fetch revisions", str(e))


@router.post("/posts/{post_id}/revisions/{revision_id}/restore")
def restore_revision(
    post_id: int,
    revision_id: int,
    user_id: Optional[str] = Depends(get_staff_user),
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        post = service.restore_revision(post_id, revision_id, user_id=user_id)
        return success(
            PostOut.model_validate(post), message="Revision restored successfully"
        )
    except NotFoundError as e:
        return failure(404, str(e))
    except Exception as e:
        logger.error(f"Unexpected error restoring revision {revision_id}: {e}")
        return failure(500, "Failed to restore revision", str(e))


@router.get("/analytics")
def get_analytics(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return success(service.get_analytics())
    except Exception as e:
        logger.error(f"Unexpected error computing analytics: {e}")
        return failure(500, "Failed to fetch analytics", str(e))


# --- media -------------------------------------------------------------


@router.get("/media")
def list_media(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.MEDIA_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    search: Optional[str] = None,
    type: Optional[str] = None,
    service: MediaService = Depends(deps.get_media_service),
):
    try:
        items, total = service.list_media(
            page=page, limit=limit, search=search, mime_type=type
        )
        return success(
            [MediaOut.model_validate(m) for m in items],
            pagination=Pagination.build(page, limit, total),
        )
    except Exception as e:
        logger.error(f"Unexpected error listing media: {e}")
        return failure(500, "Failed to fetch media", str(e))


@router.post("/media", status_code=201)
def upload_media(
    payload: MediaCreate,
    user_id: Optional[str] = Depends(get_staff_user),
    service: MediaService = Depends(deps.get_media_service),
):
    try:
        media = service.create_media(payload, user_id=user_id)
        return success(
            MediaOut.model_validate(media),
            message="Media uploaded successfully",
            status_code=201,
        )
    except Exception as e:
        logger.error(f"Unexpected error saving media {payload.filename}: {e}")
        return failure(500, "Failed to upload media", str(e))


@router.delete("/media/{media_id}")
def delete_media(
    media_id: int, service: MediaService = Depends(deps.get_media_service)
):
    try:
        service.delete_media(media_id)
        return success(message="Media deleted successfully")
    except NotFoundError:
        return failure(404, "Media not found")
    except Exception as e:
        logger.error(f"Unexpected error deleting media {media_id}: {e}")
        return failure(500, "Failed to delete media", str(e))


# --- comments ----------------------------------------------------------


@router.get("/posts/{post_id}/comments")
def list_comments(
    post_id: int,
    status: str = "all",
    service: CommentsService = Depends(deps.get_comments_service),
):
    try:
        comments = service.list_for_post(post_id, status=status)
        return success([CommentOut.model_validate(c) for c in comments])
    except Exception as e:
        logger.error(f"Unexpected error listing comments of post {post_id}: {e}")
        return failure(500, "Failed to fetch comments", str(e))


@router.put("/comments/{comment_id}")
def update_comment(
    comment_id: int,
    payload: CommentStatusUpdate,
    service: CommentsService = Depends(deps.get_comments_service),
):
    try:
        comment = service.set_status(comment_id, payload.status)
        return success(
            CommentOut.model_validate(comment), message="Comment updated successfully"
        )
    except NotFoundError:
        return failure(404, "Comment not found")
    except Exception as e:
        logger.error(f"Unexpected error updating comment {comment_id}: {e}")
        return failure(500, "Failed to update comment", str(e))


@router.delete("/comments/{comment_id}")
def delete_comment(
    comment_id: int, service: CommentsService = Depends(deps.get_comments_service)
):
    try:
        service.delete_comment(comment_id)
        return success(message="Comment deleted successfully")
    except NotFoundError:
        return failure(404, "Comment not found")
    except Exception as e:
        logger.error(f"Unexpected error deleting comment {comment_id}: {e}")
        return failure(500, "Failed to delete comment", str(e))
