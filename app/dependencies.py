from fastapi import Depends

from app.db.base import get_db
from app.repos.posts_repo import PostsRepo
from app.repos.revisions_repo import RevisionsRepo
from app.services.comments_service import CommentsService
from app.services.media_service import MediaService
from app.services.posts_service import PostsService
from app.services.taxonomy_service import TaxonomyService


def get_posts_repo(db=Depends(get_db)):
    return PostsRepo(db)


def get_revisions_repo(db=Depends(get_db)):
    return RevisionsRepo(db)


def get_posts_service(
    repo=Depends(get_posts_repo),
    revisions=Depends(get_revisions_repo),
):
    return PostsService(repo=repo, revisions=revisions)


def get_media_service(db=Depends(get_db)):
    return MediaService(db)


def get_comments_service(db=Depends(get_db)):
    return CommentsService(db)


def get_taxonomy_service(db=Depends(get_db)):
    return TaxonomyService(db)
