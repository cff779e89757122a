import itertools
import os

# Keep app.db.base off Postgres when modules are imported under test
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CREATE_TABLES", "false")

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.db.base import Base, get_db, init_db  # noqa: E402
from app.models import Category, Comment, Media, Post, Tag  # noqa: E402
from app.repos.posts_repo import PostsRepo  # noqa: E402
from app.repos.revisions_repo import RevisionsRepo  # noqa: E402
from app.services.posts_service import PostsService  # noqa: E402

_slug_counter = itertools.count(1)


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database shared across threads."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def posts_service(db):
    return PostsService(repo=PostsRepo(db), revisions=RevisionsRepo(db))


def make_post(db, **overrides) -> Post:
    """Insert a post directly, bypassing the service rules."""
    fields = {
        "title": "Untitled",
        "slug": f"post-{next(_slug_counter)}",
        "content": "body",
        "author": "Pan Logistics",
        "status": "draft",
        "tags": [],
    }
    fields.update(overrides)
    post = Post(**fields)
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def make_comment(db, post_id: int, **overrides) -> Comment:
    fields = {
        "post_id": post_id,
        "author_name": "Reader",
        "content": "Nice post",
        "status": "pending",
    }
    fields.update(overrides)
    comment = Comment(**fields)
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment


def make_media(db, **overrides) -> Media:
    fields = {
        "filename": "truck.png",
        "original_name": "Truck.png",
        "mime_type": "image/png",
        "size": 1024,
        "url": "https://cdn.example.com/truck.png",
    }
    fields.update(overrides)
    media = Media(**fields)
    db.add(media)
    db.commit()
    db.refresh(media)
    return media


def seed_taxonomy(db) -> None:
    db.add_all(
        [
            Category(name="Shipping", slug="shipping"),
            Category(name="Air Freight", slug="air-freight"),
            Tag(name="tips", slug="tips"),
            Tag(name="customs", slug="customs"),
        ]
    )
    db.commit()


def build_client(session_factory, *routers, **include_kwargs) -> TestClient:
    """App with the given routers wired to the test database."""
    app = FastAPI()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    for router in routers:
        app.include_router(router, **include_kwargs)
    return TestClient(app)
