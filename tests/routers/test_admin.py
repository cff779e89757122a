import pytest

from app.routers import admin
from app.security import STAFF_USER_HEADER
from app.settings import Settings
from tests.conftest import build_client, make_comment, make_media, make_post

AUTH = {"Authorization": "Bearer secret", STAFF_USER_HEADER: "staff-1"}


@pytest.fixture
def client(session_factory, monkeypatch):
    monkeypatch.setattr("app.security.settings", Settings(BLOG_STAFF_TOKEN="secret"))
    return build_client(session_factory, admin.router)


def _create(client, **fields):
    res = client.post("/admin/posts", json=fields, headers=AUTH)
    assert res.status_code == 201
    return res.json()["data"]


def test_create_post_attributes_staff_user(client):
    res = client.post("/admin/posts", json={"title": "Air Freight Tips"}, headers=AUTH)

    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Post created successfully"
    assert body["data"]["slug"] == "air-freight-tips"
    assert body["data"]["created_by"] == "staff-1"
    assert body["data"]["status"] == "draft"


def test_create_same_title_twice(client):
    first = _create(client, title="Air Freight Tips")
    second = _create(client, title="Air Freight Tips")

    assert first["slug"] == "air-freight-tips"
    assert second["slug"] == "air-freight-tips-1"


def test_create_rejects_unknown_status(client):
    res = client.post(
        "/admin/posts", json={"title": "x", "status": "archived"}, headers=AUTH
    )
    assert res.status_code == 422


def test_list_posts_with_pagination_and_filters(client, db):
    for i in range(3):
        make_post(db, title=f"pub {i}", status="published", category="Air")
    make_post(db, title="draft", status="draft", category="Air")

    res = client.get(
        "/admin/posts",
        params={"status": "published", "category": "all", "limit": 2, "page": 1},
        headers=AUTH,
    )

    body = res.json()
    assert res.status_code == 200
    assert len(body["data"]) == 2
    assert body["pagination"] == {"page": 1, "limit": 2, "total": 3, "totalPages": 2}


def test_list_posts_status_all_means_no_filter(client, db):
    make_post(db, status="published")
    make_post(db, status="draft")

    body = client.get("/admin/posts", params={"status": "all"}, headers=AUTH).json()

    assert body["pagination"]["total"] == 2


def test_get_post_by_id(client, db):
    post = make_post(db, title="By id")

    res = client.get(f"/admin/post/{post.id}", headers=AUTH)

    assert res.json()["data"]["title"] == "By id"
    assert client.get("/admin/post/9999", headers=AUTH).status_code == 404


def test_update_and_list_revisions(client):
    post = _create(client, title="Rates", content="v1")

    res = client.put(
        f"/admin/posts/{post['id']}",
        json={"content": "v2", "change_summary": "new rates"},
        headers=AUTH,
    )

    assert res.status_code == 200
    assert res.json()["data"]["revision_number"] == 1
    revisions = client.get(
        f"/admin/posts/{post['id']}/revisions", headers=AUTH
    ).json()["data"]
    assert len(revisions) == 1
    assert revisions[0]["content"] == "v1"
    assert revisions[0]["changed_by"] == "staff-1"
    assert revisions[0]["change_summary"] == "new rates"


def test_update_missing_post_is_404(client):
    res = client.put("/admin/posts/777", json={"title": "x"}, headers=AUTH)

    assert res.status_code == 404
    assert res.json()["message"] == "Post not found"


def test_restore_revision(client):
    post = _create(client, title="T1", content="one")
    client.put(f"/admin/posts/{post['id']}", json={"content": "two"}, headers=AUTH)
    revision = client.get(
        f"/admin/posts/{post['id']}/revisions", headers=AUTH
    ).json()["data"][0]

    res = client.post(
        f"/admin/posts/{post['id']}/revisions/{revision['id']}/restore", headers=AUTH
    )

    assert res.status_code == 200
    assert res.json()["data"]["content"] == "one"
    assert res.json()["message"] == "Revision restored successfully"


def test_restore_unknown_revision_is_404(client):
    post = _create(client, title="T1")

    res = client.post(f"/admin/posts/{post['id']}/revisions/55/restore", headers=AUTH)

    assert res.status_code == 404
    assert res.json()["message"] == "Revision not found"


def test_delete_post(client, db):
    post = make_post(db)

    res = client.delete(f"/admin/posts/{post.id}", headers=AUTH)

    assert res.json() == {"success": True, "message": "Post deleted successfully"}
    assert client.delete(f"/admin/posts/{post.id}", headers=AUTH).status_code == 404


def test_analytics(client, db):
    make_post(db, status="published", views_count=5)
    make_post(db, status="published", views_count=3)
    make_post(db, status="draft", views_count=0)

    data = client.get("/admin/analytics", headers=AUTH).json()["data"]

    assert data["totalPosts"] == 3
    assert data["publishedPosts"] == 2
    assert data["draftPosts"] == 1
    assert data["totalViews"] == 8
    assert [p["views_count"] for p in data["topPosts"]] == [5, 3, 0]


def test_media_crud(client, db):
    make_media(db, filename="old.png")

    res = client.post(
        "/admin/media",
        json={
            "filename": "dock.jpg",
            "originalName": "Dock.jpg",
            "mimeType": "image/jpeg",
            "size": 10,
            "url": "https://cdn.example.com/dock.jpg",
        },
        headers=AUTH,
    )
    assert res.status_code == 201
    created = res.json()["data"]
    assert created["uploaded_by"] == "staff-1"

    listing = client.get("/admin/media", params={"type": "image/jpeg"}, headers=AUTH).json()
    assert [m["filename"] for m in listing["data"]] == ["dock.jpg"]
    assert listing["pagination"]["limit"] == 20

    assert client.delete(f"/admin/media/{created['id']}", headers=AUTH).status_code == 200
    assert client.delete(f"/admin/media/{created['id']}", headers=AUTH).status_code == 404


def test_comment_moderation(client, db):
    post = make_post(db)
    comment = make_comment(db, post.id)

    listed = client.get(
        f"/admin/posts/{post.id}/comments", params={"status": "pending"}, headers=AUTH
    ).json()["data"]
    assert [c["id"] for c in listed] == [comment.id]

    res = client.put(
        f"/admin/comments/{comment.id}", json={"status": "approved"}, headers=AUTH
    )
    assert res.json()["data"]["status"] == "approved"

    bad = client.put(f"/admin/comments/{comment.id}", json={"status": "maybe"}, headers=AUTH)
    assert bad.status_code == 422

    assert client.delete(f"/admin/comments/{comment.id}", headers=AUTH).status_code == 200
    assert client.delete(f"/admin/comments/{comment.id}", headers=AUTH).status_code == 404


def test_write_without_token_is_forbidden(client):
    res = client.post("/admin/posts", json={"title": "x"})
    assert res.status_code == 403


def test_list_posts_accepts_camel_case_sort_params(client, db):
    for title in ("bravo", "alpha", "charlie"):
        make_post(db, title=title)

    res = client.get(
        "/admin/posts", params={"sortBy": "title", "sortOrder": "asc"}, headers=AUTH
    )

    assert [p["title"] for p in res.json()["data"]] == ["alpha", "bravo", "charlie"]
