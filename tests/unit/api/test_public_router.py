import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_public_blog_service
from api.main import app
from blogsearch.service import PublicBlogService
from errors.errors import DocumentStoreError
from services.document_store import DocumentStore, InMemoryDocumentStore
from utils.config import PublicBlogSettings


class BrokenStore(DocumentStore):
    def fetch_all_documents(self):
        raise DocumentStoreError("disk on fire")


@pytest.fixture
def service(make_document):
    store = InMemoryDocumentStore(
        [
            make_document(
                "b1",
                title="Learning Rust",
                summary="A beginner guide",
                body="Rust is great. Rust rocks. Learning Rust takes time.",
                day=1,
                tags=["rust"],
                thumbnail_title="Rust!",
                thumbnail_summary="Start here",
            ),
            make_document("b2", title="Habits", body="Daily tracking", day=2),
            make_document("b3", title="Rust draft", published=False, day=3),
        ]
    )
    return PublicBlogService(store, PublicBlogSettings(default_page_size=10))


@pytest.fixture
def client(service):
    app.dependency_overrides[get_public_blog_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_search_returns_ranked_page(client):
    resp = client.get("/public/search", params={"query": "Rust"})
    assert resp.status_code == 200

    body = resp.json()
    assert body["page"] == 1
    assert body["pageSize"] == 10
    assert body["totalCount"] == 1
    assert body["hasNextPage"] is False
    assert body["items"][0]["id"] == "b1"
    assert body["items"][0]["relevance"] == 161.5
    assert body["items"][0]["createdAtUtc"].startswith("2025-11-02")
    assert body["items"][0]["thumbnailTitle"] == "Rust!"
    assert body["items"][0]["thumbnailSummary"] == "Start here"


def test_search_without_query_orders_by_recency(client):
    resp = client.get("/public/search", params={"page": 1, "pageSize": 1})
    body = resp.json()

    assert body["totalCount"] == 2
    assert body["pageSize"] == 1
    assert body["hasNextPage"] is True
    assert [item["id"] for item in body["items"]] == ["b2"]
    assert body["items"][0]["relevance"] is None


@pytest.mark.parametrize("params", [{"page": 0}, {"pageSize": 0}, {"page": "x"}])
def test_invalid_paging_is_rejected(client, params):
    assert client.get("/public/search", params=params).status_code == 422


def test_get_document(client):
    resp = client.get("/public/documents/b1")
    assert resp.status_code == 200

    body = resp.json()
    assert body["title"] == "Learning Rust"
    assert body["tags"] == ["rust"]
    assert body["thumbnailTitle"] == "Rust!"
    assert body["content"].startswith("Rust is great.")


@pytest.mark.parametrize("doc_id", ["b3", "missing"])
def test_unpublished_and_missing_look_the_same(client, doc_id):
    resp = client.get(f"/public/documents/{doc_id}")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Not Found"}


def test_blog_routes_accept_search_parameter(client):
    resp = client.get("/public/blogs", params={"search": "habits"})
    assert [item["id"] for item in resp.json()["items"]] == ["b2"]
    assert client.get("/public/blogs/b2").json()["id"] == "b2"
    assert client.get("/public/blogs/b3").status_code == 404


def test_store_failure_is_503():
    app.dependency_overrides[get_public_blog_service] = lambda: PublicBlogService(
        BrokenStore(), PublicBlogSettings()
    )
    try:
        client = TestClient(app)
        assert client.get("/public/search").status_code == 503
        assert client.get("/public/documents/b1").status_code == 503
    finally:
        app.dependency_overrides.clear()
