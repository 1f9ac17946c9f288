# flake8: noqa
from fastapi.testclient import TestClient

from shelf_api.app import create_app
from shelf_api.config import Settings
from shelf_api.store import memory_collections

from conftest import DATA_DIR


class BrokenCollection:
    key = "id"

    def find(self, query=None):
        raise RuntimeError("store unavailable")


def _broken_app(environment):
    cols = memory_collections()
    cols.books = BrokenCollection()
    settings = Settings(environment=environment, bcrypt_rounds=4, seed_data=False)
    return create_app(settings, collections=cols)


def test_unknown_route_returns_404(client):
    res = client.get("/api/unknown")
    assert res.status_code == 404
    assert res.json() == {"type": "error", "status": 404, "message": "Not Found"}


def test_store_failure_returns_500_without_stack():
    client = TestClient(_broken_app("production"), raise_server_exceptions=False)
    res = client.get("/api/books")
    assert res.status_code == 500
    body = res.json()
    assert body["message"] == "Internal Server Error"
    assert "stack" not in body


def test_store_failure_includes_stack_in_development():
    client = TestClient(_broken_app("development"), raise_server_exceptions=False)
    res = client.get("/api/books")
    assert res.status_code == 500
    assert "store unavailable" in res.json()["stack"]


def test_seeded_app_from_settings():
    settings = Settings(bcrypt_rounds=4, store_backend="memory", seed_data=True, data_dir=DATA_DIR)
    client = TestClient(create_app(settings))
    assert client.get("/api/recipes/1").json()["name"] == "Pancakes"


def test_sql_backend():
    settings = Settings(
        bcrypt_rounds=4,
        store_backend="sql",
        database_url="sqlite:///:memory:",
        seed_data=True,
        data_dir=DATA_DIR,
    )
    client = TestClient(create_app(settings))

    assert client.get("/api/books/1").status_code == 200
    assert client.post("/api/books", json={"id": 7, "title": "T", "author": "A"}).status_code == 201
    assert client.put("/api/books/7", json={"title": "T2", "author": "A"}).status_code == 204
    assert client.get("/api/books/7").json()["title"] == "T2"
    assert client.delete("/api/books/7").status_code == 204

    res = client.post(
        "/api/users/hermione@hogwarts.edu/verify-security-question",
        json={"securityQuestions": [{"answer": "Crookshanks"}, {"answer": "Hogwarts: A History"}, {"answer": "Wilkins"}]},
    )
    assert res.status_code == 200
