"""Integration tests for the HTTP routes in portfolio_api.main.

Every test uses the FastAPI TestClient with the store client replaced by
the `fake_store` recorder, so no database is needed. Assertions check the
SQL and bound values each route sends, and the JSON it returns.
"""

from __future__ import annotations

import asyncpg
import pytest

from portfolio_api.auth import security
from portfolio_api.core import query


# ---------------------------------------------------------------------------
# Service endpoints.
# ---------------------------------------------------------------------------


def test_health(anonymous_client):
    resp = anonymous_client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# Reads.
# ---------------------------------------------------------------------------


class TestReads:
    def test_visible_pages(self, anonymous_client, fake_store):
        fake_store.rows = [{"name": "about", "pretty_name": "About", "hidden": False, "body": ""}]

        resp = anonymous_client.get("/api/pages/visible")

        assert resp.status_code == 200
        assert resp.json() == fake_store.rows
        assert fake_store.calls == [("fetch_all", "SELECT * FROM Page WHERE hidden=$1", (False,))]

    def test_page_by_name(self, anonymous_client, fake_store):
        anonymous_client.get("/api/pages/about-me")
        assert fake_store.calls == [("fetch_all", "SELECT * FROM Page WHERE name=$1", ("about-me",))]

    def test_post_by_slug(self, anonymous_client, fake_store):
        anonymous_client.get("/api/posts/slug/hello-world")
        assert fake_store.calls == [("fetch_all", "SELECT * FROM Post WHERE slug=$1", ("hello-world",))]

    def test_scrap_projects(self, anonymous_client, fake_store):
        anonymous_client.get("/api/projects/scrap")
        assert fake_store.calls == [("fetch_all", "SELECT * FROM Project WHERE is_scrap=$1", (True,))]

    def test_project_technologies_for_one_project(self, anonymous_client, fake_store):
        fake_store.rows = [{"id": 3, "name": "Python"}]

        resp = anonymous_client.get("/api/projects/technologies/id/3")

        assert resp.json() == [{"id": 3, "name": "Python"}]
        (method, sql, args), = fake_store.calls
        assert method == "fetch_all"
        assert sql.endswith("WHERE ProjectTechnology.project_id = $1")
        assert args == (3,)

    def test_all_post_categories(self, anonymous_client, fake_store):
        anonymous_client.get("/api/posts/categories/all")
        (_, sql, args), = fake_store.calls
        assert "JOIN PostCategory" in sql
        assert "WHERE" not in sql
        assert args == ()

    def test_post_images(self, anonymous_client, fake_store):
        anonymous_client.get("/api/posts/images/id/5")
        (_, sql, args), = fake_store.calls
        assert sql.startswith("SELECT Post.id, Image.created, Image.description, Image.static_url FROM Post")
        assert args == (5,)

    def test_non_integer_id_is_a_validation_error(self, anonymous_client, fake_store):
        resp = anonymous_client.get("/api/projects/id/abc")

        assert resp.status_code == 400
        error = resp.json()["errors"][0]
        assert error["location"] == "path"
        assert error["path"] == "project_id"
        assert fake_store.calls == []


# ---------------------------------------------------------------------------
# Writes.
# ---------------------------------------------------------------------------


class TestWrites:
    def test_writes_need_a_token(self, anonymous_client, fake_store):
        resp = anonymous_client.post("/api/categories/create", json={"name": "Tools"})
        assert resp.status_code == 401
        assert fake_store.calls == []

    def test_writes_accept_a_valid_token(self, anonymous_client, fake_store, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "test-secret")
        monkeypatch.setenv("ADMIN_USERNAME", "admin")
        token = security.build_access_token(username="admin")

        resp = anonymous_client.post(
            "/api/categories/create",
            json={"name": "Tools"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert resp.status_code == 200
        assert resp.json() == {"status": "INSERT 0 1", "affected_rows": 1}

    def test_create_page_derives_slug(self, client, fake_store):
        resp = client.post("/api/pages/create", json={"name": "About Me", "body": "Hi"})

        assert resp.status_code == 200
        assert fake_store.calls == [
            (
                "execute",
                "INSERT INTO Page (name, pretty_name, hidden, body) VALUES ($1, $2, $3, $4)",
                ("about-me", "About Me", False, "Hi"),
            )
        ]

    def test_create_page_without_safe_characters(self, client, fake_store):
        resp = client.post("/api/pages/create", json={"name": "!!!"})

        assert resp.status_code == 400
        assert resp.json()["errors"][0]["path"] == "name"
        assert fake_store.calls == []

    def test_blank_required_field(self, client, fake_store):
        resp = client.post("/api/categories/create", json={"name": "   "})

        assert resp.status_code == 400
        errors = resp.json()["errors"]
        assert errors[0]["type"] == "field"
        assert errors[0]["path"] == "name"
        assert fake_store.calls == []

    def test_update_category(self, client, fake_store):
        fake_store.status = "UPDATE 1"

        resp = client.post("/api/categories/update", json={"name": "Toolz", "primary_key": "Tools"})

        assert resp.json() == {"status": "UPDATE 1", "affected_rows": 1}
        assert fake_store.calls == [
            ("execute", "UPDATE Category SET name=$1 WHERE name=$2", ("Toolz", "Tools")),
        ]

    def test_update_page_strips_empty_fields(self, client, fake_store):
        client.post("/api/pages/update", json={"primary_key": "about-me", "name": "About Us", "body": ""})
        assert fake_store.calls == [
            (
                "execute",
                "UPDATE Page SET name=$1, pretty_name=$2 WHERE name=$3",
                ("about-us", "About Us", "about-me"),
            )
        ]

    def test_update_page_with_unsafe_name_is_checked_before_building(self, client, fake_store, monkeypatch):
        monkeypatch.setattr(query, "update_by_key", lambda *args, **kwargs: pytest.fail("statement built"))

        resp = client.post("/api/pages/update", json={"primary_key": "about-me", "name": "!!!"})

        assert resp.status_code == 400
        assert resp.json()["errors"][0]["path"] == "name"
        assert fake_store.calls == []

    def test_update_with_nothing_to_set(self, client, fake_store):
        resp = client.post("/api/projects/update", json={"primary_key": 4, "title": ""})

        assert resp.status_code == 400
        assert resp.json()["type"] == "empty_update"
        assert fake_store.calls == []

    def test_create_project_returns_id(self, client, fake_store):
        fake_store.rows = [{"id": 12}]

        resp = client.post(
            "/api/projects/create",
            json={"title": "Site", "description": "My site", "is_scrap": "false"},
        )

        assert resp.json() == [{"id": 12}]
        (method, sql, args), = fake_store.calls
        assert method == "fetch_all"
        assert sql == "INSERT INTO Project (description, is_scrap, title) VALUES ($1, $2, $3) RETURNING id"
        assert args == ("My site", False, "Site")

    def test_create_post_derives_slug(self, client, fake_store):
        fake_store.rows = [{"id": 1}]
        client.post("/api/posts/create", json={"title": "Hello World", "body": "First"})
        (_, sql, args), = fake_store.calls
        assert sql.startswith("INSERT INTO Post (title, hidden, body, slug)")
        assert args == ("Hello World", False, "First", "hello-world")

    def test_delete_post_image(self, client, fake_store):
        client.post("/api/posts/images/delete", json={"post_id": 2, "image_id": 8})
        assert fake_store.calls == [
            ("execute", "DELETE FROM PostImage WHERE post_id=$1 AND image_id=$2", (2, 8)),
        ]

    def test_update_project_technology_uses_composite_key(self, client, fake_store):
        client.post(
            "/api/projects/technologies/update",
            json={"project_primary_key": 1, "technology_primary_key": "Golang", "technology_name": "Go"},
        )
        assert fake_store.calls == [
            (
                "execute",
                "UPDATE ProjectTechnology SET technology_name=$1 WHERE project_id=$2 AND technology_name=$3",
                ("Go", 1, "Golang"),
            )
        ]


# ---------------------------------------------------------------------------
# Tag associations.
# ---------------------------------------------------------------------------


class TestTagLinks:
    def test_single_link_ensures_tag_first(self, client, fake_store):
        resp = client.post("/api/posts/categories/create", json={"post_id": 2, "category_name": "News"})

        assert resp.status_code == 200
        (method, statements, _), = fake_store.calls
        assert method == "execute_batch"
        assert statements == [
            ("INSERT INTO Category (name) VALUES ($1) ON CONFLICT DO NOTHING", ("News",)),
            ("INSERT INTO PostCategory (post_id, category_name) VALUES ($1, $2)", (2, "News")),
        ]

    def test_batch_create(self, client, fake_store):
        resp = client.post(
            "/api/projects/technologies/create/batch",
            json={"project_id": 7, "technologies": "a, b,,  c ,"},
        )

        assert resp.status_code == 200
        assert len(resp.json()) == 6
        (_, statements, _), = fake_store.calls
        assert [args for _, args in statements] == [
            ("a",), (7, "a"), ("b",), (7, "b"), ("c",), (7, "c"),
        ]

    def test_batch_with_only_separators_is_a_no_op(self, client, fake_store):
        resp = client.post("/api/posts/categories/create/batch", json={"post_id": 1, "categories": " , ,"})

        assert resp.status_code == 200
        assert resp.json() == []
        assert fake_store.calls == []

    @pytest.mark.parametrize(
        "path, payload",
        [
            ("/api/posts/categories/create/batch", {"post_id": 1, "categories": "   "}),
            ("/api/projects/technologies/create/batch", {"project_id": 1, "technologies": "   "}),
        ],
    )
    def test_blank_batch_is_a_no_op(self, client, fake_store, path, payload):
        resp = client.post(path, json=payload)

        assert resp.status_code == 200
        assert resp.json() == []
        assert fake_store.calls == []

    def test_empty_batch_string_is_rejected(self, client, fake_store):
        resp = client.post("/api/posts/categories/create/batch", json={"post_id": 1, "categories": ""})

        assert resp.status_code == 400
        assert resp.json()["errors"][0]["path"] == "categories"
        assert fake_store.calls == []

    def test_duplicate_link_is_query_failed(self, client, fake_store):
        fake_store.error = asyncpg.UniqueViolationError("duplicate key value violates unique constraint")

        resp = client.post(
            "/api/projects/technologies/create",
            json={"project_id": 1, "technology_name": "Go"},
        )

        assert resp.status_code == 400
        body = resp.json()
        assert body["type"] == "query_failed"
        assert body["sqlstate"] == "23505"


@pytest.mark.parametrize(
    "path, payload",
    [
        ("/api/images/delete", {"id": 3}),
        ("/api/technologies/delete", {"name": "Go"}),
        ("/api/projects/images/create", {"project_id": 1, "image_id": 2}),
    ],
)
def test_simple_writes_issue_one_statement(client, fake_store, path, payload):
    resp = client.post(path, json=payload)
    assert resp.status_code == 200
    assert len(fake_store.calls) == 1
    assert fake_store.calls[0][0] == "execute"


def test_login_route(anonymous_client, monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    monkeypatch.setenv("ADMIN_USERNAME", "admin")
    monkeypatch.setenv("ADMIN_PASSWORD_HASH", security.hash_password("s3cret"))

    resp = anonymous_client.post("/api/auth/login", json={"username": "admin", "password": "s3cret"})

    assert resp.status_code == 200
    assert resp.json()["token_type"] == "bearer"
