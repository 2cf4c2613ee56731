"""End-to-end tests for topics, the calendar and comments."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from study.interface.api.app import create_app
from study.util.di.container import setup_di
from tests.conftest import auth_headers
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def _create_topic(client, headers, **overrides):
    body = {
        "title": "Godot signals",
        "description": "Wiring nodes together",
        "category": "Game Engine",
        "tags": ["godot"],
        "schedules": [
            {"start_date": "2024-03-10T00:00:00Z", "end_date": "2024-03-12T00:00:00Z"}
        ],
    }
    body.update(overrides)
    response = client.post("/topics", json=body, headers=headers)
    assert response.status_code == 201
    return response.json()["topic"]


class TestAuthentication:
    """Every endpoint except health requires a token."""

    def test_list_without_token(self, client):
        response = client.get("/topics")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_invalid_token_cookie(self, client):
        response = client.get("/topics", cookies={"auth_token": "not-a-jwt"})

        assert response.status_code == 401

    def test_token_cookie_is_accepted(self, client):
        token = auth_headers()["Authorization"].removeprefix("Bearer ")

        response = client.get("/topics", cookies={"auth_token": token})

        assert response.status_code == 200


class TestTopicFlow:
    """Create, browse, edit and delete topics over HTTP."""

    def test_create_and_get_topic(self, client):
        # Arrange
        user_id = str(uuid4())
        headers = auth_headers(user_id)

        # Act
        topic = _create_topic(client, headers)
        response = client.get(f"/topics/{topic['topic_id']}", headers=headers)

        # Assert
        assert response.status_code == 200
        detail = response.json()
        assert detail["topic"]["title"] == "Godot signals"
        assert detail["topic"]["status"] == "Not Started"
        assert detail["topic"]["created_by"] == user_id
        assert detail["is_owner"] is True
        assert detail["comments"] == []
        assert len(detail["topic"]["schedules"]) == 1

    def test_unknown_category_filter(self, client):
        response = client.get("/topics?category=Cooking", headers=auth_headers())

        assert response.status_code == 400

    def test_list_filters_and_sorts(self, client):
        # Arrange
        headers = auth_headers()
        _create_topic(client, headers, title="Zeta", category="Game Engine")
        _create_topic(client, headers, title="Alpha", category="Game Engine")
        _create_topic(client, headers, title="Mesh", category="3D Modeling")

        # Act
        everything = client.get("/topics?category=All&sort=az", headers=headers)
        engines = client.get(
            "/topics", params={"category": "Game Engine", "sort": "za"}, headers=headers
        )
        searched = client.get("/topics?q=mes", headers=headers)

        # Assert
        assert [t["title"] for t in everything.json()["topics"]] == [
            "Alpha",
            "Mesh",
            "Zeta",
        ]
        assert [t["title"] for t in engines.json()["topics"]] == ["Zeta", "Alpha"]
        assert searched.json()["total"] == 1

    def test_calendar_month_and_day(self, client):
        # Arrange
        headers = auth_headers()
        topic = _create_topic(client, headers)

        # Act
        month = client.get("/topics/calendar?month=2024-03", headers=headers)
        day = client.get("/topics/calendar/2024-03-12", headers=headers)
        after = client.get("/topics/calendar/2024-03-13", headers=headers)

        # Assert
        assert month.status_code == 200
        cells = {
            cell["day"]: cell for week in month.json()["weeks"] for cell in week
        }
        assert [t["topic_id"] for t in cells["2024-03-11"]["topics"]] == [
            topic["topic_id"]
        ]
        assert day.json()["total"] == 1
        assert after.json()["total"] == 0

    def test_malformed_month(self, client):
        response = client.get("/topics/calendar?month=March", headers=auth_headers())

        assert response.status_code == 400

    def test_outermost_months_render(self, client):
        """The first and last representable months still return a grid."""
        # Act
        first = client.get("/topics/calendar?month=0001-01", headers=auth_headers())
        last = client.get("/topics/calendar?month=9999-12", headers=auth_headers())

        # Assert
        assert first.status_code == 200
        assert first.json()["weeks"][0][0]["day"] == "0001-01-01"
        assert last.status_code == 200
        assert last.json()["weeks"][-1][-1]["day"] == "9999-12-31"

    def test_owner_edits_and_others_are_forbidden(self, client):
        # Arrange
        owner = auth_headers()
        topic = _create_topic(client, owner)
        url = f"/topics/{topic['topic_id']}"

        # Act
        forbidden = client.patch(url, json={"title": "Mine"}, headers=auth_headers())
        edited = client.patch(url, json={"title": "Renamed"}, headers=owner)
        status = client.put(f"{url}/status", json={"status": "Done"}, headers=owner)

        # Assert
        assert forbidden.status_code == 403
        assert edited.status_code == 200
        assert edited.json()["topic"]["title"] == "Renamed"
        assert edited.json()["topic"]["description"] == "Wiring nodes together"
        assert status.json()["topic"]["status"] == "Done"

    def test_delete_topic(self, client):
        # Arrange
        owner = auth_headers()
        topic = _create_topic(client, owner)
        url = f"/topics/{topic['topic_id']}"

        # Act
        forbidden = client.delete(url, headers=auth_headers())
        deleted = client.delete(url, headers=owner)
        missing = client.get(url, headers=owner)

        # Assert
        assert forbidden.status_code == 403
        assert deleted.status_code == 204
        assert missing.status_code == 404

    def test_malformed_topic_id(self, client):
        response = client.get("/topics/not-a-uuid", headers=auth_headers())

        assert response.status_code == 400


class TestCommentFlow:
    """Threaded discussion on a topic."""

    def test_replies_come_back_nested(self, client):
        # Arrange
        headers = auth_headers()
        topic = _create_topic(client, headers)
        url = f"/topics/{topic['topic_id']}/comments"

        # Act
        a = client.post(url, json={"content": "A"}, headers=headers).json()
        b = client.post(
            url,
            json={"content": "B", "parent_id": a["comment"]["comment_id"]},
            headers=headers,
        ).json()
        client.post(url, json={"content": "C"}, headers=headers)
        client.post(
            url,
            json={"content": "D", "parent_id": b["comment"]["comment_id"]},
            headers=headers,
        )
        thread = client.get(url, headers=headers).json()

        # Assert
        assert thread["total"] == 4
        assert [c["content"] for c in thread["comments"]] == ["A", "C"]
        nested = thread["comments"][0]["children"][0]
        assert nested["content"] == "B"
        assert nested["children"][0]["content"] == "D"

    def test_edit_and_delete_comment(self, client):
        # Arrange
        author = auth_headers()
        topic = _create_topic(client, author)
        url = f"/topics/{topic['topic_id']}/comments"
        comment = client.post(url, json={"content": "Draft"}, headers=author).json()
        comment_url = f"{url}/{comment['comment']['comment_id']}"

        # Act
        forbidden = client.patch(
            comment_url, json={"content": "Nope"}, headers=auth_headers()
        )
        edited = client.patch(comment_url, json={"content": "Final"}, headers=author)
        deleted = client.delete(comment_url, headers=author)

        # Assert
        assert forbidden.status_code == 403
        assert edited.json()["comment"]["content"] == "Final"
        assert deleted.status_code == 204
        assert client.get(url, headers=author).json()["total"] == 0

    def test_comment_on_missing_topic(self, client):
        response = client.post(
            f"/topics/{uuid4()}/comments",
            json={"content": "Hello"},
            headers=auth_headers(),
        )

        assert response.status_code == 404


class TestAttachmentFlow:
    """Uploading files to topics."""

    def test_upload_and_list(self, client):
        # Arrange
        headers = auth_headers()
        topic = _create_topic(client, headers)
        url = f"/topics/{topic['topic_id']}/attachments"

        # Act
        uploaded = client.post(
            url,
            params={"filename": "diagram.png"},
            content=b"x89PNG fake image",
            headers={**headers, "Content-Type": "image/png"},
        )
        listed = client.get(url, headers=headers)

        # Assert
        assert uploaded.status_code == 201
        assert uploaded.json()["attachment"]["is_image"] is True
        assert listed.json()["total"] == 1

    def test_disallowed_type_is_415(self, client):
        # Arrange
        headers = auth_headers()
        topic = _create_topic(client, headers)

        # Act
        response = client.post(
            f"/topics/{topic['topic_id']}/attachments",
            params={"filename": "archive.zip"},
            content=b"PKx03x04",
            headers={**headers, "Content-Type": "application/zip"},
        )

        # Assert
        assert response.status_code == 415


class TestProfileFlow:
    """The current user's profile."""

    def test_profile_round_trip(self, client):
        # Arrange
        headers = auth_headers()

        # Act
        missing = client.get("/profiles/me", headers=headers)
        saved = client.patch(
            "/profiles/me", json={"username": "hopper"}, headers=headers
        )
        fetched = client.get("/profiles/me", headers=headers)

        # Assert
        assert missing.status_code == 404
        assert saved.status_code == 200
        assert fetched.json()["username"] == "hopper"
