"""HTTP tests for the activity endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from activity_factories import StaticCollector, collectors_for, event, message, resource
from command_center.application.use_cases.activity import ActivityConfig
from command_center.domain.entities import RawActivity
from command_center.interfaces.api.dependencies import (
    get_activity_collectors,
    get_activity_config,
)

HEADERS = {"X-User-Id": "u1"}


@pytest.fixture()
def collectors():
    now = datetime.now(timezone.utc)
    return collectors_for(
        resource("overdue", due_in=-timedelta(hours=1), now=now),
        event("soon", starts_in=timedelta(hours=2), now=now),
        event("later", starts_in=timedelta(days=4), now=now),
        message("m1", now=now),
    )


@pytest.fixture()
def client(collectors):
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_activity_collectors] = lambda: collectors
    app.dependency_overrides[get_activity_config] = lambda: ActivityConfig(cache_ttl_seconds=90)
    with TestClient(app) as test_client:
        yield test_client


def test_feed_requires_an_authenticated_user(client: TestClient) -> None:
    response = client.get("/activities/")

    assert response.status_code == 401


def test_feed_returns_ranked_activities(client: TestClient, collectors) -> None:
    response = client.get("/activities/", headers=HEADERS)

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body] == [
        "resource_pending_overdue",
        "event_upcoming_soon",
        "event_upcoming_later",
        "message_unread_m1",
    ]
    assert body[0]["urgency_level"] == "urgent"
    assert body[3]["community_id"] == ""
    assert body[3]["due_date"] is None
    assert response.headers["Cache-Control"] == "private, max-age=90"
    assert response.headers["X-Cache-Key"] == "user:u1:activities"
    assert collectors[0].calls[0].user_id == "u1"


def test_feed_accepts_section_aliases(client: TestClient) -> None:
    response = client.get("/activities/", params={"section": "attention"}, headers=HEADERS)

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == ["resource_pending_overdue"]
    assert response.headers["X-Cache-Key"] == "user:u1:activities:needs_attention"


def test_feed_filters_by_type_and_paginates(client: TestClient) -> None:
    response = client.get(
        "/activities/",
        params={"types": ["event_upcoming"], "page": 2, "page_size": 1},
        headers=HEADERS,
    )

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == ["event_upcoming_later"]


@pytest.mark.parametrize(
    "params",
    [
        {"section": "someday"},
        {"page_size": 1000},
        {"page": 0},
        {"types": ["poll_created"]},
    ],
)
def test_invalid_queries_are_rejected(client: TestClient, params) -> None:
    response = client.get("/activities/", params=params, headers=HEADERS)

    assert response.status_code == 422


def test_counts_endpoint(client: TestClient) -> None:
    response = client.get("/activities/counts", headers=HEADERS)

    assert response.status_code == 200
    assert response.json() == {
        "needs_attention": 1,
        "in_progress": 1,
        "upcoming": 1,
        "recent": 0,
        "unread_messages": 1,
    }
    assert response.headers["X-Cache-Key"] == "user:u1:activities:counts"


def test_failing_source_makes_the_feed_unavailable(client: TestClient, collectors, caplog) -> None:
    collectors[2] = StaticCollector("messages", error=ConnectionError("network down"))

    with caplog.at_level("WARNING"):
        response = client.get("/activities/", headers=HEADERS)

    assert response.status_code == 503
    assert "messages" in response.json()["detail"]
    assert "network down" in caplog.text


def test_unclassifiable_record_is_a_server_error(client: TestClient, collectors) -> None:
    collectors.append(
        StaticCollector(
            "polls",
            [
                RawActivity(
                    type="poll_created",
                    entity_id="p1",
                    community_id="c1",
                    title="Poll",
                    description="",
                    created_at=datetime.now(timezone.utc),
                )
            ],
        )
    )

    response = client.get("/activities/counts", headers=HEADERS)

    assert response.status_code == 500
