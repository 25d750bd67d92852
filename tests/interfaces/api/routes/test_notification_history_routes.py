"""Integration tests for the sent notification history endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")


def test_history_is_listed(api_client) -> None:
    response = api_client.get("/notifications", follow_redirects=False)

    assert response.status_code == 200
    assert response.json() == [
        {
            "id": "n1",
            "title": "Welcome",
            "message": "Hello",
            "target": "mobile",
            "created_at": "2026-01-05T10:00:00Z",
        }
    ]


def test_history_entry_is_deleted(api_client, platform) -> None:
    response = api_client.delete("/notifications/n1")

    assert response.status_code == 204
    assert len(platform.requests_to("DELETE", "/notifications/n1")) == 1


def test_failed_deletion_is_a_bad_gateway(api_client, platform) -> None:
    platform.failures[("DELETE", "/notifications/n9")] = (
        404,
        {"success": False, "message": "Notification not found"},
    )

    response = api_client.delete("/notifications/n9")

    assert response.status_code == 502
    assert response.json()["detail"]["message"] == "Notification not found"
