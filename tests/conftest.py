"""Shared fixtures: sample customers and a fake loyalty platform."""

from __future__ import annotations

import json
import os
from typing import Any

import pytest

os.environ.setdefault("PLATFORM_API_BASE_URL", "https://platform.test")

import httpx  # noqa: E402

from loyalty_console.config import reset_settings_cache  # noqa: E402
from loyalty_console.domain.entities import Customer  # noqa: E402

reset_settings_cache()

PLATFORM_URL = "https://platform.test"


@pytest.fixture
def customers() -> list[Customer]:
    return [
        Customer(id="c1", username="Ann", email="ann@example.com",
                 phone_number="+971500000001", country="UAE", device_token="tok-ann"),
        Customer(id="c2", username="Anna", email="anna@example.com",
                 phone_number="+974500000002", country="Qatar", device_token="tok-anna"),
        Customer(id="c3", username="Bob", email="bob@example.com",
                 phone_number="+971500000003", country="UAE", device_token=""),
        Customer(id="c4", username="Carla", email="carla@example.org",
                 phone_number="+965500000004", country="Kuwait", device_token="tok-carla"),
    ]


class FakePlatform:
    """Stand-in for the platform API served through ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.customers: list[dict[str, Any]] = [
            {"_id": "c1", "username": "Ann", "email": "ann@example.com",
             "phone": "+971500000001", "country": "UAE", "deviceToken": "tok-ann"},
            {"_id": "c2", "username": "Anna", "email": "anna@example.com",
             "phoneNumber": "+974500000002", "country": "Qatar", "device_token": "tok-anna"},
            {"_id": "c3", "username": "Bob", "email": "bob@example.com",
             "phone": "+971500000003", "country": "UAE"},
            {"id": "c4", "username": "Carla", "email": "carla@example.org",
             "phone": "+965500000004", "country": "Kuwait", "deviceToken": "tok-carla"},
        ]
        self.admins: list[dict[str, Any]] = [
            {"_id": "a1", "username": "root", "email": "root@example.com",
             "permissions": {"manageBanners": True, "manageFaqs": False, "legacyFlag": True}},
        ]
        self.employees: list[dict[str, Any]] = [
            {"_id": "e1", "name": "Eve", "email": "eve@example.com", "isActive": False,
             "companyName": "Acme", "permissions": {"manageCustomers": True}},
        ]
        self.history: list[dict[str, Any]] = [
            {"_id": "n1", "title": "Welcome", "message": "Hello", "type": "mobile",
             "sentAt": "2026-01-05T10:00:00Z"},
        ]
        self.customers_status = 200
        self.dispatch_status = 200
        self.dispatch_body: Any = {
            "results": [{"success": True}, {"success": False}, {"success": True}]
        }
        self.requests: list[httpx.Request] = []
        # (method, path) -> (status, json body) answered instead of the normal route.
        self.failures: dict[tuple[str, str], tuple[int, Any]] = {}

    def requests_to(self, method: str, path: str) -> list[httpx.Request]:
        return [
            request
            for request in self.requests
            if request.method == method and request.url.path == path
        ]

    @staticmethod
    def body_of(request: httpx.Request) -> Any:
        return json.loads(request.content) if request.content else None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        method, path = request.method, request.url.path

        failure = self.failures.get((method, path))
        if failure is not None:
            status_code, body = failure
            return httpx.Response(status_code, json=body)
        if method == "GET" and path == "/customers":
            if self.customers_status != 200:
                return httpx.Response(
                    self.customers_status, json={"success": False, "message": "Customers unavailable"}
                )
            return httpx.Response(200, json={"success": True, "data": self.customers})
        if method == "POST" and path == "/notifications":
            return httpx.Response(self.dispatch_status, json=self.dispatch_body)
        if method == "GET" and path == "/notifications":
            return httpx.Response(200, json={"success": True, "data": self.history})
        if method == "DELETE" and path.startswith("/notifications/"):
            return httpx.Response(200, json={"success": True})
        if method == "GET" and path == "/admins":
            return httpx.Response(200, json={"success": True, "data": self.admins})
        if method == "GET" and path == "/employees":
            return httpx.Response(200, json={"success": True, "data": self.employees})
        if method == "PUT" and path.startswith(("/admins/", "/employees/")):
            principal_id = path.rsplit("/", 1)[-1]
            record = {"_id": principal_id, "username": "updated", "email": "u@example.com"}
            record.update(self.body_of(request))
            return httpx.Response(200, json={"success": True, "data": record})

        return httpx.Response(404, json={"success": False, "message": "Route not found"})

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=PLATFORM_URL, transport=httpx.MockTransport(self.handler)
        )


@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def api_client(platform: FakePlatform, monkeypatch: pytest.MonkeyPatch):
    """Return a test client whose platform calls are answered by ``platform``."""

    from fastapi.testclient import TestClient

    import main

    monkeypatch.setattr(main, "create_http_client", lambda settings: platform.http_client())
    app = main.create_app()
    with TestClient(app) as test_client:
        yield test_client
