"""Testes end-to-end do app FastAPI com fakes no lugar dos connectors."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.routes.contact import router as contact_route
from app.domain.contact import TURNSTILE_MODE
from app.use_cases.contact import RelayContactSubmissionUseCase
from config.settings import ContactFormSettings
from tests.fakes.fake_contact_services import FakeChallengeVerifier, FakeEmailSender

FIELDS = {
    "email": "knight@ucf.edu",
    "firstName": "Ada",
    "lastName": "Lovelace",
    "message": "Hello",
    "cf-turnstile-response": "token-abc",
}


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENVIRONMENT", "development")
    sender = FakeEmailSender()
    use_case = RelayContactSubmissionUseCase(
        mode=TURNSTILE_MODE,
        sender=sender,
        settings=ContactFormSettings(),
        verifier=FakeChallengeVerifier(),
    )
    monkeypatch.setattr(contact_route, "_get_relay_use_case", lambda: use_case)

    from app.app import create_app

    with TestClient(create_app()) as test_client:
        test_client.sender = sender
        yield test_client


def test_multipart_submission_round_trip(client) -> None:
    response = client.post(
        "/contact",
        files={name: (None, value) for name, value in FIELDS.items()},
        headers={"X-Forwarded-For": "198.51.100.7"},
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Email sent successfully"}
    assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
    assert len(client.sender.payloads) == 1


def test_preflight_and_405_through_routing(client) -> None:
    preflight = client.options("/contact")
    rejected = client.get("/contact")

    assert preflight.status_code == 204
    assert preflight.content == b""
    assert rejected.status_code == 405
    assert rejected.json() == {"error": "Method Not Allowed"}
    assert rejected.headers["access-control-allow-origin"] == "https://hackucf-remix.pages.dev/"


@pytest.mark.parametrize("method", ["TRACE", "PROPFIND", "MKCOL"])
def test_unlisted_methods_get_json_405_with_cors(client, method: str) -> None:
    response = client.request(method, "/contact")

    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}
    assert response.headers["access-control-allow-origin"] == "https://hackucf-remix.pages.dev/"
    assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
    assert client.sender.payloads == []


def test_trailing_slash_is_served_without_redirect(client) -> None:
    preflight = client.options("/contact/")
    submitted = client.post(
        "/contact/",
        files={name: (None, value) for name, value in FIELDS.items()},
        follow_redirects=False,
    )

    assert preflight.status_code == 204
    assert preflight.headers["access-control-allow-origin"] == "https://hackucf-remix.pages.dev/"
    assert submitted.status_code == 200
    assert submitted.json() == {"message": "Email sent successfully"}
    assert submitted.headers["access-control-allow-headers"] == "Content-Type"
    assert len(client.sender.payloads) == 1


def test_health_route_is_registered(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
