"""Testes do use case de relay com fakes dos serviços externos."""

from __future__ import annotations

import pytest

from app.domain.contact import BASIC_MODE, TURNSTILE_MODE
from app.protocols import ChallengeResult, EmailDeliveryResult
from app.use_cases.contact import RelayContactSubmissionUseCase
from config.settings import ContactFormSettings
from tests.fakes.fake_contact_services import FakeChallengeVerifier, FakeEmailSender
from utils.errors import EmailTransportError


def _fields(**overrides: object) -> dict[str, object]:
    fields: dict[str, object] = {
        "email": "knight@ucf.edu",
        "firstName": "Ada",
        "lastName": "<Lovelace>",
        "message": "Hi & bye\nsee you",
        "cf-turnstile-response": "token-abc",
    }
    fields.update(overrides)
    return fields


def _use_case(
    *,
    mode=TURNSTILE_MODE,
    verifier: FakeChallengeVerifier | None = None,
    sender: FakeEmailSender | None = None,
) -> RelayContactSubmissionUseCase:
    return RelayContactSubmissionUseCase(
        mode=mode,
        sender=sender or FakeEmailSender(),
        settings=ContactFormSettings(),
        verifier=verifier,
    )


@pytest.mark.asyncio
async def test_valid_submission_is_sent() -> None:
    verifier = FakeChallengeVerifier()
    sender = FakeEmailSender()

    outcome = await _use_case(verifier=verifier, sender=sender).execute(
        fields=_fields(), client_ip="198.51.100.4"
    )

    assert outcome.status_code == 200
    assert outcome.body == {"message": "Email sent successfully"}
    assert outcome.ok is True
    assert verifier.calls == [("token-abc", "198.51.100.4")]
    assert len(sender.payloads) == 1
    text_part = sender.payloads[0]["content"][0]["value"]
    assert text_part == "Name: Ada <Lovelace>\nEmail: knight@ucf.edu\nMessage: Hi & bye\nsee you"
    html_part = sender.payloads[0]["content"][1]["value"]
    assert "&lt;Lovelace&gt;" in html_part
    assert "Hi &amp; byesee you" in html_part


@pytest.mark.asyncio
async def test_missing_fields_short_circuits() -> None:
    verifier = FakeChallengeVerifier()
    sender = FakeEmailSender()

    outcome = await _use_case(verifier=verifier, sender=sender).execute(
        fields=_fields(message=""), client_ip="127.0.0.1"
    )

    assert outcome.status_code == 400
    assert outcome.body == {"error": "Missing required fields"}
    assert verifier.calls == []
    assert sender.payloads == []


@pytest.mark.asyncio
async def test_missing_token_in_turnstile_mode() -> None:
    fields = _fields()
    del fields["cf-turnstile-response"]
    verifier = FakeChallengeVerifier()

    outcome = await _use_case(verifier=verifier).execute(fields=fields, client_ip="127.0.0.1")

    assert outcome.status_code == 400
    assert outcome.body == {"error": "Missing required fields"}
    assert verifier.calls == []


@pytest.mark.asyncio
async def test_challenge_failure_returns_details_and_skips_delivery() -> None:
    verifier = FakeChallengeVerifier(
        ChallengeResult(success=False, error_codes=["timeout-or-duplicate"])
    )
    sender = FakeEmailSender()

    outcome = await _use_case(verifier=verifier, sender=sender).execute(
        fields=_fields(), client_ip="127.0.0.1"
    )

    assert outcome.status_code == 400
    assert outcome.body == {
        "error": "Turnstile validation failed",
        "details": ["timeout-or-duplicate"],
    }
    assert sender.payloads == []


@pytest.mark.asyncio
async def test_challenge_runs_before_email_format_check() -> None:
    verifier = FakeChallengeVerifier(ChallengeResult(success=False, error_codes="x"))

    outcome = await _use_case(verifier=verifier).execute(
        fields=_fields(email="not-an-email"), client_ip="127.0.0.1"
    )

    assert outcome.body["error"] == "Turnstile validation failed"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("mode", "expected"),
    [(TURNSTILE_MODE, "Invalid email format"), (BASIC_MODE, "Invalid email address")],
)
async def test_invalid_email_uses_mode_wording(mode, expected: str) -> None:
    sender = FakeEmailSender()
    verifier = FakeChallengeVerifier() if mode.require_challenge else None

    outcome = await _use_case(mode=mode, verifier=verifier, sender=sender).execute(
        fields=_fields(email="not-an-email"), client_ip="127.0.0.1"
    )

    assert outcome.status_code == 400
    assert outcome.body == {"error": expected}
    assert sender.payloads == []


@pytest.mark.asyncio
async def test_basic_mode_skips_challenge_and_breaks_lines() -> None:
    fields = _fields()
    del fields["cf-turnstile-response"]
    sender = FakeEmailSender()

    outcome = await _use_case(mode=BASIC_MODE, sender=sender).execute(
        fields=fields, client_ip="127.0.0.1"
    )

    assert outcome.status_code == 200
    payload = sender.payloads[0]
    assert payload["from"]["email"] == "contact@hackucf.org"
    assert "Hi &amp; bye<br>see you" in payload["content"][1]["value"]


@pytest.mark.asyncio
async def test_delivery_non_success_returns_500() -> None:
    sender = FakeEmailSender(
        result=EmailDeliveryResult(ok=False, status_code=403, reason="Forbidden")
    )

    outcome = await _use_case(verifier=FakeChallengeVerifier(), sender=sender).execute(
        fields=_fields(), client_ip="127.0.0.1"
    )

    assert outcome.status_code == 500
    assert outcome.body == {"error": "Failed to send email"}


@pytest.mark.asyncio
async def test_delivery_transport_error_returns_500(caplog: pytest.LogCaptureFixture) -> None:
    sender = FakeEmailSender(error=EmailTransportError("connection reset"))

    with caplog.at_level("ERROR"):
        outcome = await _use_case(verifier=FakeChallengeVerifier(), sender=sender).execute(
            fields=_fields(), client_ip="127.0.0.1"
        )

    assert outcome.status_code == 500
    assert outcome.body == {"error": "Error sending email"}
    assert any(r.message == "contact_email_transport_error" for r in caplog.records)


def test_turnstile_mode_requires_verifier() -> None:
    with pytest.raises(ValueError, match="verifier is required"):
        RelayContactSubmissionUseCase(
            mode=TURNSTILE_MODE,
            sender=FakeEmailSender(),
            settings=ContactFormSettings(),
        )
