"""Testes do wiring e da validação de settings no bootstrap."""

from __future__ import annotations

import pytest

from app import bootstrap
from app.bootstrap import dependencies
from app.bootstrap.dependencies import create_relay_use_case, resolve_relay_mode
from app.domain.contact import BASIC_MODE, TURNSTILE_MODE, NewlineStrategy
from config.settings import ContactFormSettings
from tests.fakes.fake_contact_services import FakeChallengeVerifier, FakeEmailSender


def test_resolve_relay_mode_presets() -> None:
    assert resolve_relay_mode(ContactFormSettings(relay_mode="turnstile")) is TURNSTILE_MODE
    assert resolve_relay_mode(ContactFormSettings(relay_mode="basic")) is BASIC_MODE


def test_resolve_relay_mode_newline_override() -> None:
    mode = resolve_relay_mode(
        ContactFormSettings(relay_mode="turnstile", newline_strategy="break")
    )

    assert mode.newline_strategy is NewlineStrategy.BREAK
    assert mode.require_challenge is True
    assert mode.from_email == TURNSTILE_MODE.from_email


def test_resolve_relay_mode_unknown_raises() -> None:
    with pytest.raises(ValueError, match="CONTACT_RELAY_MODE"):
        resolve_relay_mode(ContactFormSettings(relay_mode="captcha"))


def test_create_relay_use_case_without_verifier_in_basic_mode(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _fail() -> FakeChallengeVerifier:
        raise AssertionError("verifier should not be created")

    monkeypatch.setattr(dependencies, "create_challenge_verifier", _fail)
    monkeypatch.setattr(dependencies, "create_email_sender", FakeEmailSender)

    use_case = create_relay_use_case(ContactFormSettings(relay_mode="basic"))

    assert use_case.mode is BASIC_MODE


def test_create_relay_use_case_turnstile(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(dependencies, "create_challenge_verifier", FakeChallengeVerifier)
    monkeypatch.setattr(dependencies, "create_email_sender", FakeEmailSender)

    use_case = create_relay_use_case(ContactFormSettings(relay_mode="turnstile"))

    assert use_case.mode is TURNSTILE_MODE


def test_collect_settings_errors_requires_turnstile_secret(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("CONTACT_RELAY_MODE", "turnstile")
    monkeypatch.setenv("SENDGRID_API_KEY", "SG.key")
    monkeypatch.delenv("TURNSTILE_SECRET_KEY", raising=False)

    errors = bootstrap.collect_settings_errors()

    assert errors == ["turnstile: TURNSTILE_SECRET_KEY não configurado"]


def test_collect_settings_errors_basic_mode_ignores_turnstile(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("CONTACT_RELAY_MODE", "basic")
    monkeypatch.setenv("SENDGRID_API_KEY", "SG.key")
    monkeypatch.delenv("TURNSTILE_SECRET_KEY", raising=False)

    assert bootstrap.collect_settings_errors() == []


def test_validate_runtime_settings_strict_in_production(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.delenv("SENDGRID_API_KEY", raising=False)

    with pytest.raises(RuntimeError, match="SENDGRID_API_KEY"):
        bootstrap.validate_runtime_settings()


def test_validate_runtime_settings_warns_in_development(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.delenv("SENDGRID_API_KEY", raising=False)

    bootstrap.validate_runtime_settings()
