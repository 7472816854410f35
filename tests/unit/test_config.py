"""Settings and composition root tests."""

import pytest
from pydantic import ValidationError

from fileshare.config import Settings
from fileshare.main import create_fileshare_app


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.environment == "development"
    assert settings.trust_bearer_subject is False
    assert settings.authorization_timeout_seconds == 5.0


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTHORIZATION_TIMEOUT_SECONDS", "0.5")
    monkeypatch.setenv("TRUST_BEARER_SUBJECT", "true")

    settings = Settings(_env_file=None)

    assert settings.authorization_timeout_seconds == 0.5
    assert settings.trust_bearer_subject is True


def test_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, authorization_timeout_seconds=0)


def test_trusted_bearer_refused_in_production() -> None:
    settings = Settings(
        _env_file=None,
        environment="production",
        trust_bearer_subject=True,
        keycloak_client_secret="",
    )
    with pytest.raises(RuntimeError):
        create_fileshare_app(settings)
