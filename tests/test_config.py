"""Unit tests for core/config.py -- signing secret policy.

Covers:
- production mode refuses to start without both secrets
- dev mode generates distinct secrets
- short secrets and equal secrets are rejected
- defaults: 30 minute access tokens, port 3000
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import Settings

GOOD_ACCESS = "a" * 32
GOOD_REFRESH = "b" * 32


def _settings(**overrides) -> Settings:
    values = {"debug": False, "access_token_secret": GOOD_ACCESS, "refresh_token_secret": GOOD_REFRESH}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_defaults() -> None:
    s = _settings()
    assert s.access_token_expire_minutes == 30
    assert s.port == 3000
    assert s.database_url.startswith("sqlite:///")


@pytest.mark.parametrize("missing", ["access_token_secret", "refresh_token_secret"])
def test_production_requires_secrets(missing: str) -> None:
    with pytest.raises(ValidationError, match=missing.upper()):
        _settings(**{missing: ""})


def test_debug_generates_distinct_secrets() -> None:
    s = _settings(debug=True, access_token_secret="", refresh_token_secret="")
    assert len(s.access_token_secret) >= 32
    assert len(s.refresh_token_secret) >= 32
    assert s.access_token_secret != s.refresh_token_secret


def test_short_secret_rejected() -> None:
    with pytest.raises(ValidationError, match="at least 32"):
        _settings(access_token_secret="short")


def test_equal_secrets_rejected() -> None:
    with pytest.raises(ValidationError, match="must differ"):
        _settings(refresh_token_secret=GOOD_ACCESS)


@pytest.mark.parametrize("rounds", [3, 32])
def test_bcrypt_rounds_bounds(rounds: int) -> None:
    with pytest.raises(ValidationError):
        _settings(bcrypt_rounds=rounds)


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ACCESS_TOKEN_SECRET", "e" * 40)
    monkeypatch.setenv("REFRESH_TOKEN_SECRET", "f" * 40)
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    s = Settings(_env_file=None, debug=False)
    assert s.access_token_secret == "e" * 40
    assert s.access_token_expire_minutes == 15
    assert s.database_url == "sqlite:///:memory:"
