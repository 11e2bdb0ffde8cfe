"""Settings tests — required secret, production checks, env loading."""

import pytest
from pydantic import ValidationError

from authapi.config import Settings
from authapi.main import create_app

STRONG_SECRET = "s" * 40


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("AUTHAPI_JWT_SECRET", "AUTHAPI_ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)


def test_secret_is_required():
    with pytest.raises(ValidationError):
        Settings()


def test_empty_secret_rejected():
    with pytest.raises(ValidationError):
        Settings(jwt_secret="")


def test_app_refuses_to_start_without_secret():
    with pytest.raises(ValidationError):
        create_app()


def test_secret_from_env(monkeypatch):
    monkeypatch.setenv("AUTHAPI_JWT_SECRET", STRONG_SECRET)
    monkeypatch.setenv("AUTHAPI_BCRYPT_ROUNDS", "12")
    settings = Settings()
    assert settings.jwt_secret == STRONG_SECRET
    assert settings.bcrypt_rounds == 12


def test_short_secret_allowed_in_development():
    assert Settings(jwt_secret="dev").jwt_secret == "dev"


def test_short_secret_rejected_in_production():
    with pytest.raises(ValidationError):
        Settings(jwt_secret="dev", environment="production")


def test_production_settings():
    settings = Settings(jwt_secret=STRONG_SECRET, environment="production")
    assert settings.is_production


def test_defaults():
    settings = Settings(jwt_secret=STRONG_SECRET)
    assert settings.cookie_name == "token"
    assert settings.cookie_path == "/api"
    assert settings.token_expire_days == 1
    assert settings.token_max_age_seconds == 86400
    assert settings.bcrypt_rounds == 10


def test_bcrypt_rounds_bounds():
    with pytest.raises(ValidationError):
        Settings(jwt_secret=STRONG_SECRET, bcrypt_rounds=3)
    with pytest.raises(ValidationError):
        Settings(jwt_secret=STRONG_SECRET, bcrypt_rounds=32)
