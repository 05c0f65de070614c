from unittest.mock import patch

import pytest
from pydantic import ValidationError

from relay.config.settings import Settings, get_settings

CLOVER_ENV = (
    "CLOVER_CLIENT_ID",
    "CLOVER_CLIENT_SECRET",
    "CLOVER_TOKEN_URL",
    "CLOVER_API_BASE",
    "CLOVER_REDIRECT_URL",
    "CLOVER_AUTHORIZE_URL",
    "CLOVER_REDIRECT_AFTER_PAY",
    "HTTP_TIMEOUT_SECONDS",
    "HOST",
    "PORT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in CLOVER_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_defaults(clean_env):
    settings = Settings.from_env()

    assert settings.clover_authorize_url == "https://www.clover.com/oauth/authorize"
    assert settings.clover_redirect_after_pay == "https://google.com"
    assert settings.http_timeout_seconds == 30.0
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert len(settings.missing_clover_settings()) == 5


def test_values_from_environment(clean_env):
    clean_env.setenv("CLOVER_CLIENT_ID", "cid")
    clean_env.setenv("CLOVER_CLIENT_SECRET", "secret")
    clean_env.setenv("CLOVER_TOKEN_URL", "https://clover.test/oauth/token")
    clean_env.setenv("CLOVER_API_BASE", "https://api.clover.test/")
    clean_env.setenv("CLOVER_REDIRECT_URL", "https://relay.test/cb")
    clean_env.setenv("CLOVER_REDIRECT_AFTER_PAY", "https://shop.test/paid")
    clean_env.setenv("HTTP_TIMEOUT_SECONDS", "5")
    clean_env.setenv("PORT", "8080")

    settings = get_settings()

    assert settings.clover_client_id == "cid"
    assert settings.clover_api_base == "https://api.clover.test"
    assert settings.clover_redirect_after_pay == "https://shop.test/paid"
    assert settings.http_timeout_seconds == 5.0
    assert settings.port == 8080
    assert settings.missing_clover_settings() == []


def test_blank_redirect_after_pay_falls_back(clean_env):
    clean_env.setenv("CLOVER_REDIRECT_AFTER_PAY", "")

    assert Settings.from_env().clover_redirect_after_pay == "https://google.com"


def test_settings_are_read_once(clean_env):
    first = get_settings()
    clean_env.setenv("CLOVER_CLIENT_ID", "changed")

    assert get_settings() is first
    assert get_settings().clover_client_id == ""


@pytest.mark.parametrize(
    "name, value",
    [
        ("HTTP_TIMEOUT_SECONDS", "abc"),
        ("HTTP_TIMEOUT_SECONDS", "0"),
        ("PORT", "eighty"),
    ],
)
def test_invalid_environment_value_fails_on_load(clean_env, name, value):
    clean_env.setenv(name, value)

    with pytest.raises(ValidationError):
        get_settings()


def test_main_refuses_to_start_with_invalid_environment(clean_env):
    import run

    clean_env.setenv("HTTP_TIMEOUT_SECONDS", "abc")

    with patch("run.uvicorn.run") as mock_run:
        with pytest.raises(SystemExit) as exc_info:
            run.main([])

    assert exc_info.value.code == 1
    mock_run.assert_not_called()
