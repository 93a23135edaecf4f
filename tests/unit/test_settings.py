"""
Environment-driven configuration
"""

import pytest

from restful_crud.config import HarnessConfig, get_config
from restful_crud.config.settings import DEFAULT_BASE_URL

ENV_VARS = [
    "OBJECTS_API_BASE_URL",
    "OBJECTS_API_TIMEOUT",
    "OBJECTS_LIST_MIN_COUNT",
    "PRIORITY_STRICT",
    "RUN_LIVE_API_TESTS",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    config = get_config()
    assert config.api_base_url == DEFAULT_BASE_URL == "https://api.restful-api.dev"
    assert config.request_timeout == 30.0
    assert config.list_min_count == 13
    assert config.priority_strict is False
    assert config.run_live is False
    assert config.log_level == "INFO"


def test_environment_overrides(clean_env):
    clean_env.setenv("OBJECTS_API_BASE_URL", "http://localhost:9000")
    clean_env.setenv("OBJECTS_API_TIMEOUT", "2.5")
    clean_env.setenv("OBJECTS_LIST_MIN_COUNT", "1")
    clean_env.setenv("PRIORITY_STRICT", "yes")
    clean_env.setenv("RUN_LIVE_API_TESTS", "1")
    clean_env.setenv("LOG_LEVEL", "debug")

    config = get_config()

    assert config.api_base_url == "http://localhost:9000"
    assert config.request_timeout == 2.5
    assert config.list_min_count == 1
    assert config.priority_strict is True
    assert config.run_live is True
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("overrides, message", [
    ({"api_base_url": "ftp://example.com"}, "OBJECTS_API_BASE_URL"),
    ({"request_timeout": 0}, "OBJECTS_API_TIMEOUT"),
    ({"list_min_count": -1}, "OBJECTS_LIST_MIN_COUNT"),
    ({"log_level": "LOUD"}, "LOG_LEVEL"),
])
def test_validate_reports_errors(clean_env, overrides, message):
    errors = HarnessConfig(**overrides).validate()
    assert len(errors) == 1
    assert message in errors[0]


def test_get_config_raises_on_invalid_environment(clean_env):
    clean_env.setenv("OBJECTS_API_TIMEOUT", "-1")
    with pytest.raises(ValueError, match="Configuration errors"):
        get_config()


def test_get_config_reports_unparseable_numbers(clean_env):
    clean_env.setenv("OBJECTS_API_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="Configuration errors: could not convert"):
        get_config()
