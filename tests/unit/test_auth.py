"""
Auth Method Validation Unit Tests
"""

import pytest

from portkey_adapter.auth import AuthType, validate_auth_method
from portkey_adapter.config import Settings

AUTH_ENV_VARS = [
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "GOOGLE_CLOUD_PROJECT",
    "GOOGLE_CLOUD_LOCATION",
    "PORTKEY_API_KEY",
    "PORTKEY_VERTEX_ACCESS_TOKEN",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in AUTH_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


def test_personal_login_needs_nothing():
    assert validate_auth_method(AuthType.LOGIN_WITH_GOOGLE_PERSONAL, settings()) is None


def test_gemini_requires_api_key():
    message = validate_auth_method(AuthType.USE_GEMINI, settings())
    assert message.startswith("GEMINI_API_KEY environment variable not found")
    assert validate_auth_method(AuthType.USE_GEMINI, settings(GEMINI_API_KEY="g")) is None


class TestVertexAI:
    def test_missing_everything(self):
        message = validate_auth_method(AuthType.USE_VERTEX_AI, settings())
        assert "GOOGLE_CLOUD_PROJECT and GOOGLE_CLOUD_LOCATION" in message

    def test_project_without_location_is_not_enough(self):
        assert validate_auth_method(AuthType.USE_VERTEX_AI, settings(GOOGLE_CLOUD_PROJECT="p")) is not None

    def test_project_and_location(self):
        s = settings(GOOGLE_CLOUD_PROJECT="p", GOOGLE_CLOUD_LOCATION="us-central1")
        assert validate_auth_method(AuthType.USE_VERTEX_AI, s) is None

    def test_express_mode_api_key(self):
        assert validate_auth_method(AuthType.USE_VERTEX_AI, settings(GOOGLE_API_KEY="k")) is None


class TestPortkey:
    def test_missing_portkey_key(self):
        message = validate_auth_method("portkey", settings(GEMINI_API_KEY="g"))
        assert message.startswith("PORTKEY_API_KEY environment variable not found")

    def test_missing_upstream_credential(self):
        message = validate_auth_method("portkey", settings(PORTKEY_API_KEY="pk"))
        assert message.startswith("GEMINI_API_KEY or PORTKEY_VERTEX_ACCESS_TOKEN")

    @pytest.mark.parametrize(
        "extra", [{"GEMINI_API_KEY": "g"}, {"PORTKEY_VERTEX_ACCESS_TOKEN": "t"}]
    )
    def test_valid(self, extra):
        assert validate_auth_method("portkey", settings(PORTKEY_API_KEY="pk", **extra)) is None


def test_unknown_method():
    assert validate_auth_method("api-key-from-thin-air", settings()) == "Invalid auth method selected."


def test_reads_environment_when_no_settings_given(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert validate_auth_method(AuthType.USE_GEMINI) is not None

    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    assert validate_auth_method(AuthType.USE_GEMINI) is None
