"""Unit tests for Settings"""

import pytest
from pydantic import ValidationError

from scholarvault.config import Settings


@pytest.mark.unit
class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("API_URL", "TIMEOUT", "MAX_RETRIES", "LOG_LEVEL", "MAX_TREE_DEPTH"):
            monkeypatch.delenv(f"SCHOLARVAULT_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.API_URL == "http://localhost:3000"
        assert settings.MAX_RETRIES == 1
        assert settings.MAX_TREE_DEPTH == 64
        assert settings.TOKEN_FILE.name == "auth_token"

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("SCHOLARVAULT_API_URL", "https://vault.example.org")
        monkeypatch.setenv("SCHOLARVAULT_MAX_RETRIES", "3")
        monkeypatch.setenv("SCHOLARVAULT_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.API_URL == "https://vault.example.org"
        assert settings.MAX_RETRIES == 3
        assert settings.LOG_LEVEL == "DEBUG"

    def test_rejects_zero_retries(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, MAX_RETRIES=0)

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="chatty")
