"""Unit tests for Settings (pydantic-settings)."""

import pytest
from pydantic import ValidationError

from userwallet.core.config import Settings, get_settings
from userwallet.core.enums import Environment


@pytest.mark.unit
class TestSettings:
    """Test Settings loading and validation."""

    def test_test_environment_is_loaded(self):
        settings = get_settings()

        assert settings.environment == Environment.TESTING
        assert settings.is_testing is True
        assert settings.is_sqlite is True

    def test_defaults(self):
        settings = Settings(database_url="sqlite+aiosqlite:///:memory:")

        assert settings.api_v1_prefix == "/api/v1"
        assert settings.default_page_limit == 20
        assert settings.max_page_limit == 100

    def test_log_level_is_normalized(self):
        settings = Settings(database_url="sqlite://", log_level="warning")

        assert settings.log_level == "WARNING"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(database_url="sqlite://", log_level="LOUD")

    def test_trailing_slash_is_removed_from_base_url(self):
        settings = Settings(database_url="sqlite://", api_base_url="http://api.local/")

        assert settings.api_base_url == "http://api.local"

    def test_default_limit_cannot_exceed_max(self):
        with pytest.raises(ValidationError):
            Settings(database_url="sqlite://", default_page_limit=50, max_page_limit=10)

    def test_database_url_is_required(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]
