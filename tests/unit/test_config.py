"""Unit tests for the config module."""

from pathlib import Path

from pydantic import ValidationError
import pytest

from code_search_pro.config import Settings


pytestmark = pytest.mark.unit


class TestConfig:
    """Test configuration loading and validation."""

    def test_config_defaults_are_applied(self):
        settings = Settings()

        assert settings.data_path == Path("problems-data.json")
        assert settings.max_results == 20
        assert settings.max_suggestions == 8
        assert settings.autocomplete_min_chars == 2
        assert settings.log_json is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CODE_SEARCH_MAX_RESULTS", "5")
        monkeypatch.setenv("CODE_SEARCH_DATA_PATH", "/data/questions.json")
        monkeypatch.setenv("CODE_SEARCH_LOG_JSON", "true")

        settings = Settings()

        assert settings.max_results == 5
        assert settings.data_path == Path("/data/questions.json")
        assert settings.log_json is True

    def test_env_file_is_read(self, tmp_path):
        (tmp_path / ".env").write_text("CODE_SEARCH_MAX_SUGGESTIONS=3\n", encoding="utf-8")

        assert Settings().max_suggestions == 3

    @pytest.mark.parametrize("field", ["max_results", "max_suggestions", "autocomplete_min_chars"])
    def test_rejects_non_positive_bounds(self, field):
        with pytest.raises(ValidationError):
            Settings(**{field: 0})

    def test_ignores_unrelated_variables(self, monkeypatch):
        monkeypatch.setenv("CODE_SEARCH_UNKNOWN", "1")

        Settings()

    def test_should_autocomplete_threshold(self):
        settings = Settings(autocomplete_min_chars=2)

        assert settings.should_autocomplete("tw") is True
        assert settings.should_autocomplete("t") is False
