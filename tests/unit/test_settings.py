"""Unit tests for Settings and logging configuration."""

import pytest
from pydantic import ValidationError

from ea_assessment import observability
from ea_assessment.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for name in ("TOP_GAPS_LIMIT", "QUICK_WIN_MAX_COST", "LOG_FORMAT"):
            monkeypatch.delenv(f"EA_ASSESSMENT_{name}", raising=False)
        settings = Settings()
        assert settings.top_gaps_limit == 10
        assert settings.quick_win_min_priority == 5.0
        assert settings.quick_win_max_cost == 2
        assert settings.log_format == "json"
        assert settings.autosave_path == "ea-autosave.json"

    def test_environment_override(self, monkeypatch) -> None:
        monkeypatch.setenv("EA_ASSESSMENT_TOP_GAPS_LIMIT", "3")
        monkeypatch.setenv("EA_ASSESSMENT_LOG_FORMAT", "console")
        settings = get_settings()
        assert settings.top_gaps_limit == 3
        assert settings.log_format == "console"

    @pytest.mark.parametrize(
        "overrides",
        [{"top_gaps_limit": 0}, {"quick_win_max_cost": 6}, {"log_format": "xml"}],
    )
    def test_invalid_values(self, overrides: dict) -> None:
        with pytest.raises(ValidationError):
            Settings(**overrides)


class TestLogging:
    def test_configure_logging(self) -> None:
        observability.configure_logging(level="DEBUG", log_format="console")
        assert observability.is_configured() is True
        logger = observability.get_logger("ea_assessment.tests")
        logger.debug("Configured", source="test")
