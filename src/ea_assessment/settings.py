"""Settings for the EA maturity assessment engine.

Repo-specific settings use the EA_ASSESSMENT_ env prefix.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for ea-maturity-assessment.

    Environment variable prefix: EA_ASSESSMENT_
    """

    service_name: str = "ea-maturity-assessment"

    # Logging
    log_level: str = "INFO"
    log_format: str = Field(default="json", pattern=r"^(json|console)$")

    # Gap analysis
    top_gaps_limit: int = Field(default=10, ge=1)

    # Recommendation prioritisation
    quick_win_min_priority: float = 5.0
    quick_win_max_cost: int = Field(default=2, ge=1, le=5)

    # Auto-save collaborator
    autosave_path: str = "ea-autosave.json"

    model_config = SettingsConfigDict(env_prefix="EA_ASSESSMENT_", extra="ignore")


def get_settings() -> Settings:
    """Return a settings instance built from the current environment."""
    return Settings()
