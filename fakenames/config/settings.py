from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    node_env: str = "development"
    log_level: str = "INFO"

    project_root: Path | None = None
    fake_names_file: str = "fakeNames.csv"
    dist_relative_path: str = "packages/ui/dist"
    app_dist_relative_path: str = "packages/app/ui/dist"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def is_production(self) -> bool:
        """True when the environment signals a production (release) build."""
        return self.node_env == "production"
