"""CLI configuration via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class CliSettings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CREWBID_", env_file=".env", extra="ignore"
    )

    log_level: str = "WARNING"
    # Rows printed by `crewbid rank` when --limit is not given
    default_limit: int = 20


settings = CliSettings()
