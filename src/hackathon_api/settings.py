"""Settings for the hackathon API."""

from typing import Optional

from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the hackathon API.

    [pydantic.BaseSettings](https://docs.pydantic.dev/latest/concepts/pydantic_settings/) reads
    configuration values from environment variables and, for local development, a .env file.

    Environment variable names are treated case-insensitively.
    """

    service_name: str = "Hackathon API"
    """Service name reported by the health endpoint and the OpenAPI title."""

    log_level: str = "INFO"
    """Minimum level for the stdout log sink (DEBUG, INFO, WARNING, ERROR)."""

    serialize_logs: bool = False
    """Emit loguru's JSON serialization instead of the colored console format."""

    default_hackathon_id: Optional[str] = None
    """Hackathon row id to treat as current. When unset the row flagged `default` wins, else the latest."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )
