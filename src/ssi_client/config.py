"""Environment-driven configuration for the SSI client."""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_URL = "https://ssi-provider.sensorlab.tno.nl/"
DEFAULT_NAME = "ssi-service-provider"
DEFAULT_ALGORITHM = "HS256"


class SSIClientSettings(BaseSettings):
    """Settings read from ``SSI_*`` environment variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="SSI_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    client_id: str
    client_secret: str
    url: str = DEFAULT_URL
    name: str = DEFAULT_NAME
    algorithm: str = DEFAULT_ALGORITHM
    verification_key: Optional[str] = None
    expires_in: Optional[int] = Field(default=None, gt=0)
    log_level: Literal["debug", "info", "warning", "error", "critical"] = "warning"

    @field_validator("log_level", mode="before")
    @classmethod
    def _lowercase_log_level(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value
