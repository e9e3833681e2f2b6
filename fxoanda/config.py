"""Configuration management using pydantic settings."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

PRACTICE_HOST = "api-fxpractice.oanda.com"
LIVE_HOST = "api-fxtrade.oanda.com"


class OandaConfig(BaseModel):
    """REST endpoint and credentials."""

    # Host only, no scheme: "api-fxpractice.oanda.com"
    host: str = Field(default=PRACTICE_HOST, min_length=1)
    api_key: str = Field(default="")
    timeout: float = Field(default=30.0, gt=0)
    # AcceptDatetimeFormat header; the codecs only read RFC3339
    datetime_format: Literal["RFC3339"] = Field(default="RFC3339")

    @property
    def is_practice(self) -> bool:
        return self.host == PRACTICE_HOST


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_dir: Path | None = Field(default=None)
    json_format: bool = Field(default=True)


class Settings(BaseSettings):
    """Client settings."""

    oanda: OandaConfig = Field(default_factory=OandaConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "FXOANDA_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def load_settings() -> Settings:
    """Load settings from environment variables."""
    return Settings()
