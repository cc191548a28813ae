from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # ---- transports ----
    default_timeout_ms: int = Field(60000, gt=0)  # applied when args carry no timeout
    max_workers: int = Field(8, gt=0)  # thread pool shared by remote transports
    verify_ssl: bool = True
    ca_bundle: Optional[str] = None  # falls back to certifi's bundle

    # ---- wire format ----
    content_type: str = "application/json"

    # ---- app/runtime ----
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="RESOURCE_KIT_",      # RESOURCE_KIT_DEFAULT_TIMEOUT_MS, etc.
        extra = "ignore"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton accessor to avoid reparsing .env on every call."""
    return Settings()
