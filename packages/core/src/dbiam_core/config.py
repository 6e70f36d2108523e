"""Settings loaded from the environment (prefix ``DBIAM_``) or ``.env``."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DeployStage(str, Enum):
    TEST = "test"
    DEV = "dev"
    PROD = "prod"


class DbiamSettings(BaseSettings):
    """Process-wide configuration.

    ``module_log_levels`` takes JSON from the environment, e.g.
    ``DBIAM_MODULE_LOG_LEVELS='{"dbiam.domain.person": "DEBUG"}'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="DBIAM_",
        env_file=".env",
        extra="ignore",
    )

    deploy_stage: DeployStage = DeployStage.DEV
    database_url: str = "sqlite+aiosqlite:///:memory:"
    database_echo: bool = False
    log_level: str = "INFO"
    module_log_levels: dict[str, str] = Field(default_factory=dict)
    default_page_limit: int | None = None
    max_page_limit: int = Field(default=1000, gt=0)

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache(maxsize=1)
def get_settings() -> DbiamSettings:
    return DbiamSettings()
