"""
Configuration management for TetraFlow.

Settings are read from environment variables (prefix ``TETRAFLOW_``) with a
``.env`` file in the working directory loaded first, falling back to
defaults suitable for local development.
"""

from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .const import (
    ELASTICSEARCH_HOST,
    ELASTICSEARCH_USER,
    ELASTICSEARCH_PASSWORD,
    DEFAULT_INDEX_PREFIX,
    DEFAULT_WEEKLY_TREND_WEEKS,
)

load_dotenv()


class TetraFlowSettings(BaseSettings):
    """TetraFlow runtime settings."""

    model_config = SettingsConfigDict(env_prefix="TETRAFLOW_", extra="ignore")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: Optional[str] = Field(
        default=None, description="Directory for the tetraflow.log file"
    )

    # Query engine
    strict_fetch: bool = Field(
        default=False,
        description="Raise instead of degrading when a discipline fetch fails",
    )
    weekly_trend_weeks: int = Field(
        default=DEFAULT_WEEKLY_TREND_WEEKS,
        ge=1,
        description="Number of weeks covered by the weekly trend",
    )

    # Elasticsearch record store
    elasticsearch_hosts: List[str] = Field(default_factory=lambda: [ELASTICSEARCH_HOST])
    elasticsearch_user: str = Field(default=ELASTICSEARCH_USER)
    elasticsearch_password: str = Field(default=ELASTICSEARCH_PASSWORD)
    elasticsearch_index_prefix: str = Field(default=DEFAULT_INDEX_PREFIX)

    def elasticsearch_config(self) -> dict:
        """Config dict accepted by ``ElasticsearchRecordStore.initialize``."""
        return {
            "hosts": self.elasticsearch_hosts,
            "username": self.elasticsearch_user,
            "password": self.elasticsearch_password,
            "index_prefix": self.elasticsearch_index_prefix,
        }


@lru_cache()
def get_settings() -> TetraFlowSettings:
    """Get cached settings instance."""
    return TetraFlowSettings()
