"""Environment configuration for search tracking and trending."""

import os
import logging
from typing import List, Optional
from pydantic import BaseModel

logger = logging.getLogger(__name__)

# ============================================================================
# Environment variable names
# ============================================================================

ENDPOINT_ENV = "SUPABASE_URL"
PROJECT_KEY_ENV = "SUPABASE_ANON_KEY"
SCHEMA_ENV = "SUPABASE_SCHEMA"
SEARCHES_TABLE_ENV = "SUPABASE_SEARCHES_TABLE"

# ============================================================================
# Logging Configuration
# ============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    """Connection settings for the hosted search-event store"""
    endpoint: Optional[str] = None
    project_key: Optional[str] = None
    database_id: Optional[str] = None
    collection_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            endpoint=os.getenv(ENDPOINT_ENV),
            project_key=os.getenv(PROJECT_KEY_ENV),
            database_id=os.getenv(SCHEMA_ENV),
            collection_id=os.getenv(SEARCHES_TABLE_ENV),
        )

    @property
    def client_configured(self) -> bool:
        # Only the endpoint and project key are needed to build a client handle
        return bool(self.endpoint and self.project_key)

    @property
    def storage_configured(self) -> bool:
        return bool(self.database_id and self.collection_id)


def missing_settings(settings: Settings) -> List[str]:
    """Names of the required environment variables that are unset or empty"""
    required = [
        (ENDPOINT_ENV, settings.endpoint),
        (PROJECT_KEY_ENV, settings.project_key),
        (SCHEMA_ENV, settings.database_id),
        (SEARCHES_TABLE_ENV, settings.collection_id),
    ]
    return [name for name, value in required if not value]


def validate_config(settings: Settings) -> bool:
    """
    Check that all four connection settings are present.

    Logs a warning naming the missing variables and returns False when any
    are absent. Never raises.
    """
    missing = missing_settings(settings)
    if missing:
        logger.warning(f"Missing search tracking env vars: {', '.join(missing)}")
        return False
    return True


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
