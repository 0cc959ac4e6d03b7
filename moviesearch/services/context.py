"""
Tracking context shared by the session, recording and trending services
"""
import logging
from typing import Optional

from moviesearch.config import Settings
from moviesearch.database.remote_store import RemoteStore
from moviesearch.database.supabase_client import SupabaseSearchStore

logger = logging.getLogger(__name__)


class TrackingContext:
    """
    Explicit handle to the remote store plus the settings it was built from.

    store is None when the endpoint or project key is missing; every service
    checks `enabled` and degrades to a no-op / empty result in that case.
    """

    def __init__(self, settings: Settings, store: Optional[RemoteStore] = None):
        self.settings = settings
        self.store = store

    @property
    def enabled(self) -> bool:
        return self.store is not None

    @property
    def storage_ready(self) -> bool:
        return self.enabled and self.settings.storage_configured


def build_context(settings: Optional[Settings] = None) -> TrackingContext:
    """Build the context from settings (or the environment), creating the store when possible"""
    if settings is None:
        settings = Settings.from_env()

    if not settings.client_configured:
        logger.warning(
            "Supabase env vars are missing; the client will not be initialized. "
            "Search tracking and trending features are disabled."
        )
        return TrackingContext(settings)

    return TrackingContext(settings, SupabaseSearchStore(settings.endpoint, settings.project_key))
