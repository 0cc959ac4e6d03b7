from .context import TrackingContext, build_context
from .session_service import ensure_session
from .search_event_service import build_search_event, record_search
from .trending_service import aggregate_trending, get_trending

__all__ = [
    "TrackingContext",
    "build_context",
    "ensure_session",
    "build_search_event",
    "record_search",
    "aggregate_trending",
    "get_trending",
]
