import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from moviesearch.models.result_models import FailureKind, OperationResult
from moviesearch.models.search_event_models import SearchEvent, numeric_or_none
from moviesearch.models.store_models import public_read_owner_write
from moviesearch.services.context import TrackingContext

logger = logging.getLogger(__name__)


def build_search_event(search_term: str, top_result: Optional[Mapping[str, Any]] = None) -> SearchEvent:
    """
    Build the document for one search action.

    Movie fields come from the top result (id, title, poster_path,
    vote_average) and are all None when there is no result.
    """
    top_result = top_result or {}

    return SearchEvent(
        search_term=search_term,
        movie_id=top_result.get("id"),
        title=top_result.get("title"),
        poster_path=top_result.get("poster_path"),
        vote_average=numeric_or_none(top_result.get("vote_average")),
        created_at=datetime.now(timezone.utc).isoformat(),
    )


async def record_search(
    ctx: TrackingContext,
    search_term: str,
    top_result: Optional[Mapping[str, Any]] = None,
) -> "OperationResult[SearchEvent]":
    """
    Persist a search event. Fire-and-forget for callers: every call creates
    a new document (repeats count as popularity) and failures are logged
    and returned, never raised.
    """
    if not ctx.enabled:
        return OperationResult.failed(FailureKind.NOT_CONFIGURED, "Search tracking is not configured")

    if not ctx.settings.storage_configured:
        logger.warning("Supabase schema/table env vars missing; skipping record_search")
        return OperationResult.failed(FailureKind.NOT_CONFIGURED, "Search table is not configured")

    try:
        event = build_search_event(search_term, top_result)
    except ValidationError as e:
        logger.warning(f"Rejected search event for '{search_term}': {str(e)}")
        return OperationResult.failed(FailureKind.INVALID_INPUT, str(e))

    try:
        await ctx.store.create_document(
            ctx.settings.database_id,
            ctx.settings.collection_id,
            str(uuid.uuid4()),
            event.to_document(),
            public_read_owner_write(),
        )

        logger.info(f"Recorded search '{search_term}' (movie_id={event.movie_id})")
        return OperationResult.success(event)

    except Exception as e:
        logger.warning(f"Failed to record search event: {str(e)}")
        return OperationResult.failed(FailureKind.REMOTE_ERROR, str(e))
