import logging
from typing import Any, Dict, Iterable, List

from moviesearch.models.result_models import FailureKind, OperationResult
from moviesearch.models.search_event_models import (
    TrendingEntry,
    identifier_or_none,
    numeric_or_none,
    text_or_none,
)
from moviesearch.models.store_models import DocumentQuery
from moviesearch.services.context import TrackingContext

logger = logging.getLogger(__name__)

TRENDING_WINDOW_SIZE = 200
DEFAULT_TRENDING_LIMIT = 10


def aggregate_trending(documents: Iterable[Dict[str, Any]], limit: int = DEFAULT_TRENDING_LIMIT) -> List[TrendingEntry]:
    """
    Count search events per movie and return the most searched first.

    documents must be in fetch order (newest first): each movie keeps the
    title/poster/rating of its first document. Equal counts keep first-seen
    order, so the more recently searched movie ranks higher.
    """
    movie_stats: Dict[Any, Dict[str, Any]] = {}

    for doc in documents:
        # Rows without a usable id (null, bool, nested value) never count
        movie_id = identifier_or_none(doc.get("movieId"))
        if movie_id is None:
            continue

        if movie_id not in movie_stats:
            movie_stats[movie_id] = {
                "movie_id": movie_id,
                "title": text_or_none(doc.get("title")),
                "poster_path": text_or_none(doc.get("posterPath")),
                "vote_average": numeric_or_none(doc.get("voteAverage")),
                "count": 0,
            }
        movie_stats[movie_id]["count"] += 1

    # sorted() is stable; dict order is first-seen order
    ranked = sorted(movie_stats.values(), key=lambda stats: stats["count"], reverse=True)

    return [TrendingEntry(**stats) for stats in ranked[:max(0, limit)]]


async def get_trending(ctx: TrackingContext, limit: int = DEFAULT_TRENDING_LIMIT) -> "OperationResult[List[TrendingEntry]]":
    """
    Top `limit` movies by search count over the most recent events.

    Always returns a list value; a missing configuration or failed fetch
    yields an empty list with the failure attached.
    """
    if not ctx.enabled:
        return OperationResult.failed(FailureKind.NOT_CONFIGURED, "Search tracking is not configured", value=[])

    if not ctx.settings.storage_configured:
        logger.warning("Supabase schema/table env vars missing; get_trending returns empty list")
        return OperationResult.failed(FailureKind.NOT_CONFIGURED, "Search table is not configured", value=[])

    try:
        documents = await ctx.store.list_documents(
            ctx.settings.database_id,
            ctx.settings.collection_id,
            DocumentQuery(order_by_desc="createdAt", limit=TRENDING_WINDOW_SIZE),
        )
    except Exception as e:
        logger.warning(f"Failed to list trending movies: {str(e)}")
        return OperationResult.failed(FailureKind.REMOTE_ERROR, str(e), value=[])

    trending = aggregate_trending(documents, limit)
    logger.info(f"Computed {len(trending)} trending movies from {len(documents)} search events")

    return OperationResult.success(trending)
