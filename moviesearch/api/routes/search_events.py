from fastapi import APIRouter, BackgroundTasks, Depends
from typing import Any, Dict, Optional

from moviesearch.api.dependencies import get_tracking_context
from moviesearch.models.request_models import SearchEventRequest
from moviesearch.models.response_models import AcceptedResponse
from moviesearch.services.context import TrackingContext
from moviesearch.services.search_event_service import record_search
from moviesearch.services.session_service import ensure_session

router = APIRouter()


async def track_search(ctx: TrackingContext, search_term: str, top_result: Optional[Dict[str, Any]]) -> None:
    # A failed session bootstrap is not fatal; the write may still be rejected downstream
    await ensure_session(ctx)
    await record_search(ctx, search_term, top_result)


@router.post("", status_code=202, response_model=AcceptedResponse)
async def submit_search_event(
    request: SearchEventRequest,
    background_tasks: BackgroundTasks,
    ctx: TrackingContext = Depends(get_tracking_context),
):
    """
    Record a search in the background and return immediately.
    """
    background_tasks.add_task(track_search, ctx, request.search_term, request.top_result)
    return AcceptedResponse()
