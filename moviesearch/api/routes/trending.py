from fastapi import APIRouter, Depends, Query

from moviesearch.api.dependencies import get_tracking_context
from moviesearch.models.response_models import TrendingResponse
from moviesearch.services.context import TrackingContext
from moviesearch.services.trending_service import DEFAULT_TRENDING_LIMIT, get_trending

router = APIRouter()

@router.get("", response_model=TrendingResponse, response_model_by_alias=True)
async def trending_movies(
    limit: int = Query(DEFAULT_TRENDING_LIMIT, description="Number of trending movies to return"),
    ctx: TrackingContext = Depends(get_tracking_context),
):
    result = await get_trending(ctx, limit=limit)
    return TrendingResponse(movies=result.value or [], failure=result.failure)
