from fastapi import Request

from moviesearch.services.context import TrackingContext


async def get_tracking_context(request: Request) -> TrackingContext:
    """Tracking context built once by the application lifespan"""
    return request.app.state.tracking_context
