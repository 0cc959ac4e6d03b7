# Load environment variables from .env file first, before any other imports
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI

from moviesearch.api.dependencies import get_tracking_context
from moviesearch.api.routes import search_events, trending
from moviesearch.config import configure_logging, missing_settings, validate_config
from moviesearch.models.response_models import HealthResponse
from moviesearch.services.context import TrackingContext, build_context

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One context per process so every request shares the same client and session
    app.state.tracking_context = build_context()
    if validate_config(app.state.tracking_context.settings):
        logger.info("Search tracking configured")
    yield


app = FastAPI(title="Movie Search Tracking Service", version="1.0.0", lifespan=lifespan)

app.include_router(search_events.router, prefix="/search-events", tags=["search-events"])
app.include_router(trending.router, prefix="/trending", tags=["trending"])


@app.get("/health", response_model=HealthResponse)
def health_check(ctx: TrackingContext = Depends(get_tracking_context)):
    # missing_settings does not log; the startup check already warned once
    return HealthResponse(tracking_enabled=ctx.enabled, config_valid=not missing_settings(ctx.settings))

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
