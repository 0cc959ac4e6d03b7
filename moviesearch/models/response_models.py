# Pydantic models for outgoing API responses
from pydantic import BaseModel
from typing import List, Optional

from .result_models import OperationFailure
from .search_event_models import TrendingEntry

class AcceptedResponse(BaseModel):
    status: str = "accepted"

class TrendingResponse(BaseModel):
    movies: List[TrendingEntry]
    failure: Optional[OperationFailure] = None

class HealthResponse(BaseModel):
    status: str = "healthy"
    tracking_enabled: bool
    config_valid: bool
