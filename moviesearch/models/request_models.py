# Pydantic models for incoming API requests
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

class SearchEventRequest(BaseModel):
    search_term: str = Field(..., min_length=1)
    # Raw top result as returned by the movie API (id, title, poster_path, vote_average).
    # Kept untyped so vote_average is not coerced before the numeric check.
    top_result: Optional[Dict[str, Any]] = None
