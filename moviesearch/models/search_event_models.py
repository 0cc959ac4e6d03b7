# Models for recorded searches and the trending list derived from them
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from typing import Any, Optional, Union

# Movie ids are taken as given by the movie API; no coercion between types
MovieId = Union[StrictInt, StrictFloat, StrictStr]


def numeric_or_none(value: Any) -> Optional[float]:
    """Keep int/float values only; bools and numeric strings become None"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def identifier_or_none(value: Any) -> Optional[Union[int, float, str]]:
    """Keep str/int/float ids; anything else (bools, containers) becomes None"""
    if isinstance(value, str):
        return value
    return numeric_or_none(value)


def text_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


class SearchEvent(BaseModel):
    """One document per search action, written once and never updated"""
    model_config = ConfigDict(populate_by_name=True)

    search_term: str = Field(alias="searchTerm")
    movie_id: Optional[MovieId] = Field(default=None, alias="movieId")
    title: Optional[str] = None
    poster_path: Optional[str] = Field(default=None, alias="posterPath")
    vote_average: Optional[float] = Field(default=None, alias="voteAverage")
    created_at: str = Field(alias="createdAt")  # ISO 8601, UTC

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)


class TrendingEntry(BaseModel):
    """Aggregated popularity of one movie within the trending window"""
    model_config = ConfigDict(populate_by_name=True)

    movie_id: MovieId = Field(alias="movieId")
    title: Optional[str] = None
    poster_path: Optional[str] = Field(default=None, alias="posterPath")
    vote_average: Optional[float] = Field(default=None, alias="voteAverage")
    count: int = Field(default=1, ge=1)
