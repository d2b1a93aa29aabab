"""
Search Pydantic Schemas
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from alumni_hub.schemas.base import CamelModel
from alumni_hub.schemas.person import Person


class SearchFilters(CamelModel):
    """
    Hard constraints applied before scoring.

    Every attribute is an exact match except ``skills``, which is a
    case-insensitive substring test against each skill tag.
    """

    user_type: Optional[str] = None
    college: Optional[str] = None
    company: Optional[str] = None
    major: Optional[str] = None
    branch: Optional[str] = None
    graduation_year: Optional[Union[int, str]] = None
    location: Optional[str] = None
    department: Optional[str] = None
    skills: Optional[str] = None

    def active(self) -> Dict[str, Any]:
        """Filters that carry a value, keyed by attribute name"""
        return {
            field: value
            for field, value in self.model_dump().items()
            if value is not None and value != ""
        }


class SearchQuery(CamelModel):
    """A single search invocation"""

    text: str = ""
    filters: SearchFilters = Field(default_factory=SearchFilters)
    requester: Person


class SearchOptions(CamelModel):
    """Engine configuration for one call; no cap by default"""

    limit_results: Optional[int] = Field(None, ge=0)


class ScoredResult(CamelModel):
    """A person paired with its relevance score"""

    person: Person
    score: int = Field(..., ge=0)


class SearchStatus(str, Enum):
    """Distinguishes the empty states of a search response"""

    OK = "ok"
    NO_RESULTS = "no_results"
    EMPTY_QUERY = "empty_query"


class DirectorySearchRequest(CamelModel):
    """Request schema for directory search"""

    text: str = ""
    filters: SearchFilters = Field(default_factory=SearchFilters)
    limit: Optional[int] = Field(None, ge=1, le=500)


class SearchResponse(CamelModel):
    """Ranked search response schema"""

    query: str
    status: SearchStatus
    results: List[ScoredResult]
    total_results: int
    search_time_ms: float
