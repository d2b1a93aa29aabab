"""
Search Endpoints

Ranked directory search and the messaging alumni finder. Both run the same
engine over a fresh snapshot of the record store.
"""

import time

from fastapi import APIRouter, Depends, HTTPException, Query, status

from alumni_hub.config import settings
from alumni_hub.schemas.person import Person
from alumni_hub.schemas.search import (
    DirectorySearchRequest,
    SearchFilters,
    SearchOptions,
    SearchQuery,
    SearchResponse,
    SearchStatus,
)
from alumni_hub.services.database import DatabaseService, get_db
from alumni_hub.services.directory_search import DirectorySearchEngine, alumni_finder
from alumni_hub.utils.auth import get_current_user
from alumni_hub.utils.logger import get_logger
from alumni_hub.utils.validators import validate_search_text

router = APIRouter()
logger = get_logger(__name__)

directory_engine = DirectorySearchEngine()


def _run(engine: DirectorySearchEngine, db: DatabaseService, query: SearchQuery, options: SearchOptions):
    started = time.perf_counter()
    results = engine.rank(db.list_all_persons(), query, options)
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.info(
        "Search completed",
        requester=query.requester.id,
        text=query.text,
        results=len(results),
    )
    return SearchResponse(
        query=query.text,
        status=SearchStatus.OK if results else SearchStatus.NO_RESULTS,
        results=results,
        total_results=len(results),
        search_time_ms=round(elapsed_ms, 3),
    )


def _empty(text: str) -> SearchResponse:
    return SearchResponse(
        query=text,
        status=SearchStatus.EMPTY_QUERY,
        results=[],
        total_results=0,
        search_time_ms=0.0,
    )


@router.post("/directory", response_model=SearchResponse)
def search_directory(
    request: DirectorySearchRequest,
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(get_current_user),
):
    """
    Search the member directory.

    Hard filters narrow the candidates, then the query text ranks them.
    With neither text nor filters the response is ``empty_query``.

    Args:
        request: Directory search request

    Returns:
        SearchResponse: Ranked results with scores
    """
    is_valid, error = validate_search_text(request.text)
    if not is_valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)

    if not request.text.strip() and not request.filters.active():
        return _empty(request.text)

    try:
        query = SearchQuery(text=request.text, filters=request.filters, requester=current_user)
        return _run(directory_engine, db, query, SearchOptions(limit_results=request.limit))

    except Exception as e:
        logger.error(f"Failed to search directory: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to search directory: {str(e)}",
        )


@router.get("/alumni", response_model=SearchResponse)
def find_alumni(
    q: str = Query("", description="Search text"),
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(get_current_user),
):
    """
    Find alumni to message.

    Only alumni are considered and at most ``SEARCH_DEFAULT_LIMIT`` results
    are returned. A blank query returns ``empty_query``.

    Args:
        q: Search text

    Returns:
        SearchResponse: Ranked alumni with scores
    """
    is_valid, error = validate_search_text(q)
    if not is_valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)

    if not q.strip():
        return _empty(q)

    try:
        query = SearchQuery(
            text=q,
            filters=SearchFilters(user_type="alumni"),
            requester=current_user,
        )
        engine = alumni_finder(limit_results=settings.SEARCH_DEFAULT_LIMIT)
        return _run(engine, db, query, SearchOptions())

    except Exception as e:
        logger.error(f"Failed to search alumni: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to search alumni: {str(e)}",
        )
