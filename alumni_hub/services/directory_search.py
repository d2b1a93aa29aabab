"""
Directory Search Engine

Filters, scores, orders and truncates an in-memory snapshot of people.
Every call is independent: nothing is cached and inputs are never mutated.
"""

from typing import Any, Dict, Iterable, List, Optional

from alumni_hub.schemas.person import Person
from alumni_hub.schemas.search import ScoredResult, SearchOptions, SearchQuery
from alumni_hub.services.relevance import (
    ALUMNI_FINDER_WEIGHTS,
    RelevanceScorer,
    ScoringWeights,
)
from alumni_hub.utils.logger import get_logger

logger = get_logger(__name__)


def _matches_filter(person: Person, field: str, expected: Any) -> bool:
    """Hard constraint check for one filter"""
    if field == "skills":
        needle = str(expected).lower()
        return any(needle in skill.lower() for skill in person.skills or [] if skill)

    if field == "graduation_year":
        try:
            year = int(expected)
        except (TypeError, ValueError):
            # Non-numeric year filters match nobody
            return False
        return person.graduation_year == year

    if field == "user_type":
        actual = person.user_type.value if person.user_type is not None else None
        return actual == expected

    return getattr(person, field, None) == expected


def apply_filters(people: Iterable[Person], filters: Dict[str, Any]) -> List[Person]:
    """Keep people satisfying every active filter, preserving order"""
    return [
        person
        for person in people
        if all(_matches_filter(person, field, value) for field, value in filters.items())
    ]


class DirectorySearchEngine:
    """
    Ranked directory search.

    Args:
        scorer: Relevance scorer (directory weights by default)
        limit_results: Default result cap; None returns every match
    """

    def __init__(
        self,
        scorer: Optional[RelevanceScorer] = None,
        limit_results: Optional[int] = None,
    ):
        self.scorer = scorer or RelevanceScorer()
        self.limit_results = limit_results

    def rank(
        self,
        all_people: Iterable[Person],
        query: SearchQuery,
        options: Optional[SearchOptions] = None,
    ) -> List[ScoredResult]:
        """
        Run the full pipeline and keep the scores.

        Steps: self-exclusion, hard filters, scoring (with query text, a
        candidate must match it; similarity bonuses only reorder), stable
        sort on score, truncation.
        """
        limit = self.limit_results
        if options is not None and options.limit_results is not None:
            limit = options.limit_results

        requester_id = query.requester.id
        candidates = [person for person in all_people if person.id != requester_id]

        filters = query.filters.active()
        if filters:
            candidates = apply_filters(candidates, filters)

        has_text = bool(query.text.strip())
        scored = []
        for person in candidates:
            text_points, bonus = self.scorer.score_parts(query, person, query.requester)
            # With query text, only a text match qualifies; bonuses just reorder
            if has_text and text_points == 0:
                continue
            scored.append(ScoredResult(person=person, score=text_points + bonus))

        # sorted() is stable, so equal scores keep collection order
        ranked = sorted(scored, key=lambda result: result.score, reverse=True)

        if limit is not None:
            ranked = ranked[:limit]

        logger.debug(
            "Directory search ranked candidates",
            candidates=len(candidates),
            results=len(ranked),
            filters=list(filters),
            limit=limit,
        )
        return ranked

    def search(
        self,
        all_people: Iterable[Person],
        query: SearchQuery,
        options: Optional[SearchOptions] = None,
    ) -> List[Person]:
        """Ranked people only"""
        return [result.person for result in self.rank(all_people, query, options)]


def alumni_finder(limit_results: int = 10) -> DirectorySearchEngine:
    """Engine configured like the messaging alumni finder: capped, chat weights"""
    return DirectorySearchEngine(
        scorer=RelevanceScorer(ALUMNI_FINDER_WEIGHTS),
        limit_results=limit_results,
    )


def search(
    all_people: Iterable[Person],
    query: SearchQuery,
    options: Optional[SearchOptions] = None,
    weights: Optional[ScoringWeights] = None,
) -> List[Person]:
    """
    Search ``all_people`` for ``query``.

    Returns:
        List[Person]: Matches ordered by score descending, ties in input order
    """
    engine = DirectorySearchEngine(scorer=RelevanceScorer(weights))
    return engine.search(all_people, query, options)


def rank(
    all_people: Iterable[Person],
    query: SearchQuery,
    options: Optional[SearchOptions] = None,
    weights: Optional[ScoringWeights] = None,
) -> List[ScoredResult]:
    """Same as ``search`` but returns scores alongside people"""
    engine = DirectorySearchEngine(scorer=RelevanceScorer(weights))
    return engine.rank(all_people, query, options)
