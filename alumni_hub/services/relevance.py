"""
Relevance Scoring

Additive point scoring of a candidate against free query text and the
requester's own profile. Weights are configuration: the directory and the
alumni finder share one scorer and differ only in the table they pass.
"""

from typing import Optional, Tuple, Union

from pydantic import BaseModel, Field

from alumni_hub.exceptions import SearchPreconditionError
from alumni_hub.schemas.person import Person
from alumni_hub.schemas.search import SearchQuery


class ScoringWeights(BaseModel):
    """Points awarded per matched signal; 0 disables a signal"""

    # Text signals (case-insensitive substring containment)
    name: int = Field(10, ge=0)
    major: int = Field(8, ge=0)
    skills: int = Field(7, ge=0)
    graduation_year: int = Field(7, ge=0)
    company: int = Field(6, ge=0)
    position: int = Field(5, ge=0)
    college: int = Field(4, ge=0)
    email: int = Field(4, ge=0)
    location: int = Field(3, ge=0)
    bio: int = Field(2, ge=0)

    # Requester similarity bonuses
    same_major: int = Field(3, ge=0)
    similar_graduation_year: int = Field(2, ge=0)
    same_user_type: int = Field(1, ge=0)

    graduation_year_window: int = Field(2, ge=0)

    class Config:
        frozen = True


DIRECTORY_WEIGHTS = ScoringWeights()

# The alumni finder does not match on email and values bio text higher
ALUMNI_FINDER_WEIGHTS = ScoringWeights(email=0, bio=3)

# Plain string attributes matched by substring, in table order
_TEXT_FIELDS = ("name", "major", "company", "position", "college", "email", "location", "bio")


def _contains(value: Optional[str], needle: str) -> bool:
    return bool(value) and needle in value.lower()


def text_points(text: str, candidate: Person, weights: ScoringWeights = DIRECTORY_WEIGHTS) -> int:
    """Points from the query text alone; 0 for blank text"""
    if not text or not text.strip():
        return 0

    points = 0
    needle = text.lower()
    for field in _TEXT_FIELDS:
        if _contains(getattr(candidate, field), needle):
            points += getattr(weights, field)

    if candidate.skills and any(needle in skill.lower() for skill in candidate.skills if skill):
        points += weights.skills

    # Years are matched against the raw text: "class of 2018" hits 2018
    if candidate.graduation_year is not None and str(candidate.graduation_year) in text:
        points += weights.graduation_year

    return points


def similarity_points(
    candidate: Person,
    requester: Person,
    weights: ScoringWeights = DIRECTORY_WEIGHTS,
) -> int:
    """
    Bonus points for resembling the requester.

    Raises:
        SearchPreconditionError: If no requester is supplied
    """
    if requester is None:
        raise SearchPreconditionError("A requester is required to score candidates")

    points = 0
    if requester.major and candidate.major == requester.major:
        points += weights.same_major

    if requester.graduation_year is not None and candidate.graduation_year is not None:
        if abs(candidate.graduation_year - requester.graduation_year) <= weights.graduation_year_window:
            points += weights.similar_graduation_year

    if requester.user_type is not None and candidate.user_type == requester.user_type:
        points += weights.same_user_type

    return points


def score_parts(
    text: str,
    candidate: Person,
    requester: Person,
    weights: ScoringWeights = DIRECTORY_WEIGHTS,
) -> Tuple[int, int]:
    """
    Score one candidate, keeping the two halves apart.

    Returns:
        tuple: (text points, similarity points)

    Raises:
        SearchPreconditionError: If no requester is supplied
    """
    bonus = similarity_points(candidate, requester, weights)
    return text_points(text, candidate, weights), bonus


def score_candidate(
    text: str,
    candidate: Person,
    requester: Person,
    weights: ScoringWeights = DIRECTORY_WEIGHTS,
) -> int:
    """
    Score one candidate.

    Blank text contributes nothing from the text signals; the requester
    similarity bonuses apply regardless of the text.

    Raises:
        SearchPreconditionError: If no requester is supplied
    """
    return sum(score_parts(text, candidate, requester, weights))


class RelevanceScorer:
    """Scores candidates with a fixed weight table"""

    def __init__(self, weights: Optional[ScoringWeights] = None):
        self.weights = weights or DIRECTORY_WEIGHTS

    @staticmethod
    def _unpack(query: Union[SearchQuery, str], requester: Optional[Person]) -> Tuple[str, Optional[Person]]:
        if isinstance(query, str):
            return query, requester
        return query.text, requester if requester is not None else query.requester

    def score_parts(
        self,
        query: Union[SearchQuery, str],
        candidate: Person,
        requester: Optional[Person] = None,
    ) -> Tuple[int, int]:
        """Text points and similarity points for ``candidate``"""
        text, requester = self._unpack(query, requester)
        return score_parts(text, candidate, requester, self.weights)

    def score(
        self,
        query: Union[SearchQuery, str],
        candidate: Person,
        requester: Optional[Person] = None,
    ) -> int:
        """
        Score ``candidate`` for ``query``.

        Args:
            query: A SearchQuery, or bare query text
            candidate: Person being ranked
            requester: Person searching; defaults to ``query.requester``

        Returns:
            int: Non-negative relevance score
        """
        return sum(self.score_parts(query, candidate, requester))


def score(
    query: Union[SearchQuery, str],
    candidate: Person,
    requester: Optional[Person] = None,
    weights: Optional[ScoringWeights] = None,
) -> int:
    """Score with the directory weight table unless ``weights`` is given"""
    return RelevanceScorer(weights).score(query, candidate, requester)
