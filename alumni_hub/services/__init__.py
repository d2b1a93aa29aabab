"""Service layer: record store, relevance scoring and directory search"""

from alumni_hub.services.directory_search import DirectorySearchEngine, alumni_finder, rank, search
from alumni_hub.services.relevance import (
    ALUMNI_FINDER_WEIGHTS,
    DIRECTORY_WEIGHTS,
    RelevanceScorer,
    ScoringWeights,
    score,
    score_candidate,
    score_parts,
)

__all__ = [
    "DirectorySearchEngine",
    "alumni_finder",
    "rank",
    "search",
    "ALUMNI_FINDER_WEIGHTS",
    "DIRECTORY_WEIGHTS",
    "RelevanceScorer",
    "ScoringWeights",
    "score",
    "score_candidate",
    "score_parts",
]
