"""Relevance scorer tests."""

import pytest

from alumni_hub.exceptions import SearchPreconditionError
from alumni_hub.services.relevance import (
    ALUMNI_FINDER_WEIGHTS,
    DIRECTORY_WEIGHTS,
    RelevanceScorer,
    ScoringWeights,
    score,
    score_candidate,
    score_parts,
)
from conftest import make_person


def test_name_match_only(requester):
    candidate = make_person("u1", "Jane Smith", major="Finance")
    assert score("jane", candidate, requester) == 10


def test_no_signal_scores_zero(requester):
    candidate = make_person("u1", "Jane Smith", major="Finance")
    assert score("xyz", candidate, requester) == 0


def test_matching_is_case_insensitive(requester):
    candidate = make_person("u1", "Jane Smith", company="Tech Corp")
    assert score("TECH", candidate, requester) == DIRECTORY_WEIGHTS.company


def test_signals_add_up(requester):
    candidate = make_person(
        "u1",
        "Sam Python",
        major="Python Studies",
        skills=["python"],
        bio="I write python",
    )
    # name + major + skills + bio
    assert score("python", candidate, requester) == 10 + 8 + 7 + 2


def test_skill_counts_once(requester):
    candidate = make_person("u1", skills=["Python", "Python scripting", "Data"])
    assert score("python", candidate, requester) == 7


def test_graduation_year_found_in_text(requester):
    candidate = make_person("u1", graduation_year=2018)
    assert score("class of 2018", candidate, requester) == 7
    assert score("2019", candidate, requester) == 0


def test_missing_attributes_never_match(requester):
    candidate = make_person("u1", "Jane")
    assert score("finance", candidate, requester) == 0


def test_same_major_bonus_with_empty_text():
    requester = make_person("u0", major="Computer Science")
    candidate = make_person("u1", major="Computer Science")
    assert score("", candidate, requester) == 3


def test_same_major_is_case_sensitive():
    requester = make_person("u0", major="Computer Science")
    candidate = make_person("u1", major="computer science")
    assert score("", candidate, requester) == 0


def test_similar_graduation_year_needs_both_years():
    requester = make_person("u0", graduation_year=2018)
    assert score("", make_person("u1", graduation_year=2020), requester) == 2
    assert score("", make_person("u2", graduation_year=2021), requester) == 0
    assert score("", make_person("u3"), requester) == 0


def test_same_user_type_bonus():
    requester = make_person("u0", user_type="alumni")
    assert score("", make_person("u1", user_type="alumni"), requester) == 1
    assert score("", make_person("u2", user_type="student"), requester) == 0


def test_alumni_finder_weights_skip_email_and_raise_bio(requester):
    candidate = make_person("u1", "Jane", email="mentor@university.edu", bio="Happy to mentor")
    assert score("mentor", candidate, requester) == 4 + 2
    assert score("mentor", candidate, requester, weights=ALUMNI_FINDER_WEIGHTS) == 3


def test_custom_weight_table(requester):
    weights = ScoringWeights(name=1)
    candidate = make_person("u1", "Jane")
    assert RelevanceScorer(weights).score("jane", candidate, requester) == 1


def test_scorer_reads_requester_from_query(requester):
    from alumni_hub.schemas.search import SearchQuery

    query = SearchQuery(text="jane", requester=requester)
    assert RelevanceScorer().score(query, make_person("u1", "Jane")) == 10


def test_missing_requester_is_a_precondition_error():
    with pytest.raises(SearchPreconditionError):
        score_candidate("jane", make_person("u1", "Jane"), None)


def test_negative_weights_are_rejected():
    with pytest.raises(ValueError):
        ScoringWeights(name=-1)


def test_score_parts_separates_text_from_similarity():
    requester = make_person("u0", user_type="alumni", graduation_year=2018)
    candidate = make_person("u1", "Jane", user_type="alumni", graduation_year=2019)

    assert score_parts("xyz", candidate, requester) == (0, 3)
    assert score_parts("jane", candidate, requester) == (10, 3)
    assert score("jane", candidate, requester) == 13
