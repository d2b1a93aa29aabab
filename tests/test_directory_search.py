"""Directory search engine tests."""

import copy

from alumni_hub.schemas.search import SearchFilters, SearchOptions, SearchQuery
from alumni_hub.services.directory_search import (
    DirectorySearchEngine,
    alumni_finder,
    apply_filters,
    rank,
    search,
)
from alumni_hub.services.relevance import score
from conftest import make_person


def ids(people):
    return [person.id for person in people]


def test_single_name_match(requester):
    people = [make_person("u1", "Jane Smith", major="Finance")]
    results = rank(people, SearchQuery(text="jane", requester=requester))

    assert [(r.person.id, r.score) for r in results] == [("u1", 10)]


def test_zero_score_is_excluded_with_text(requester):
    people = [make_person("u1", "Jane Smith", major="Finance")]
    assert search(people, SearchQuery(text="xyz", requester=requester)) == []


def test_bonus_only_candidate_kept_with_empty_text():
    requester = make_person("u0", major="Computer Science")
    people = [make_person("u1", major="Computer Science"), make_person("u2", major="Art")]

    results = rank(people, SearchQuery(text="", requester=requester))

    assert [(r.person.id, r.score) for r in results] == [("u1", 3), ("u2", 0)]


def test_ties_keep_collection_order(requester):
    people = [make_person(f"p{i}", major="Economics" if i in (3, 7) else "Art") for i in range(10)]

    results = search(people, SearchQuery(text="economics", requester=requester))

    assert ids(results) == ["p3", "p7"]


def test_user_type_filter(directory, requester):
    query = SearchQuery(text="", filters=SearchFilters(user_type="alumni"), requester=requester)
    results = search(directory, query)

    assert ids(results) == ["a1", "a2"]
    assert all(person.user_type.value == "alumni" for person in results)


def test_filter_applies_regardless_of_text_score(directory, requester):
    query = SearchQuery(text="python", filters=SearchFilters(user_type="alumni"), requester=requester)
    assert ids(search(directory, query)) == ["a2"]


def test_cap_returns_top_results(requester):
    people = [make_person(f"p{i:02d}", company="Acme") for i in range(15)]
    people[12] = make_person("p12", "Acme Fan", company="Acme")

    results = search(people, SearchQuery(text="acme", requester=requester), SearchOptions(limit_results=10))

    assert len(results) == 10
    assert results[0].id == "p12"
    assert ids(results[1:]) == [f"p{i:02d}" for i in range(9)]


def test_cap_larger_than_matches(directory, requester):
    results = search(directory, SearchQuery(text="python", requester=requester), SearchOptions(limit_results=10))
    assert len(results) == 2


def test_no_cap_by_default(requester):
    people = [make_person(f"p{i}", company="Acme") for i in range(25)]
    assert len(search(people, SearchQuery(text="acme", requester=requester))) == 25


def test_requester_is_never_returned(directory):
    me = directory[1]
    results = search(directory, SearchQuery(text="", requester=me))

    assert me.id not in ids(results)
    assert len(results) == len(directory) - 1


def test_results_are_in_descending_score_order(directory):
    requester = make_person("u0", major="Computer Science", graduation_year=2019, user_type="alumni")
    query = SearchQuery(text="science", requester=requester)

    scores = [r.score for r in rank(directory, query)]

    assert scores == sorted(scores, reverse=True)
    assert all(s > 0 for s in scores)


def test_returned_scores_match_scorer(directory, requester):
    query = SearchQuery(text="computer", requester=requester)
    for result in rank(directory, query):
        assert result.score == score(query, result.person)


def test_skills_filter_is_case_insensitive_substring(directory, requester):
    query = SearchQuery(text="", filters=SearchFilters(skills="PYTH"), requester=requester)
    assert ids(search(directory, query)) == ["a2", "s1"]


def test_exact_filters_compare_whole_values(directory, requester):
    query = SearchQuery(text="", filters=SearchFilters(major="Computer"), requester=requester)
    assert search(directory, query) == []


def test_graduation_year_filter_accepts_numeric_strings(directory, requester):
    query = SearchQuery(text="", filters=SearchFilters(graduation_year="2018"), requester=requester)
    assert ids(search(directory, query)) == ["a2"]


def test_non_numeric_graduation_year_matches_nobody(directory, requester):
    query = SearchQuery(text="", filters=SearchFilters(graduation_year="soon"), requester=requester)
    assert search(directory, query) == []


def test_blank_filter_values_are_ignored(directory, requester):
    query = SearchQuery(text="", filters=SearchFilters(college="", company=None), requester=requester)
    assert len(search(directory, query)) == len(directory)


def test_apply_filters_preserves_order(directory):
    assert ids(apply_filters(directory, {"major": "Computer Science"})) == ["a2", "s1"]


def test_empty_input_gives_empty_result(requester):
    assert search([], SearchQuery(text="anything", requester=requester)) == []


def test_search_is_idempotent_and_does_not_mutate(directory, requester):
    snapshot = copy.deepcopy(directory)
    query = SearchQuery(text="computer", filters=SearchFilters(skills="python"), requester=requester)

    first = rank(directory, query)
    second = rank(directory, query)

    assert first == second
    assert directory == snapshot


def test_options_override_engine_default(requester):
    people = [make_person(f"p{i}", company="Acme") for i in range(5)]
    engine = DirectorySearchEngine(limit_results=2)
    query = SearchQuery(text="acme", requester=requester)

    assert len(engine.search(people, query)) == 2
    assert len(engine.search(people, query, SearchOptions(limit_results=4))) == 4


def test_alumni_finder_caps_at_ten(requester):
    people = [make_person(f"p{i}", user_type="alumni", company="Acme") for i in range(15)]
    query = SearchQuery(text="acme", filters=SearchFilters(user_type="alumni"), requester=requester)

    assert len(alumni_finder().search(people, query)) == 10


def test_alumni_finder_ignores_email(requester):
    people = [make_person("p1", email="acme@corp.com")]
    query = SearchQuery(text="acme", requester=requester)

    assert search(people, query) != []
    assert alumni_finder().search(people, query) == []


def test_similarity_bonuses_do_not_satisfy_text_floor():
    requester = make_person("u0", user_type="alumni", graduation_year=2018, major="Finance")
    people = [make_person("u1", "Jane Smith", user_type="alumni", graduation_year=2019, major="Finance")]

    assert rank(people, SearchQuery(text="xyz", requester=requester)) == []


def test_similarity_bonuses_reorder_text_matches():
    requester = make_person("u0", user_type="alumni", graduation_year=2018)
    people = [
        make_person("u1", company="Acme", user_type="student"),
        make_person("u2", company="Acme", user_type="alumni", graduation_year=2019),
        make_person("u3", company="Globex", user_type="alumni", graduation_year=2018),
    ]

    results = rank(people, SearchQuery(text="acme", requester=requester))

    assert [(r.person.id, r.score) for r in results] == [("u2", 6 + 2 + 1), ("u1", 6)]
