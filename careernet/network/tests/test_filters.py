import copy

import pytest

from careernet.network.filters import filter_alumni, filter_influencers, school_matches
from careernet.network.types import Contact


@pytest.fixture
def schoolmates() -> list[Contact]:
    return [
        Contact(id="1", name="Alice", school="MIT", graduation_year=2015),
        Contact(id="2", name="Bob", school="Stanford", graduation_year=2016),
        Contact(id="3", name="Charlie", school="Berkeley", graduation_year=2017),
        Contact(id="4", name="Diana", school=None, graduation_year=None),
    ]


@pytest.fixture
def leaders() -> list[Contact]:
    return [
        Contact(id="1", name="Alice", is_influencer=True, influence_score=85),
        Contact(id="2", name="Bob", is_industry_leader=True, influence_score=92),
        Contact(
            id="3",
            name="Charlie",
            is_influencer=True,
            is_industry_leader=True,
            influence_score=78,
        ),
        Contact(id="4", name="Diana", influence_score=30),
    ]


class TestFilterAlumni:
    def test_filters_contacts_from_same_school(self, schoolmates):
        alumni = filter_alumni(schoolmates, ["MIT", "Stanford"])

        assert [c.name for c in alumni] == ["Alice", "Bob"]

    def test_case_insensitive(self, schoolmates):
        alumni = filter_alumni(schoolmates, ["mit"])

        assert [c.name for c in alumni] == ["Alice"]

    def test_no_matches(self, schoolmates):
        assert filter_alumni(schoolmates, ["Harvard"]) == []

    def test_empty_query_matches_nothing(self, schoolmates):
        assert filter_alumni(schoolmates, []) == []

    def test_blank_query_entries_are_ignored(self, schoolmates):
        assert filter_alumni(schoolmates, ["", "   "]) == []

    def test_short_name_matches_full_name(self):
        contacts = [Contact(id="1", school="Stanford University")]

        assert filter_alumni(contacts, ["Stanford"]) == contacts

    def test_full_name_query_matches_short_record(self):
        contacts = [Contact(id="1", school="Stanford")]

        assert filter_alumni(contacts, ["Stanford University"]) == contacts

    def test_missing_school_is_always_excluded(self, schoolmates):
        alumni = filter_alumni(schoolmates, ["MIT", "Stanford", "Berkeley"])

        assert "Diana" not in [c.name for c in alumni]

    def test_input_not_mutated(self, schoolmates):
        before = copy.deepcopy(schoolmates)

        first = filter_alumni(schoolmates, ["mit"])
        second = filter_alumni(schoolmates, ["mit"])

        assert first == second
        assert schoolmates == before


@pytest.mark.parametrize(
    "contact_school,query,expected",
    [
        ("MIT", "mit", True),
        ("  Stanford   University ", "stanford university", True),
        ("Berkeley", "MIT", False),
        (None, "MIT", False),
        ("MIT", "", False),
    ],
)
def test_school_matches(contact_school, query, expected):
    assert school_matches(contact_school, query) is expected


class TestFilterInfluencers:
    def test_excludes_unflagged_contacts(self, leaders):
        influencers = filter_influencers(leaders, 50)

        assert len(influencers) == 3
        assert "Diana" not in [c.name for c in influencers]

    def test_respects_threshold(self, leaders):
        influencers = filter_influencers(leaders, 80)

        assert [c.name for c in influencers] == ["Bob", "Alice"]

    def test_sorted_by_score_descending(self, leaders):
        influencers = filter_influencers(leaders, 50)

        assert [c.influence_score for c in influencers] == [92, 85, 78]

    def test_threshold_above_max_returns_empty(self, leaders):
        assert filter_influencers(leaders, 95) == []

    def test_default_threshold_is_fifty(self):
        contacts = [
            Contact(id="1", is_influencer=True, influence_score=50),
            Contact(id="2", is_influencer=True, influence_score=49.9),
        ]

        assert [c.id for c in filter_influencers(contacts)] == ["1"]

    def test_missing_score_counts_as_zero(self):
        contacts = [Contact(id="1", is_industry_leader=True)]

        assert filter_influencers(contacts, 50) == []
        assert filter_influencers(contacts, 0) == contacts

    def test_unflagged_high_score_excluded(self):
        contacts = [Contact(id="1", influence_score=99)]

        assert filter_influencers(contacts, 0) == []

    def test_ties_keep_input_order(self):
        contacts = [
            Contact(id="a", is_influencer=True, influence_score=70),
            Contact(id="b", is_industry_leader=True, influence_score=90),
            Contact(id="c", is_influencer=True, influence_score=70),
        ]

        assert [c.id for c in filter_influencers(contacts)] == ["b", "a", "c"]

    def test_input_not_mutated(self, leaders):
        before = copy.deepcopy(leaders)

        assert filter_influencers(leaders) == filter_influencers(leaders)
        assert leaders == before
