"""
Tests for QueryState parsing, serialisation and additive merges.
"""

import itertools

import pytest

from directory.query_state import (
    QUERY_KEYS,
    QueryState,
    cleared_mapping,
    merge_update,
    parse_query,
    parse_specialties,
    serialize_fields,
    serialize_query,
)


VALID_STATES = [
    QueryState(),
    QueryState(search="an"),
    QueryState(mode="video"),
    QueryState(mode="in-clinic", specialties=("Cardio", "Derm")),
    QueryState(sort="fees", sort_order="desc"),
    QueryState(search="Dr. Ö", mode="video", specialties=("Dentist",), sort="experience", sort_order="asc"),
]

# One new value per typed field, used for the additive-merge property
FIELD_UPDATES = {
    'search': "rao",
    'mode': "in-clinic",
    'specialties': ("Surgeon",),
    'sort': "experience",
    'sort_order': "desc",
}


class TestParse:
    """Parsing raw store contents"""

    def test_empty_store_parses_to_defaults(self):
        state = parse_query({})
        assert state == QueryState()
        assert state.is_empty
        assert state.sort_order == "asc"

    def test_recognised_keys(self):
        state = parse_query({
            'search': "an",
            'mode': "video",
            'specialties': "Cardio,Derm",
            'sort': "fees",
            'sortOrder': "desc",
        })
        assert state == QueryState("an", "video", ("Cardio", "Derm"), "fees", "desc")

    @pytest.mark.parametrize("key,value,field,expected", [
        ('mode', "phone", 'mode', ""),
        ('mode', "Video", 'mode', ""),
        ('sort', "rating", 'sort', ""),
        ('sortOrder', "sideways", 'sort_order', "asc"),
    ])
    def test_unknown_values_normalise_to_empty(self, key, value, field, expected):
        assert getattr(parse_query({key: value}), field) == expected

    @pytest.mark.parametrize("value,expected", [
        ("", ()),
        (",", ()),
        (",,,", ()),
        ("Cardio,", ("Cardio",)),
        (",Cardio", ("Cardio",)),
        ("Cardio,,Derm", ("Cardio", "Derm")),
        ("Cardio,Derm,Cardio", ("Cardio", "Derm")),
    ])
    def test_specialties_drop_empty_tokens(self, value, expected):
        assert parse_specialties(value) == expected
        assert parse_query({'specialties': value}).specialties == expected

    def test_multi_valued_entries_use_first_value(self):
        state = parse_query({'mode': ["video", "in-clinic"], 'sort': []})
        assert state.mode == "video"
        assert state.sort == ""

    def test_none_and_non_string_values(self):
        state = parse_query({'search': None, 'mode': 5})
        assert state.search == ""
        assert state.mode == ""

    def test_foreign_keys_are_ignored(self):
        assert parse_query({'utm_source': "mail", 'page': "2"}) == QueryState()


class TestSerialize:
    """Serialising typed state"""

    @pytest.mark.parametrize("state", VALID_STATES)
    def test_round_trip_is_a_fixed_point(self, state):
        assert parse_query(serialize_query(state)) == state
        assert serialize_query(parse_query(serialize_query(state))) == serialize_query(state)

    def test_emits_every_recognised_key(self):
        assert set(serialize_query(QueryState())) == set(QUERY_KEYS)

    def test_specialties_are_comma_joined_in_selection_order(self):
        assert serialize_query(QueryState(specialties=("Derm", "Cardio")))['specialties'] == "Derm,Cardio"

    def test_partial_serialisation_only_names_given_fields(self):
        assert serialize_fields(mode="video") == {'mode': "video"}
        assert serialize_fields(sort_order="up") == {'sortOrder': "asc"}
        assert serialize_fields(specialties=["A", "", "A", "B"]) == {'specialties': "A,B"}

    def test_unknown_field_name_is_a_programming_error(self):
        with pytest.raises(TypeError):
            serialize_fields(colour="red")

    def test_updated_returns_new_state(self):
        state = QueryState(search="an")
        updated = state.updated(mode="video")
        assert updated == QueryState(search="an", mode="video")
        assert state == QueryState(search="an")


class TestMergeUpdate:
    """Additive merge over the full store contents"""

    def test_preserves_foreign_keys_verbatim(self):
        current = {'utm_source': "mail", 'tags': ["a", "b"], 'search': "an"}
        merged = merge_update(current, mode="video")
        assert merged['utm_source'] == "mail"
        assert merged['tags'] == ["a", "b"]
        assert merged['search'] == "an"
        assert merged['mode'] == "video"

    def test_does_not_mutate_current(self):
        current = {'search': "an"}
        merge_update(current, search="ben")
        assert current == {'search': "an"}

    @pytest.mark.parametrize("state", VALID_STATES)
    @pytest.mark.parametrize("updated_field,other_field", list(itertools.permutations(FIELD_UPDATES, 2)))
    def test_updating_one_field_never_changes_another(self, state, updated_field, other_field):
        current = {**serialize_query(state), 'foreign': "kept"}
        merged = merge_update(current, **{updated_field: FIELD_UPDATES[updated_field]})

        before = parse_query(current)
        after = parse_query(merged)
        assert getattr(after, other_field) == getattr(before, other_field)
        assert merged['foreign'] == "kept"

    def test_clear_all_is_empty(self):
        assert cleared_mapping() == {}
        assert parse_query(cleared_mapping()) == QueryState()
