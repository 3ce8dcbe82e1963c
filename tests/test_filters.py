"""Tests for filter parsing and application."""
import pytest

from string_analyzer.errors import FilterValidationError
from string_analyzer.services.filters import StringFilters, apply_filters, matches, parse_filters


class TestParseFilters:
    def test_all_filters(self):
        filters = parse_filters({
            "is_palindrome": "false",
            "min_length": "2",
            "max_length": "10",
            "word_count": "0",
            "contains_character": "é",
        })

        assert filters == StringFilters(
            is_palindrome=False,
            min_length=2,
            max_length=10,
            word_count=0,
            contains_character="é",
        )

    def test_missing_values_are_skipped(self):
        filters = parse_filters({"is_palindrome": None, "min_length": "3"})
        assert filters.as_dict() == {"min_length": 3}

    def test_unknown_params_ignored(self):
        assert parse_filters({"colour": "blue"}).is_empty()

    @pytest.mark.parametrize("raw", ["True", "1", "yes", ""])
    def test_bool_must_be_literal(self, raw):
        with pytest.raises(FilterValidationError) as exc_info:
            parse_filters({"is_palindrome": raw})
        assert exc_info.value.parameter == "is_palindrome"

    @pytest.mark.parametrize("raw", ["-1", "abc", "3.5", " 3", "+3", "1_000", "٣", ""])
    @pytest.mark.parametrize("name", ["min_length", "max_length", "word_count"])
    def test_counts_must_be_plain_integers(self, name, raw):
        with pytest.raises(FilterValidationError) as exc_info:
            parse_filters({name: raw})
        assert exc_info.value.parameter == name

    @pytest.mark.parametrize("raw", ["", "ab"])
    def test_contains_character_must_be_single(self, raw):
        with pytest.raises(FilterValidationError):
            parse_filters({"contains_character": raw})


class TestApplyFilters:
    def test_no_filters_returns_everything(self, populated_store):
        entries = populated_store.list_all()
        assert apply_filters(entries, None) == entries
        assert apply_filters(entries, StringFilters()) == entries

    def test_length_bounds_inclusive(self, populated_store):
        filters = StringFilters(min_length=4, max_length=7)
        values = {e.value for e in apply_filters(populated_store.list_all(), filters)}
        assert values == {"racecar", "hello", "noon"}

    def test_word_count(self, populated_store):
        filters = StringFilters(word_count=2)
        values = [e.value for e in apply_filters(populated_store.list_all(), filters)]
        assert values == ["level up"]

    def test_contains_character_case_sensitive(self, populated_store):
        entries = populated_store.list_all()

        upper = {e.value for e in apply_filters(entries, StringFilters(contains_character="A"))}
        lower = {e.value for e in apply_filters(entries, StringFilters(contains_character="a"))}

        assert upper == {"A man a plan"}
        assert lower == {"racecar", "A man a plan"}

    def test_all_predicates_must_hold(self, populated_store):
        entry = populated_store.get_by_value("racecar")

        assert matches(entry, StringFilters(is_palindrome=True, contains_character="r"))
        assert not matches(entry, StringFilters(is_palindrome=True, word_count=2))

    def test_no_match(self, populated_store):
        filters = StringFilters(min_length=100)
        assert apply_filters(populated_store.list_all(), filters) == []
