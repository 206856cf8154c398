from __future__ import annotations

from sectionsync.domain.consistency.comparator import (
    canonical_match,
    compare_properties,
    missing_from,
    normalize_person,
    normalize_role,
)
from tests.helpers.documents import date_value, name_role, term


def test_role_normalization_expands_abbreviations_and_ignores_case() -> None:
    assert normalize_role("  CTO ") == "chief technology officer"
    assert normalize_role("Chief   Technology Officer") == "chief technology officer"
    assert normalize_role("vp") == normalize_role("Vice President")


def test_person_normalization_strips_punctuation_and_whitespace() -> None:
    assert normalize_person("  John   Doe, Jr. ") == "john doe jr"
    assert normalize_person("Mark Miller.") == normalize_person("mark miller")


def test_name_role_requires_both_role_and_person_to_match() -> None:
    assert canonical_match(
        name_role("CFO", "Mark Miller"),
        name_role("chief financial officer", "MARK MILLER"),
    )
    assert not canonical_match(name_role("CFO", "Mark Miller"), name_role("CTO", "Mark Miller"))
    assert not canonical_match(name_role("CFO", "Mark Miller"), name_role("CFO", "Mark Millers"))


def test_dates_compare_iso_exactly() -> None:
    assert canonical_match(
        date_value("2024-01-01", surface="Jan 1, 2024"),
        date_value("2024-01-01"),
    )
    assert not canonical_match(date_value("2024-01-01"), date_value("2024-01-02"))


def test_terms_compare_name_value_and_unit_without_conversion() -> None:
    assert canonical_match(term("Fee", 100, "USD"), term("Fee", 100, "USD"))
    assert canonical_match(term("Fee", 100), term("Fee", 100, ""))
    assert not canonical_match(term("Fee", 100, "USD"), term("Fee", 100, "EUR"))
    assert not canonical_match(term("Fee", 1, "year"), term("Fee", 12, "month"))
    assert not canonical_match(term("Fee", 100), term("Fee", "100"))


def test_comparison_partitions_both_sides() -> None:
    side_a = (
        name_role("CTO", "John Doe"),
        name_role("CFO", "Mark Miller"),
        name_role("COO", "Ann Lee"),
    )
    side_b = (name_role("Chief Financial Officer", "Mark Miller"), name_role("GC", "Sam Poe"))

    comparison = compare_properties(side_a, side_b)

    assert [pair[0] for pair in comparison.matched] == [side_a[1]]
    assert [pair[1] for pair in comparison.matched] == [side_b[0]]
    assert comparison.missing_in_b == (side_a[0], side_a[2])
    assert comparison.missing_in_a == (side_b[1],)


def test_greedy_matching_consumes_each_b_property_once() -> None:
    duplicate = name_role("CTO", "John Doe")
    side_a = (duplicate, name_role("cto", "john doe"))
    side_b = (name_role("Chief Technology Officer", "John Doe."),)

    comparison = compare_properties(side_a, side_b)

    assert len(comparison.matched) == 1
    assert comparison.matched[0][0] is duplicate
    assert comparison.missing_in_b == (side_a[1],)
    assert comparison.missing_in_a == ()


def test_missing_from_uses_canonical_values_as_a_set() -> None:
    reference = (date_value("2024-01-01"), date_value("2024-06-30"), date_value("2024-01-01"))
    candidate = (date_value("2024-01-01"),)

    assert missing_from(reference, candidate) == (reference[1],)
    assert missing_from(reference, ()) == reference
