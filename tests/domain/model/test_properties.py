from __future__ import annotations

import pytest

from sectionsync.domain.model import (
    EMPTY_INVENTORY,
    PropertyKind,
    display_value,
    format_term_value,
    inventory_for,
    property_count,
)
from tests.helpers.documents import date_value, make_inventory, name_role, term


def test_display_value_per_kind() -> None:
    assert display_value(name_role("CFO", "Mark Miller")) == "CFO: Mark Miller"
    assert display_value(date_value("2024-01-01", surface="January 1, 2024")) == "2024-01-01"
    assert display_value(term("Monthly Fee", 1500.0, "USD")) == "Monthly Fee: 1500 USD"
    assert display_value(term("Notice Period", "thirty days")) == "Notice Period: thirty days"


def test_display_value_rejects_unknown_types() -> None:
    with pytest.raises(TypeError):
        display_value("CFO: Mark Miller")


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1500, "1500"), (1500.0, "1500"), (2.5, "2.5"), ("net 30", "net 30")],
)
def test_format_term_value(value: int | float | str, expected: str) -> None:
    assert format_term_value(value) == expected


def test_properties_know_their_kind() -> None:
    assert name_role("CTO", "John Doe").kind is PropertyKind.NAME_ROLE
    assert date_value("2024-01-01").kind is PropertyKind.DATE
    assert term("Fee", 1).kind is PropertyKind.TERMS


def test_inventory_lists_by_kind() -> None:
    dates = (date_value("2024-01-01"), date_value("2025-01-01"))
    inventory = make_inventory(dates=dates)

    assert inventory.properties(PropertyKind.DATE) == dates
    assert inventory.count(PropertyKind.DATE) == 2
    assert inventory.count(PropertyKind.NAME_ROLE) == 0
    assert not inventory.is_empty
    assert EMPTY_INVENTORY.is_empty


def test_absent_sections_have_empty_inventories() -> None:
    inventories = {"a": make_inventory(terms=(term("Fee", 10, "USD"),))}

    assert inventory_for(inventories, "missing") is EMPTY_INVENTORY
    assert property_count(inventories, "a", PropertyKind.TERMS) == 1
    assert property_count(inventories, "missing", PropertyKind.TERMS) == 0
