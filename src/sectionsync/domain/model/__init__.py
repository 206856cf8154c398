"""Domain model for sections and their extracted properties."""

from __future__ import annotations

from .enums import PROPERTY_KIND_PRIORITY, PropertyKind
from .inventory import (
    EMPTY_INVENTORY,
    InventoryBySection,
    SectionInventory,
    inventory_for,
    property_count,
)
from .primitives import Section, Span
from .properties import DateValue, NameRole, Property, Term, display_value, format_term_value

__all__ = [
    "EMPTY_INVENTORY",
    "PROPERTY_KIND_PRIORITY",
    "DateValue",
    "InventoryBySection",
    "NameRole",
    "Property",
    "PropertyKind",
    "Section",
    "SectionInventory",
    "Span",
    "Term",
    "display_value",
    "format_term_value",
    "inventory_for",
    "property_count",
]
