"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class PropertyKind(StrEnum):
    """Kinds of structured facts extracted per section."""

    NAME_ROLE = "NameRole"
    DATE = "Date"
    TERMS = "Terms"


# Order in which kinds are consulted when picking the report's single authority.
PROPERTY_KIND_PRIORITY: tuple[PropertyKind, ...] = (
    PropertyKind.NAME_ROLE,
    PropertyKind.DATE,
    PropertyKind.TERMS,
)
