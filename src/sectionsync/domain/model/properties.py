"""Typed properties extracted from sections.

Confidence values (``conf``) come from the upstream extractor and are treated
as trusted input in ``[0, 1]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import TYPE_CHECKING, TypeAlias

from .enums import PropertyKind

if TYPE_CHECKING:
    from .primitives import Span


@dataclass(frozen=True, slots=True, kw_only=True)
class NameRole:
    role: str
    person: str
    span: Span
    conf: float

    @property
    def kind(self) -> PropertyKind:
        return PropertyKind.NAME_ROLE


@dataclass(frozen=True, slots=True, kw_only=True)
class DateValue:
    iso: str
    surface: str
    span: Span
    conf: float

    @property
    def kind(self) -> PropertyKind:
        return PropertyKind.DATE


@dataclass(frozen=True, slots=True, kw_only=True)
class Term:
    name: str
    value: int | float | str
    span: Span
    conf: float
    unit: str | None = None
    qualifiers: str | None = None

    @property
    def kind(self) -> PropertyKind:
        return PropertyKind.TERMS


Property: TypeAlias = "NameRole | DateValue | Term"


@singledispatch
def display_value(prop: object) -> str:
    """Human-readable rendering used in edge evidence and the unchanged list."""

    raise TypeError(f"Unsupported property type: {type(prop).__name__}")


@display_value.register
def _(prop: NameRole) -> str:
    return f"{prop.role}: {prop.person}"


@display_value.register
def _(prop: DateValue) -> str:
    return prop.iso


@display_value.register
def _(prop: Term) -> str:
    rendered = f"{prop.name}: {format_term_value(prop.value)}"
    if prop.unit:
        rendered = f"{rendered} {prop.unit}"
    return rendered


def format_term_value(value: int | float | str) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
