"""Canonical equality and pairwise comparison of section properties.

Canonical keys per kind:
- NameRole: (normalized role, normalized person)
- Date: ISO string, compared exactly
- Terms: (name, value, unit), no unit conversion

Matching is greedy first-fit: each property on side A consumes the first
unused canonical match on side B. This is not an optimal assignment. Which
values end up "missing" depends on input order, and that order dependence is
part of the contract; do not replace it with bipartite matching without
treating it as a behaviour change.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from functools import singledispatch
from typing import TypeAlias

from sectionsync.domain.model import DateValue, NameRole, Property, Term

CanonicalKey: TypeAlias = "tuple[Hashable, ...]"

ROLE_ABBREVIATIONS: dict[str, str] = {
    "ceo": "chief executive officer",
    "cfo": "chief financial officer",
    "cto": "chief technology officer",
    "coo": "chief operating officer",
    "cio": "chief information officer",
    "cmo": "chief marketing officer",
    "ciso": "chief information security officer",
    "vp": "vice president",
    "svp": "senior vice president",
    "evp": "executive vice president",
    "gc": "general counsel",
}

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_role(role: str) -> str:
    """Case/whitespace-insensitive role with common abbreviations expanded."""

    normalized = _WHITESPACE_RE.sub(" ", role.strip()).casefold()
    return ROLE_ABBREVIATIONS.get(normalized, normalized)


def normalize_person(person: str) -> str:
    """Trim, drop punctuation, collapse whitespace and lower-case a person name."""

    text = unicodedata.normalize("NFKC", person).casefold()
    text = "".join(ch for ch in text if not unicodedata.category(ch).startswith("P"))
    return " ".join(text.split())


@singledispatch
def canonical_key(prop: object) -> CanonicalKey:
    raise TypeError(f"Unsupported property type: {type(prop).__name__}")


@canonical_key.register
def _(prop: NameRole) -> CanonicalKey:
    return ("name_role", normalize_role(prop.role), normalize_person(prop.person))


@canonical_key.register
def _(prop: DateValue) -> CanonicalKey:
    return ("date", prop.iso)


@canonical_key.register
def _(prop: Term) -> CanonicalKey:
    return ("term", prop.name, prop.value, prop.unit or "")


def canonical_match(left: Property, right: Property) -> bool:
    return canonical_key(left) == canonical_key(right)


@dataclass(frozen=True, slots=True)
class Comparison:
    """Outcome of comparing two property lists of the same kind.

    ``matched`` pairs properties from A with the B property they consumed.
    Together with the missing lists it partitions each side exactly once.
    """

    matched: tuple[tuple[Property, Property], ...]
    missing_in_b: tuple[Property, ...]
    missing_in_a: tuple[Property, ...]


def compare_properties(side_a: Sequence[Property], side_b: Sequence[Property]) -> Comparison:
    """Greedy first-fit comparison of two same-kind property lists."""

    b_keys = [canonical_key(prop) for prop in side_b]
    used_b: set[int] = set()
    matched: list[tuple[Property, Property]] = []
    missing_in_b: list[Property] = []

    for prop_a in side_a:
        key_a = canonical_key(prop_a)
        for index, key_b in enumerate(b_keys):
            if index in used_b or key_b != key_a:
                continue
            used_b.add(index)
            matched.append((prop_a, side_b[index]))
            break
        else:
            missing_in_b.append(prop_a)

    missing_in_a = [prop for index, prop in enumerate(side_b) if index not in used_b]
    return Comparison(
        matched=tuple(matched),
        missing_in_b=tuple(missing_in_b),
        missing_in_a=tuple(missing_in_a),
    )


def missing_from(
    reference: Sequence[Property],
    candidate: Sequence[Property],
) -> tuple[Property, ...]:
    """Properties of ``reference`` whose canonical value is absent from ``candidate``."""

    present = {canonical_key(prop) for prop in candidate}
    return tuple(prop for prop in reference if canonical_key(prop) not in present)
