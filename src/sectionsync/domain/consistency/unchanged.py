"""Report properties that are already consistent across sections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sectionsync.domain.model import PropertyKind

    from .graph import SectionGraph


@dataclass(frozen=True, slots=True, kw_only=True)
class UnchangedEntry:
    prop: PropertyKind
    sections: tuple[str, ...]
    value: str | None = None


def report_unchanged(graph: SectionGraph, *, threshold: float) -> tuple[UnchangedEntry, ...]:
    """One entry per matched value on strong, fully-consistent edges.

    An edge qualifies when its weight exceeds ``threshold`` and it carries no
    missing evidence. Entries are deduplicated on ``(kind, value)``; the first
    edge in graph order supplies the section pair.
    """

    seen: set[tuple[PropertyKind, str]] = set()
    entries: list[UnchangedEntry] = []
    for edge in graph.edges:
        if edge.weight <= threshold or edge.evidence.missing:
            continue
        for match in edge.evidence.matched:
            key = (edge.kind, match.value)
            if key in seen:
                continue
            seen.add(key)
            entries.append(
                UnchangedEntry(
                    prop=edge.kind,
                    sections=(edge.source, edge.target),
                    value=match.value,
                )
            )
    return tuple(entries)
