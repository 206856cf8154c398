"""Suggestions report assembly."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sectionsync.domain.model import PROPERTY_KIND_PRIORITY, Span, inventory_for

if TYPE_CHECKING:
    from sectionsync.domain.model import InventoryBySection

    from .graph import SectionGraph
    from .synthesis import SuggestedUpdate
    from .unchanged import UnchangedEntry

UNKNOWN_SECTION = "unknown"


@dataclass(frozen=True, slots=True)
class AuthoritativeSection:
    section: str
    evidence_span: Span
    rationale: str


@dataclass(frozen=True, slots=True)
class SuggestionsReport:
    authoritative: AuthoritativeSection
    suggested_updates: tuple[SuggestedUpdate, ...]
    unchanged: tuple[UnchangedEntry, ...]


def authoritative_entry(
    section_id: str | None,
    *,
    graph: SectionGraph,
    inventories: InventoryBySection,
) -> AuthoritativeSection:
    """Describe the authoritative section, falling back to the first section.

    With no sections at all the entry names :data:`UNKNOWN_SECTION`.
    """

    if section_id is None:
        section_id = graph.nodes[0].id if graph.nodes else UNKNOWN_SECTION
    section = graph.section(section_id)
    return AuthoritativeSection(
        section=section_id,
        evidence_span=section.span if section is not None else Span(0, 0),
        rationale=authority_rationale(section_id, graph=graph, inventories=inventories),
    )


def authority_rationale(
    section_id: str,
    *,
    graph: SectionGraph,
    inventories: InventoryBySection,
) -> str:
    section = graph.section(section_id)
    if section is None:
        return "Selected as authoritative section"

    inventory = inventory_for(inventories, section_id)
    counts = ", ".join(
        f"{inventory.count(kind)} {kind}"
        for kind in PROPERTY_KIND_PRIORITY
        if inventory.count(kind) > 0
    )
    if not counts:
        return f'Section "{section.title}" selected as authoritative'

    title = section.title.casefold()
    suffix = ""
    if "designated" in title and "officer" in title:
        suffix = " (designated officer section)"
    elif "officer" in title:
        suffix = " (officer section)"
    return f'Section "{section.title}" has highest property count ({counts}){suffix}'
