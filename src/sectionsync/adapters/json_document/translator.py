"""Translate JSON document payloads into domain objects and reports back into JSON."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from logging import getLogger
from typing import TYPE_CHECKING

from sectionsync.domain.model import (
    DateValue,
    NameRole,
    Section,
    SectionInventory,
    Span,
    Term,
    display_value,
)

from .schema import (
    AnalysisPayload,
    AuthoritativePayload,
    ClusterPayload,
    DatePayload,
    DeltaPayload,
    DocumentPayload,
    EdgePayload,
    EvidenceFromPayload,
    EvidencePayload,
    GraphPayload,
    MatchedPayload,
    MissingPayload,
    NameRolePayload,
    SectionPayload,
    SpanPayload,
    SuggestedUpdatePayload,
    SuggestionsReportPayload,
    TermPayload,
    UnchangedPayload,
)

if TYPE_CHECKING:
    from pathlib import Path

    from sectionsync.domain.consistency import (
        AnalysisResult,
        GraphEdge,
        SuggestedUpdate,
        SuggestionsReport,
    )
    from sectionsync.domain.model import Property


log = getLogger(__name__)


class DocumentFormatError(ValueError):
    """Raised when a structurally valid payload describes an inconsistent document."""


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    sections: tuple[Section, ...]
    inventories: dict[str, SectionInventory]


def load_document(path: Path) -> ParsedDocument:
    """Read and validate a JSON document from ``path``."""

    payload = DocumentPayload.model_validate_json(path.read_text(encoding="utf-8"))
    return parse_document(payload)


def parse_document(payload: DocumentPayload) -> ParsedDocument:
    sections: list[Section] = []
    seen_ids: set[str] = set()
    for section_payload in payload.sections:
        if section_payload.id in seen_ids:
            raise DocumentFormatError(f"Duplicate section id: {section_payload.id}")
        seen_ids.add(section_payload.id)
        sections.append(_parse_section(section_payload))

    unknown = sorted(set(payload.inventory) - seen_ids)
    if unknown:
        raise DocumentFormatError(f"Inventory references unknown sections: {', '.join(unknown)}")

    inventories = {
        section_id: SectionInventory(
            name_roles=tuple(
                NameRole(
                    role=item.role,
                    person=item.person,
                    span=_parse_span(item.span),
                    conf=item.conf,
                )
                for item in inventory.name_roles
            ),
            dates=tuple(
                DateValue(
                    iso=item.iso,
                    surface=item.surface,
                    span=_parse_span(item.span),
                    conf=item.conf,
                )
                for item in inventory.dates
            ),
            terms=tuple(
                Term(
                    name=item.name,
                    value=item.value,
                    unit=item.unit,
                    qualifiers=item.qualifiers,
                    span=_parse_span(item.span),
                    conf=item.conf,
                )
                for item in inventory.terms
            ),
        )
        for section_id, inventory in payload.inventory.items()
    }
    log.debug("Parsed document: sections=%s, inventories=%s", len(sections), len(inventories))
    return ParsedDocument(sections=tuple(sections), inventories=inventories)


def _parse_section(payload: SectionPayload) -> Section:
    return Section(
        id=payload.id,
        title=payload.title,
        start_offset=payload.start_offset,
        end_offset=payload.end_offset,
        content=payload.content,
        kind=payload.kind,
    )


def _parse_span(payload: SpanPayload) -> Span:
    return Span(start=payload.start, end=payload.end)


def _span_payload(span: Span) -> SpanPayload:
    return SpanPayload(start=span.start, end=span.end)


@singledispatch
def property_payload(prop: object) -> NameRolePayload | DatePayload | TermPayload:
    raise TypeError(f"Unsupported property type: {type(prop).__name__}")


@property_payload.register
def _(prop: NameRole) -> NameRolePayload:
    return NameRolePayload(
        role=prop.role,
        person=prop.person,
        span=_span_payload(prop.span),
        conf=prop.conf,
    )


@property_payload.register
def _(prop: DateValue) -> DatePayload:
    return DatePayload(
        iso=prop.iso,
        surface=prop.surface,
        span=_span_payload(prop.span),
        conf=prop.conf,
    )


@property_payload.register
def _(prop: Term) -> TermPayload:
    return TermPayload(
        name=prop.name,
        value=prop.value,
        unit=prop.unit,
        qualifiers=prop.qualifiers,
        span=_span_payload(prop.span),
        conf=prop.conf,
    )


def report_payload(report: SuggestionsReport) -> SuggestionsReportPayload:
    return SuggestionsReportPayload(
        authoritative=AuthoritativePayload(
            section=report.authoritative.section,
            evidence_span=_span_payload(report.authoritative.evidence_span),
            rationale=report.authoritative.rationale,
        ),
        suggested_updates=[_update_payload(update) for update in report.suggested_updates],
        unchanged=[
            UnchangedPayload(
                prop=entry.prop.value,
                sections=list(entry.sections),
                value=entry.value,
            )
            for entry in report.unchanged
        ],
    )


def _update_payload(update: SuggestedUpdate) -> SuggestedUpdatePayload:
    return SuggestedUpdatePayload(
        section=update.section,
        type=update.type.value,
        prop=update.prop.value,
        anchor=update.anchor,
        anchor_strategy=update.anchor_strategy.value,
        values=[property_payload(prop) for prop in update.values],
        confidence=update.confidence,
        evidence_from=EvidenceFromPayload(
            section=update.evidence_from.section,
            spans=[_span_payload(span) for span in update.evidence_from.spans],
        ),
        rationale=update.rationale,
    )


def _edge_payload(edge: GraphEdge) -> EdgePayload:
    return EdgePayload(
        from_=edge.source,
        to=edge.target,
        prop=edge.kind.value,
        weight=edge.weight,
        evidence=EvidencePayload(
            matched=[
                MatchedPayload(
                    value=match.value,
                    spans=[_span_payload(span) for span in match.spans],
                )
                for match in edge.evidence.matched
            ],
            missing=[
                MissingPayload(value=missing.value, in_section=missing.in_section)
                for missing in edge.evidence.missing
            ],
        ),
    )


def _missing_values(values: tuple[Property, ...]) -> list[str]:
    return [display_value(prop) for prop in values]


def analysis_payload(result: AnalysisResult) -> AnalysisPayload:
    return AnalysisPayload(
        sections=[
            SectionPayload(
                id=section.id,
                title=section.title,
                start_offset=section.start_offset,
                end_offset=section.end_offset,
                content=section.content,
                kind=section.kind,
            )
            for section in result.graph.nodes
        ],
        graph=GraphPayload(
            nodes=[section.id for section in result.graph.nodes],
            edges=[_edge_payload(edge) for edge in result.graph.edges],
        ),
        clusters={
            kind.value: [
                ClusterPayload(members=list(cluster.members), reference=reference)
                for cluster, reference in zip(
                    clusters, result.references.get(kind, ()), strict=True
                )
            ]
            for kind, clusters in result.clusters.items()
        },
        authorities={kind.value: section_id for kind, section_id in result.authorities.items()},
        deltas=[
            DeltaPayload(
                target_section=delta.target_section,
                prop=delta.kind.value,
                missing_values=_missing_values(delta.missing_values),
                source_section=delta.source_section,
                confidence=delta.confidence,
                origin=delta.origin.value,
            )
            for delta in result.deltas
        ],
        suggestions=report_payload(result.report),
    )


def dump_report(report: SuggestionsReport, *, indent: int | None = 2) -> str:
    """Serialize a report with the public camelCase field names."""

    return report_payload(report).model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def dump_analysis(result: AnalysisResult, *, indent: int | None = 2) -> str:
    return analysis_payload(result).model_dump_json(
        by_alias=True, exclude_none=True, indent=indent
    )
