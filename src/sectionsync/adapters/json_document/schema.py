"""Pydantic models describing the JSON document and report payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _none_to_empty(value: object) -> object:
    return [] if value is None else value


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class DocumentBaseModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class SpanPayload(DocumentBaseModel):
    start: int = Field(ge=0)
    end: int = Field(ge=0)


class SectionPayload(DocumentBaseModel):
    id: str = Field(min_length=1)
    title: str = ""
    start_offset: int = Field(default=0, ge=0)
    end_offset: int = Field(default=0, ge=0)
    content: str = ""
    kind: str | None = None

    _normalize_kind = field_validator("kind", mode="before")(_blank_to_none)


class NameRolePayload(DocumentBaseModel):
    role: str
    person: str
    span: SpanPayload
    conf: float = Field(ge=0.0, le=1.0)


class DatePayload(DocumentBaseModel):
    iso: str
    surface: str = ""
    span: SpanPayload
    conf: float = Field(ge=0.0, le=1.0)


class TermPayload(DocumentBaseModel):
    name: str
    value: int | float | str
    unit: str | None = None
    qualifiers: str | None = None
    span: SpanPayload
    conf: float = Field(ge=0.0, le=1.0)

    _normalize_unit = field_validator("unit", "qualifiers", mode="before")(_blank_to_none)


class InventoryPayload(DocumentBaseModel):
    name_roles: list[NameRolePayload] = Field(
        default_factory=list["NameRolePayload"],
        alias="NameRole",
        validation_alias=AliasChoices("NameRole", "Name&Role", "name_roles"),
    )
    dates: list[DatePayload] = Field(
        default_factory=list["DatePayload"],
        alias="Date",
        validation_alias=AliasChoices("Date", "dates"),
    )
    terms: list[TermPayload] = Field(
        default_factory=list["TermPayload"],
        alias="Terms",
        validation_alias=AliasChoices("Terms", "terms"),
    )

    _normalize_lists = field_validator("name_roles", "dates", "terms", mode="before")(
        _none_to_empty
    )


class DocumentPayload(DocumentBaseModel):
    """Input document: detected sections plus extracted inventories."""

    sections: list[SectionPayload] = Field(default_factory=list["SectionPayload"])
    inventory: dict[str, InventoryPayload] = Field(default_factory=dict["str", "InventoryPayload"])

    _normalize_sections = field_validator("sections", mode="before")(_none_to_empty)


# Output payloads


PropKind = Literal["NameRole", "Date", "Terms"]


class AuthoritativePayload(DocumentBaseModel):
    section: str
    evidence_span: SpanPayload
    rationale: str


class EvidenceFromPayload(DocumentBaseModel):
    section: str
    spans: list[SpanPayload]


class SuggestedUpdatePayload(DocumentBaseModel):
    section: str
    type: Literal["insert", "replace"]
    prop: PropKind
    anchor: str
    anchor_strategy: str
    values: list[NameRolePayload | DatePayload | TermPayload]
    confidence: float
    evidence_from: EvidenceFromPayload
    rationale: str


class UnchangedPayload(DocumentBaseModel):
    prop: PropKind
    sections: list[str]
    value: str | None = None


class SuggestionsReportPayload(DocumentBaseModel):
    authoritative: AuthoritativePayload
    suggested_updates: list[SuggestedUpdatePayload]
    unchanged: list[UnchangedPayload]


class MatchedPayload(DocumentBaseModel):
    value: str
    spans: list[SpanPayload]


class MissingPayload(DocumentBaseModel):
    value: str
    in_section: str


class EvidencePayload(DocumentBaseModel):
    matched: list[MatchedPayload]
    missing: list[MissingPayload]


class EdgePayload(DocumentBaseModel):
    from_: str = Field(alias="from")
    to: str
    prop: PropKind
    weight: float
    evidence: EvidencePayload


class GraphPayload(DocumentBaseModel):
    nodes: list[str]
    edges: list[EdgePayload]


class ClusterPayload(DocumentBaseModel):
    members: list[str]
    reference: str | None = None


class DeltaPayload(DocumentBaseModel):
    target_section: str
    prop: PropKind
    missing_values: list[str]
    source_section: str
    confidence: float
    origin: Literal["cluster", "fallback"]


class AnalysisPayload(DocumentBaseModel):
    """Full analysis dump: graph, clusters, deltas and the report."""

    sections: list[SectionPayload]
    graph: GraphPayload
    clusters: dict[PropKind, list[ClusterPayload]]
    authorities: dict[PropKind, str]
    deltas: list[DeltaPayload]
    suggestions: SuggestionsReportPayload
