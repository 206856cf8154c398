"""Turn deltas into suggested insertions anchored in the target section."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from sectionsync.domain.model import PropertyKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sectionsync.config import EngineConfig
    from sectionsync.domain.model import Property, Section, Span

    from .delta import Delta
    from .graph import SectionGraph

log = logging.getLogger(__name__)


class UpdateType(StrEnum):
    INSERT = "insert"
    # Declared for a future correction path (e.g. conflicting dates); nothing emits it yet.
    REPLACE = "replace"


class AnchorStrategy(StrEnum):
    AFTER_LAST_LIST_ITEM = "after_last_list_item"
    AFTER_HEADING = "after_heading"
    BEGINNING_OF_SECTION = "beginning_of_section"


@dataclass(frozen=True, slots=True)
class Anchor:
    text: str
    strategy: AnchorStrategy


@dataclass(frozen=True, slots=True)
class EvidenceSource:
    section: str
    spans: tuple[Span, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class SuggestedUpdate:
    section: str
    type: UpdateType
    prop: PropertyKind
    anchor: str
    anchor_strategy: AnchorStrategy
    values: tuple[Property, ...]
    confidence: float
    evidence_from: EvidenceSource
    rationale: str


# Tried in order; the last match of the first pattern that matches wins.
LIST_ITEM_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"•\s+\w+"),
    re.compile(r"\d+\.\s+\w+"),
    re.compile(r"-\s+\w+"),
)
_SENTENCE_END_RE = re.compile(r"[.!?]")
_FALLBACK_ANCHOR_LENGTH = 50


def find_anchor(section: Section, kind: PropertyKind) -> Anchor:
    content = section.content

    if kind is PropertyKind.NAME_ROLE:
        for pattern in LIST_ITEM_PATTERNS:
            matches = pattern.findall(content)
            if matches:
                return Anchor(text=matches[-1], strategy=AnchorStrategy.AFTER_LAST_LIST_ITEM)

    for line in content.splitlines():
        if line.strip():
            return Anchor(text=line.strip(), strategy=AnchorStrategy.AFTER_HEADING)

    first_sentence = _SENTENCE_END_RE.split(content, maxsplit=1)[0]
    return Anchor(
        text=first_sentence or content[:_FALLBACK_ANCHOR_LENGTH],
        strategy=AnchorStrategy.BEGINNING_OF_SECTION,
    )


def blend_confidence(
    delta_confidence: float,
    values: Sequence[Property],
    *,
    config: EngineConfig,
) -> float:
    average = sum(prop.conf for prop in values) / len(values)
    return (
        delta_confidence * config.delta_confidence_weight
        + average * config.property_confidence_weight
    )


def update_rationale(delta: Delta, source: Section) -> str:
    count = len(delta.missing_values)
    noun = "property" if count == 1 else "properties"
    return f'Missing {count} {delta.kind} {noun} found in authoritative section "{source.title}"'


class SynthesizeUpdates(Protocol):
    """Build suggested insertions for deltas."""

    def __call__(
        self,
        deltas: Sequence[Delta],
        *,
        graph: SectionGraph,
        config: EngineConfig,
    ) -> tuple[SuggestedUpdate, ...]: ...


def synthesize_updates(
    deltas: Sequence[Delta],
    *,
    graph: SectionGraph,
    config: EngineConfig,
) -> tuple[SuggestedUpdate, ...]:
    updates: list[SuggestedUpdate] = []
    for delta in deltas:
        target = graph.section(delta.target_section)
        source = graph.section(delta.source_section)
        if target is None or source is None:
            log.warning(
                "Skipping delta with unknown section: target=%s, source=%s, kind=%s",
                delta.target_section,
                delta.source_section,
                delta.kind,
            )
            continue
        if not delta.missing_values:
            continue

        anchor = find_anchor(target, delta.kind)
        updates.append(
            SuggestedUpdate(
                section=target.id,
                type=UpdateType.INSERT,
                prop=delta.kind,
                anchor=anchor.text,
                anchor_strategy=anchor.strategy,
                values=delta.missing_values,
                confidence=blend_confidence(
                    delta.confidence, delta.missing_values, config=config
                ),
                evidence_from=EvidenceSource(
                    section=source.id,
                    spans=tuple(prop.span for prop in delta.missing_values),
                ),
                rationale=update_rationale(delta, source),
            )
        )
    return tuple(updates)
