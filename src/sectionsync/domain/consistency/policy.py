"""Section authority heuristics.

The policy scorer is a pluggable strategy. Keyword heuristics are tuned per
document domain and are swapped without touching the graph or delta stages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from sectionsync.domain.model import PropertyKind

if TYPE_CHECKING:
    from sectionsync.domain.model import Section


class PolicyScorer(Protocol):
    """Score how authoritative a section looks for a property kind."""

    @property
    def max_score(self) -> float: ...

    def score(self, section: Section, kind: PropertyKind) -> float: ...


@dataclass(frozen=True, slots=True, kw_only=True)
class KeywordPolicyScorer:
    """Default scorer driven by title/kind keywords (scores in ``[0, max_score]``)."""

    max_score: float = 5.0
    baseline: float = 2.0

    def score(self, section: Section, kind: PropertyKind) -> float:
        title = section.title.casefold()
        section_kind = (section.kind or "").casefold()
        match kind:
            case PropertyKind.NAME_ROLE:
                return self._name_role_score(title, section_kind)
            case PropertyKind.DATE:
                return self._date_score(title, section_kind)
            case PropertyKind.TERMS:
                return self._terms_score(title)

    def _name_role_score(self, title: str, section_kind: str) -> float:
        if ("designated" in title and "officer" in title) or "officer" in section_kind:
            return 5.0
        if "designated" in title or "designation" in title:
            return 4.0
        if "officer" in title or "parties" in title:
            return 4.0
        if "signature" in title:
            return 3.0
        return self.baseline

    def _date_score(self, title: str, section_kind: str) -> float:
        if "effective" in title or "term" in title or "term" in section_kind:
            return 4.0
        if "signature" in title:
            return 3.0
        return self.baseline

    def _terms_score(self, title: str) -> float:
        if "term" in title or "fee" in title or "payment" in title:
            return 4.0
        return self.baseline


def normalized_score(scorer: PolicyScorer, section: Section, kind: PropertyKind) -> float:
    """Policy score rescaled into ``[0, 1]``."""

    if scorer.max_score <= 0:
        return 0.0
    return min(max(scorer.score(section, kind) / scorer.max_score, 0.0), 1.0)
