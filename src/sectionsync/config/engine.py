"""Tunable weights and thresholds for the consistency engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from sectionsync.domain.model import PropertyKind

from .env import optional_env_float

UNCHANGED_THRESHOLD_ENV_VAR = "SECTIONSYNC_UNCHANGED_THRESHOLD"
FALLBACK_CONFIDENCE_ENV_VAR = "SECTIONSYNC_FALLBACK_CONFIDENCE"

DEFAULT_UNCHANGED_THRESHOLD = 0.85
DEFAULT_FALLBACK_CONFIDENCE = 0.75


@dataclass(frozen=True, slots=True)
class EdgeWeights:
    """Blend of match similarity and policy bonus for one property kind."""

    similarity: float
    policy: float


def _default_edge_weights() -> dict[PropertyKind, EdgeWeights]:
    return {
        PropertyKind.NAME_ROLE: EdgeWeights(similarity=0.7, policy=0.3),
        PropertyKind.DATE: EdgeWeights(similarity=0.8, policy=0.2),
        PropertyKind.TERMS: EdgeWeights(similarity=0.8, policy=0.2),
    }


@dataclass(frozen=True, slots=True, kw_only=True)
class EngineConfig:
    edge_weights: dict[PropertyKind, EdgeWeights] = field(default_factory=_default_edge_weights)
    authority_count_weight: float = 0.7
    authority_policy_weight: float = 0.3
    fallback_confidence: float = DEFAULT_FALLBACK_CONFIDENCE
    delta_confidence_weight: float = 0.6
    property_confidence_weight: float = 0.4
    unchanged_threshold: float = DEFAULT_UNCHANGED_THRESHOLD

    def weights_for(self, kind: PropertyKind) -> EdgeWeights:
        return self.edge_weights[kind]


def get_engine_config() -> EngineConfig:
    """Build the engine configuration, honouring environment overrides."""

    return EngineConfig(
        unchanged_threshold=optional_env_float(
            UNCHANGED_THRESHOLD_ENV_VAR, DEFAULT_UNCHANGED_THRESHOLD
        ),
        fallback_confidence=optional_env_float(
            FALLBACK_CONFIDENCE_ENV_VAR, DEFAULT_FALLBACK_CONFIDENCE
        ),
    )
