from __future__ import annotations

import logging

import pytest

from sectionsync.config import (
    EdgeWeights,
    EngineConfig,
    InvalidConfigurationError,
    get_engine_config,
    get_log_level,
)
from sectionsync.domain.model import PropertyKind

ENV_VARS = (
    "SECTIONSYNC_UNCHANGED_THRESHOLD",
    "SECTIONSYNC_FALLBACK_CONFIDENCE",
    "SECTIONSYNC_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = get_engine_config()

    assert config == EngineConfig()
    assert config.unchanged_threshold == 0.85
    assert config.fallback_confidence == 0.75
    assert config.weights_for(PropertyKind.NAME_ROLE) == EdgeWeights(similarity=0.7, policy=0.3)
    assert config.weights_for(PropertyKind.TERMS) == EdgeWeights(similarity=0.8, policy=0.2)


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SECTIONSYNC_UNCHANGED_THRESHOLD", "0.9")
    monkeypatch.setenv("SECTIONSYNC_FALLBACK_CONFIDENCE", " 0.5 ")

    config = get_engine_config()

    assert config.unchanged_threshold == 0.9
    assert config.fallback_confidence == 0.5


def test_blank_values_use_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SECTIONSYNC_UNCHANGED_THRESHOLD", "   ")

    assert get_engine_config().unchanged_threshold == 0.85


@pytest.mark.parametrize("raw", ["high", "1.5", "-0.1"])
def test_invalid_overrides_raise(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("SECTIONSYNC_FALLBACK_CONFIDENCE", raw)

    with pytest.raises(InvalidConfigurationError) as exc:
        get_engine_config()

    assert "SECTIONSYNC_FALLBACK_CONFIDENCE" in str(exc.value)


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_log_level() == logging.INFO

    monkeypatch.setenv("SECTIONSYNC_LOG_LEVEL", "debug")
    assert get_log_level() == logging.DEBUG


def test_unknown_log_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SECTIONSYNC_LOG_LEVEL", "verbose")

    with pytest.raises(InvalidConfigurationError):
        get_log_level()
