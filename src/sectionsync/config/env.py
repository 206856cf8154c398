"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import InvalidConfigurationError


def optional_env_float(
    name: str,
    default: float,
    *,
    minimum: float = 0.0,
    maximum: float = 1.0,
) -> float:
    """Return a float override from the environment, or ``default`` if unset/blank."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise InvalidConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if not minimum <= value <= maximum:
        raise InvalidConfigurationError(
            f"{name} must be between {minimum} and {maximum}, got {value}"
        )
    return value


def optional_env_choice(name: str, default: str, *, choices: tuple[str, ...]) -> str:
    """Return a case-insensitive choice from the environment, or ``default``."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().upper()
    if value not in choices:
        allowed = ", ".join(choices)
        raise InvalidConfigurationError(f"{name} must be one of {allowed}, got {raw!r}")
    return value
