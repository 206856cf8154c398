"""Shared logging helpers for sectionsync."""

from __future__ import annotations

import logging

from .env import optional_env_choice

LOG_LEVEL_ENV_VAR = "SECTIONSYNC_LOG_LEVEL"
_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the
    level defaults to ``SECTIONSYNC_LOG_LEVEL`` (or INFO) and a terse format
    suitable for CLI output. Pass ``force=True`` to reconfigure during tests.
    """

    effective_level = level if level is not None else get_log_level()
    logging.basicConfig(
        level=effective_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def get_log_level() -> int:
    name = optional_env_choice(LOG_LEVEL_ENV_VAR, "INFO", choices=_LEVEL_NAMES)
    return logging.getLevelNamesMapping()[name]
