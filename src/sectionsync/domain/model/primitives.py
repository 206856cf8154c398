"""Value objects describing document sections and text spans."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Character offset range ``[start, end)`` in the source document."""

    start: int
    end: int


@dataclass(frozen=True, slots=True, kw_only=True)
class Section:
    """One section produced by the upstream section detector.

    Sections are identified by ``id``; everything else is descriptive payload
    used by policy scoring (``title``/``kind``) and edit anchoring (``content``).
    """

    id: str
    title: str
    start_offset: int
    end_offset: int
    content: str
    kind: str | None = None

    @property
    def span(self) -> Span:
        return Span(start=self.start_offset, end=self.end_offset)
