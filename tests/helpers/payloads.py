"""Raw JSON-shaped documents for adapter, app and CLI tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def _span(start: int, end: int) -> dict[str, int]:
    return {"start": start, "end": end}


def officer_document() -> dict[str, object]:
    """Section 3 lists three officers, section 13 repeats two of them."""

    return {
        "sections": [
            {
                "id": "3",
                "title": "Designated Officers",
                "startOffset": 0,
                "endOffset": 120,
                "content": "Designated Officers\n• CTO John Doe\n• CFO Mark Miller\n"
                "• Associate Brian Brown",
                "kind": "Officers",
            },
            {
                "id": "13",
                "title": "Implementation",
                "startOffset": 500,
                "endOffset": 620,
                "content": "Key personnel:\n- CTO: John Doe\n- CFO: Mark Miller",
            },
            {
                "id": "20",
                "title": "Payment Terms",
                "startOffset": 800,
                "endOffset": 900,
                "content": "Fees are payable monthly.",
            },
        ],
        "inventory": {
            "3": {
                "Name&Role": [
                    {"role": "CTO", "person": "John Doe", "span": _span(20, 32), "conf": 0.95},
                    {"role": "CFO", "person": "Mark Miller", "span": _span(35, 50), "conf": 0.95},
                    {
                        "role": "Associate",
                        "person": "Brian Brown",
                        "span": _span(53, 75),
                        "conf": 0.9,
                    },
                ],
                "Date": [
                    {
                        "iso": "2024-01-01",
                        "surface": "January 1, 2024",
                        "span": _span(80, 95),
                        "conf": 0.99,
                    }
                ],
            },
            "13": {
                "NameRole": [
                    {"role": "CTO", "person": "John Doe", "span": _span(520, 532), "conf": 0.95},
                    {
                        "role": "Chief Financial Officer",
                        "person": "Mark Miller.",
                        "span": _span(535, 560),
                        "conf": 0.92,
                    },
                ],
                "Date": [],
            },
            "20": {
                "Terms": [
                    {
                        "name": "Monthly Fee",
                        "value": 1500,
                        "unit": "USD",
                        "span": _span(810, 830),
                        "conf": 0.8,
                    }
                ]
            },
        },
    }


def write_document(path: Path, document: dict[str, object]) -> Path:
    path.write_text(json.dumps(document), encoding="utf-8")
    return path
