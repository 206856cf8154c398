from __future__ import annotations

from dataclasses import dataclass

import pytest

from sectionsync.domain.consistency.policy import KeywordPolicyScorer, normalized_score
from sectionsync.domain.model import PropertyKind, Section
from tests.helpers.documents import make_section


@pytest.mark.parametrize(
    ("title", "kind", "expected"),
    [
        ("Designated Officers", None, 5.0),
        ("Responsible Persons", "Officers", 5.0),
        ("Designation of Representatives", None, 4.0),
        ("Officers", None, 4.0),
        ("Parties", None, 4.0),
        ("Signature Page", None, 3.0),
        ("Introduction", None, 2.0),
    ],
)
def test_name_role_scores(title: str, kind: str | None, expected: float) -> None:
    scorer = KeywordPolicyScorer()

    assert scorer.score(make_section("s", title, kind=kind), PropertyKind.NAME_ROLE) == expected


def test_designated_officer_heading_outranks_generic_paragraph() -> None:
    scorer = KeywordPolicyScorer()
    officer = make_section("a", "1.1 Designated Officers")
    paragraph = make_section("b", "Background")

    assert scorer.score(officer, PropertyKind.NAME_ROLE) > scorer.score(
        paragraph, PropertyKind.NAME_ROLE
    )


def test_date_and_terms_keywords() -> None:
    scorer = KeywordPolicyScorer()

    assert scorer.score(make_section("a", "Effective Date"), PropertyKind.DATE) == 4.0
    assert scorer.score(make_section("a", "Scope", kind="term"), PropertyKind.DATE) == 4.0
    assert scorer.score(make_section("a", "Scope"), PropertyKind.DATE) == 2.0
    assert scorer.score(make_section("a", "Fees and Payment"), PropertyKind.TERMS) == 4.0
    assert scorer.score(make_section("a", "Scope"), PropertyKind.TERMS) == 2.0


def test_normalized_score_is_clamped_to_unit_interval() -> None:
    @dataclass(frozen=True)
    class Overeager:
        max_score: float = 1.0

        def score(self, section: Section, kind: PropertyKind) -> float:
            return 7.5

    section = make_section("a", "Anything")

    assert normalized_score(Overeager(), section, PropertyKind.DATE) == 1.0
    assert normalized_score(KeywordPolicyScorer(), section, PropertyKind.DATE) == pytest.approx(0.4)
