from __future__ import annotations

from sectionsync.domain.consistency import (
    KeywordPolicyScorer,
    ReferenceSelector,
    authority_selector,
    completeness_selector,
)
from sectionsync.domain.consistency.clusters import Cluster
from sectionsync.domain.consistency.reference import primary_authority, select_authorities
from sectionsync.domain.model import PropertyKind
from tests.helpers.documents import (
    date_value,
    make_graph,
    make_inventory,
    make_section,
    name_role,
    officer_roster,
)

NAME_ROLE = PropertyKind.NAME_ROLE


def test_completeness_selector_prefers_raw_count_and_earlier_ties() -> None:
    sections = [make_section("a"), make_section("b"), make_section("c", "Designated Officers")]
    graph = make_graph(sections, [])
    inventories = {
        "a": make_inventory(name_roles=officer_roster()[:2]),
        "b": make_inventory(name_roles=officer_roster()),
        "c": make_inventory(name_roles=officer_roster()),
    }

    selected = completeness_selector().select(
        ["c", "b", "a"], NAME_ROLE, graph=graph, inventories=inventories
    )

    assert selected == "b"


def test_authority_selector_blends_count_and_policy() -> None:
    sections = [make_section("sec1", "Introduction"), make_section("sec2", "Designated Officers")]
    graph = make_graph(sections, [])
    inventories = {
        "sec1": make_inventory(
            name_roles=(name_role("CTO", "John Doe"), name_role("CFO", "Mark Miller"))
        ),
        "sec2": make_inventory(name_roles=(name_role("CTO", "John Doe"),)),
    }
    selector = authority_selector(KeywordPolicyScorer())

    # sec1: 2 * 0.7 + 2 * 0.3 = 2.0, sec2: 1 * 0.7 + 5 * 0.3 = 2.2
    candidates = ["sec1", "sec2"]
    assert selector.select(candidates, NAME_ROLE, graph=graph, inventories=inventories) == "sec2"
    assert (
        completeness_selector().select(candidates, NAME_ROLE, graph=graph, inventories=inventories)
        == "sec1"
    )


def test_selector_skips_unknown_and_empty_sections() -> None:
    graph = make_graph([make_section("a"), make_section("b")], [])
    inventories = {"a": make_inventory(), "b": make_inventory()}

    selected = completeness_selector().select(
        ["a", "b", "ghost"], NAME_ROLE, graph=graph, inventories=inventories
    )

    assert selected is None


def test_custom_scoring_function_is_pluggable() -> None:
    graph = make_graph([make_section("a"), make_section("b")], [])
    inventories = {
        "a": make_inventory(dates=(date_value("2024-01-01"),)),
        "b": make_inventory(dates=(date_value("2024-01-01"), date_value("2025-01-01"))),
    }
    fewest_first = ReferenceSelector(score=lambda _section, _kind, count: -count)

    selected = fewest_first.select(
        ["a", "b"], PropertyKind.DATE, graph=graph, inventories=inventories
    )

    assert selected == "a"


def test_global_authority_is_best_across_clusters() -> None:
    sections = [
        make_section("a", "Recitals"),
        make_section("b", "Signature Page"),
        make_section("c", "Designated Officers"),
    ]
    graph = make_graph(sections, [])
    inventories = {
        "a": make_inventory(name_roles=officer_roster()),
        "b": make_inventory(name_roles=officer_roster()[:1]),
        "c": make_inventory(name_roles=officer_roster()[:2]),
    }
    clusters = {
        NAME_ROLE: (
            Cluster(kind=NAME_ROLE, members=("a", "b")),
            Cluster(kind=NAME_ROLE, members=("c",)),
        ),
        PropertyKind.DATE: (),
    }

    authorities = select_authorities(
        clusters,
        selector=authority_selector(KeywordPolicyScorer()),
        graph=graph,
        inventories=inventories,
    )

    # a: 3 * 0.7 + 2 * 0.3 = 2.7, c: 2 * 0.7 + 5 * 0.3 = 2.9
    assert authorities == {NAME_ROLE: "c"}


def test_primary_authority_follows_kind_priority() -> None:
    authorities = {PropertyKind.TERMS: "t", PropertyKind.DATE: "d"}

    assert primary_authority(authorities) == (PropertyKind.DATE, "d")
    assert primary_authority({}) is None
