"""Connected-component discovery over same-kind edges.

Only sections holding at least one property of a kind can join a cluster
of that kind. An edge touching a zero-count section does not pull it in;
such sections are handled by the fallback delta pass instead.
"""

from __future__ import annotations

import logging
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias

from sectionsync.domain.model import PROPERTY_KIND_PRIORITY, property_count

if TYPE_CHECKING:
    from sectionsync.domain.model import InventoryBySection, PropertyKind

    from .graph import SectionGraph

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Cluster:
    """Maximal connected component for one kind; members in document order."""

    kind: PropertyKind
    members: tuple[str, ...]

    def __contains__(self, section_id: object) -> bool:
        return section_id in self.members

    def __len__(self) -> int:
        return len(self.members)


ClustersByKind: TypeAlias = "dict[PropertyKind, tuple[Cluster, ...]]"


class FindClusters(Protocol):
    """Group sections into same-kind connected components."""

    def __call__(
        self,
        graph: SectionGraph,
        inventories: InventoryBySection,
    ) -> ClustersByKind: ...


def find_clusters(graph: SectionGraph, inventories: InventoryBySection) -> ClustersByKind:
    """Return the clusters of every property kind, in seed (document) order."""

    return {
        kind: clusters_for_kind(graph, inventories, kind) for kind in PROPERTY_KIND_PRIORITY
    }


def clusters_for_kind(
    graph: SectionGraph,
    inventories: InventoryBySection,
    kind: PropertyKind,
) -> tuple[Cluster, ...]:
    def holds_kind(section_id: str) -> bool:
        return property_count(inventories, section_id, kind) > 0

    adjacency: dict[str, list[str]] = defaultdict(list)
    for edge in graph.edges_of_kind(kind):
        adjacency[edge.source].append(edge.target)
        adjacency[edge.target].append(edge.source)

    visited: set[str] = set()
    clusters: list[Cluster] = []
    for section in graph.nodes:
        if section.id in visited or not holds_kind(section.id):
            continue
        members: list[str] = []
        queue = deque([section.id])
        visited.add(section.id)
        while queue:
            current = queue.popleft()
            members.append(current)
            for neighbour in adjacency[current]:
                if neighbour in visited or not holds_kind(neighbour):
                    continue
                visited.add(neighbour)
                queue.append(neighbour)
        members.sort(key=graph.order_of)
        clusters.append(Cluster(kind=kind, members=tuple(members)))

    log.debug(
        "Clusters for %s: %s",
        kind,
        [list(cluster.members) for cluster in clusters],
    )
    return tuple(clusters)
