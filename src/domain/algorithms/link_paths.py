from __future__ import annotations

from collections.abc import Sequence

import networkx as nx

from src.domain.models import Network


def link_graph(network: Network) -> nx.DiGraph:
    """Directed graph whose nodes are links, joined where one ends and the next starts."""

    g = nx.DiGraph()
    starting_at: dict[str, list[str]] = {}
    for link in network.links.values():
        g.add_node(link.id)
        starting_at.setdefault(link.from_node, []).append(link.id)
    for link in network.links.values():
        for nxt in starting_at.get(link.to_node, ()):
            g.add_edge(link.id, nxt)
    return g


def link_path_gaps(
    link_ids: Sequence[str], graph: nx.DiGraph
) -> list[tuple[str, str]]:
    """Consecutive link pairs of a path that are not connected in the network."""

    gaps: list[tuple[str, str]] = []
    for a, b in zip(link_ids, link_ids[1:]):
        # A stop may sit on the same link as its predecessor.
        if a == b:
            continue
        if not graph.has_edge(a, b):
            gaps.append((a, b))
    return gaps
