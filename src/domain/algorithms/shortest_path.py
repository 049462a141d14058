from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from .graph import DirectedWeightedGraph


@dataclass(frozen=True, slots=True)
class ShortestPath:
    weight: float
    edges: tuple[int, ...]


def find_shortest_path(
    graph: DirectedWeightedGraph, source: int, target: int
) -> ShortestPath | None:
    """Minimum-weight path from ``source`` to ``target`` using Dijkstra.

    Weights must be non-negative. Returns ``None`` if ``target`` is not
    reachable. Between parallel edges the lighter one wins, then the lower
    edge id, so the same graph and query always yield the same edges.
    """

    g = graph.nx_graph
    for v in (source, target):
        if v not in g:
            raise ValueError(f"Vertex out of range: {v}")

    try:
        weight, vertices = nx.single_source_dijkstra(
            g, source, target=target, weight="weight"
        )
    except nx.NetworkXNoPath:
        return None

    edges: list[int] = []
    for u, v in zip(vertices, vertices[1:]):
        edge_id, _ = min(
            g[u][v].items(), key=lambda item: (item[1]["weight"], item[0])
        )
        edges.append(edge_id)

    return ShortestPath(weight=float(weight), edges=tuple(edges))
