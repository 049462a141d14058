from __future__ import annotations

import networkx as nx


class DirectedWeightedGraph:
    """Directed multigraph over vertices ``0..vertex_count-1``.

    Edge ids are assigned sequentially by ``add_edge`` and double as the
    networkx edge keys. Once ``freeze`` is called the graph rejects further
    edges and can be shared between concurrent readers.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"Invalid vertex count: {vertex_count}")
        self._graph = nx.MultiDiGraph()
        self._graph.add_nodes_from(range(vertex_count))

    @property
    def vertex_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    @property
    def frozen(self) -> bool:
        return nx.is_frozen(self._graph)

    @property
    def nx_graph(self) -> nx.MultiDiGraph:
        return self._graph

    def add_edge(self, from_vertex: int, to_vertex: int, weight: float) -> int:
        if self.frozen:
            raise RuntimeError("Graph is frozen")
        for v in (from_vertex, to_vertex):
            if not 0 <= v < self.vertex_count:
                raise ValueError(f"Vertex out of range: {v}")
        if weight < 0:
            raise ValueError(f"Negative edge weight: {weight}")

        edge_id = self.edge_count
        self._graph.add_edge(from_vertex, to_vertex, key=edge_id, weight=float(weight))
        return edge_id

    def freeze(self) -> "DirectedWeightedGraph":
        nx.freeze(self._graph)
        return self
