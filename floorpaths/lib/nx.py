"""NetworkX graph conversion utilities.

Converts an edge list to a ``networkx.MultiDiGraph`` (locations become nodes,
edge ids become edge keys) and back.

Example:
    >>> from floorpaths import Edge
    >>> from floorpaths.lib.nx import from_networkx, to_networkx
    >>> G = to_networkx([Edge(1, 0, 5, 2), Edge(2, 5, 10)])
    >>> G[0][5][1]["weight"]
    2
    >>> [e.id for e in from_networkx(G)]
    [1, 2]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List

from floorpaths.model.edge import Edge

if TYPE_CHECKING:
    import networkx as nx


def to_networkx(edges: Iterable[Edge], weight_attr: str = "weight") -> "nx.MultiDiGraph":
    """Convert edges to a NetworkX MultiDiGraph keyed by edge id.

    Args:
        edges: Edges to convert.
        weight_attr: Edge attribute name for the weight.

    Returns:
        MultiDiGraph with one node per location and one edge per Edge.
    """
    import networkx as nx

    graph = nx.MultiDiGraph()
    for edge in edges:
        graph.add_edge(edge.entry, edge.exit, key=edge.id, **{weight_attr: edge.weight})
    return graph


def from_networkx(
    graph: Any, weight_attr: str = "weight", default_weight: Any = 1
) -> List[Edge]:
    """Convert a NetworkX graph to a list of edges.

    Integer edge keys of multigraphs are used as edge ids when they are unique
    across the graph; otherwise ids are assigned in edge iteration order.
    Undirected graphs contribute one edge per direction.

    Args:
        graph: Any NetworkX graph.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight for edges without ``weight_attr``.

    Returns:
        Edges in graph iteration order.
    """
    directed = graph.to_directed() if not graph.is_directed() else graph
    if directed.is_multigraph():
        triples = [
            (u, v, key, data) for u, v, key, data in directed.edges(keys=True, data=True)
        ]
    else:
        triples = [(u, v, None, data) for u, v, data in directed.edges(data=True)]

    keys = [key for _, _, key, _ in triples]
    use_keys = all(isinstance(k, int) and not isinstance(k, bool) for k in keys) and (
        len(set(keys)) == len(keys)
    )

    edges: List[Edge] = []
    for index, (u, v, key, data) in enumerate(triples):
        edge_id = key if use_keys else index
        edges.append(Edge(edge_id, u, v, data.get(weight_attr, default_weight)))
    return edges
