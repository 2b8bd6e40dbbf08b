from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install slotgraph[networkx]"
    ) from e

import warnings
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.graph import SlotGraph


def to_nx(graph: SlotGraph) -> nx.Graph:
    """Convert to an undirected ``networkx.Graph``.

    Vertices are added in slot order, edges in :meth:`SlotGraph.edges` order,
    so neighbor iteration in the result follows the same order.
    """
    G = nx.Graph()
    G.add_nodes_from(graph.vertices())
    G.add_edges_from(graph.edges())
    return G


def from_nx(G: nx.Graph) -> SlotGraph:
    """Build a SlotGraph from any networkx graph.

    Node and edge attributes are dropped. Directed graphs are symmetrised,
    parallel edges of multigraphs collapse and self-loops are skipped; each of
    these lossy steps emits a ``UserWarning``.
    """
    from ..core.graph import SlotGraph

    msgs = []
    if G.is_directed():
        msgs.append("edge direction dropped")
    if G.is_multigraph():
        msgs.append("parallel edges collapsed")
    loops = nx.number_of_selfloops(G)
    if loops:
        msgs.append(f"{loops} self-loop(s) skipped")
    if msgs:
        warnings.warn("networkx -> SlotGraph conversion is lossy: " + "; ".join(msgs))

    out = SlotGraph()
    out.add_vertices(G.nodes())
    out.add_edges((u, v) for u, v in G.edges() if u != v)
    return out
