from __future__ import annotations

from typing import TYPE_CHECKING, Any

import narwhals as nw
import polars as pl
from narwhals.typing import IntoDataFrame

if TYPE_CHECKING:
    from ..core.graph import SlotGraph


def to_dataframes(graph: SlotGraph) -> dict[str, pl.DataFrame]:
    """Export graph to Polars DataFrames.

    Returns a dictionary with two tables:
    - 'vertices': ``slot`` (UInt64) and ``vertex`` (the value), one row per live slot
    - 'edges': ``source`` and ``target`` values, each undirected edge once

    Vertex values must share one Polars-representable type.

    Args:
        graph: SlotGraph instance to export

    Returns:
        Dictionary mapping table names to Polars DataFrames

    """
    slots = graph.slots()
    vertices = [graph.value_of(s) for s in slots]
    edges = graph.edges()

    result = {}
    if vertices:
        result["vertices"] = pl.DataFrame(
            {"slot": pl.Series(slots, dtype=pl.UInt64), "vertex": vertices}
        )
    else:
        result["vertices"] = pl.DataFrame(schema={"slot": pl.UInt64, "vertex": pl.Null})

    if edges:
        result["edges"] = pl.DataFrame(
            {"source": [a for a, _ in edges], "target": [b for _, b in edges]}
        )
    else:
        result["edges"] = pl.DataFrame(schema={"source": pl.Null, "target": pl.Null})
    return result


def _column(df: nw.DataFrame[Any], name: str) -> list:
    return df.get_column(name).to_list()


def from_dataframes(
    vertices: IntoDataFrame | None = None,
    edges: IntoDataFrame | None = None,
    *,
    vertex: str = "vertex",
    source: str = "source",
    target: str = "target",
) -> SlotGraph:
    """Import graph from any DataFrame (Pandas, Polars, PyArrow, etc.).

    Vertices DataFrame (optional):
        - Required: ``vertex`` column
        - Optional: ``slot``; rows are registered in ascending slot order

    Edges DataFrame (optional):
        - Required: ``source``, ``target`` columns
        - Endpoints missing from the vertex table are registered on the fly

    Raises:
        ValueError: a required column is missing
        SelfLoopError: an edge row has ``source == target``

    """
    from ..core.graph import SlotGraph

    G = SlotGraph()

    if vertices is not None:
        vertices_nw = nw.from_native(vertices, eager_only=True)
        if vertices_nw.shape[0] > 0:
            if vertex not in vertices_nw.columns:
                raise ValueError(f"vertices DataFrame must have '{vertex}' column")
            if "slot" in vertices_nw.columns:
                vertices_nw = vertices_nw.sort("slot")
            G.add_vertices(_column(vertices_nw, vertex))

    if edges is not None:
        edges_nw = nw.from_native(edges, eager_only=True)
        if edges_nw.shape[0] > 0:
            if source not in edges_nw.columns or target not in edges_nw.columns:
                raise ValueError(
                    f"edges DataFrame must have '{source}' and '{target}' columns"
                )
            G.add_edges(zip(_column(edges_nw, source), _column(edges_nw, target)))

    return G
