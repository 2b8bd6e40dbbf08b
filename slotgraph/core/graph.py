import numpy as np
import scipy.sparse as sp

from ..algorithms.traversal import Traversal
from ._Adjacency import AdjacencyStore
from ._Registry import VertexRegistry

# ===================================


class SlotGraph(VertexRegistry, AdjacencyStore, Traversal):
    """Undirected, unweighted graph keyed by arbitrary hashable values.

    Every vertex value is mapped to a compact integer *slot*; adjacency is
    kept per slot as an insertion-ordered neighbor set, and BFS runs over
    slots before translating back to values.

    Parameters
    --
    edges : iterable of (hashable, hashable), optional
        Edges to insert on construction.

    Notes
    -
    - Edges have set semantics (no parallel edges) and self-loops raise
      :class:`SelfLoopError`.
    - Removing a vertex frees its slot; the next insertion reuses it.
    - Not thread-safe. No operation locks; callers must serialise concurrent
      mutation, and must not mutate the graph while a traversal runs.

    See Also

    add_vertex, add_edge, shortest_path, slotgraph.io.text_io

    """

    def __init__(self, edges=None):
        self._init_registry()
        if edges is not None:
            self.add_edges(edges)

    # Container protocol

    def __len__(self):
        return self.live_vertex_count()

    def __contains__(self, value):
        return self.contains(value)

    def __iter__(self):
        return iter(self.vertices())

    def __repr__(self):
        return f"{type(self).__name__}(n={self.vertex_count()}, m={self.edge_count()})"

    def __str__(self):
        from ..io.text_io import to_text

        return to_text(self)

    def __eq__(self, other):
        """Same vertex set and same edge set; slot layout is ignored."""
        if not isinstance(other, SlotGraph):
            return NotImplemented
        if self.live_vertex_count() != other.live_vertex_count():
            return False
        if self.edge_count() != other.edge_count():
            return False
        if set(self._slots) != set(other._slots):
            return False
        return all(other.is_edge(a, b) for a, b in self.edges())

    __hash__ = None

    # Aliases (m/n naming)

    def n(self):
        return self.vertex_count()

    def m(self):
        return self.edge_count()

    # Whole-graph operations

    def copy(self):
        """Independent copy with identical slots and free queue."""
        G = type(self).__new__(type(self))
        G._values = list(self._values)
        G._slots = dict(self._slots)
        G._free = self._free.copy()
        G._adj = [None if nbrs is None else dict(nbrs) for nbrs in self._adj]
        return G

    def clear(self):
        self._init_registry()

    def adjacency_matrix(self, dtype=np.int8):
        """Symmetric adjacency matrix over slot indices.

        Returns
        ---
        scipy.sparse.csr_matrix
            Shape ``(slot_capacity, slot_capacity)``; vacated slots are
            empty rows and columns.

        """
        n = len(self._adj)
        pairs = list(self.edge_slots())
        if not pairs:
            return sp.csr_matrix((n, n), dtype=dtype)
        ij = np.asarray(pairs, dtype=np.int64)
        rows = np.concatenate([ij[:, 0], ij[:, 1]])
        cols = np.concatenate([ij[:, 1], ij[:, 0]])
        data = np.ones(rows.shape[0], dtype=dtype)
        return sp.coo_matrix((data, (rows, cols)), shape=(n, n)).tocsr()

    # Text dump

    def write(self, path_or_stream, **kwargs):
        """Write the text dump; see :func:`slotgraph.io.text_io.write`."""
        from ..io.text_io import write

        write(self, path_or_stream, **kwargs)

    @classmethod
    def read(cls, path_or_stream, **kwargs):
        """Build a graph from a text dump; see :func:`slotgraph.io.text_io.read`."""
        from ..io.text_io import read

        return read(path_or_stream, graph_cls=cls, **kwargs)
