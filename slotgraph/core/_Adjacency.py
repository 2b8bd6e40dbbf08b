from ._errors import SelfLoopError


class AdjacencyStore:
    """Symmetric neighbor storage over registry slots.

    Each live slot holds an insertion-ordered ``dict`` used as an ordered set
    of neighbor slots. Edges have set semantics: inserting an existing edge is
    a no-op, and self-loops are rejected.
    """

    def add_edge(self, a, b):
        """Connect ``a`` and ``b``, registering either endpoint if missing.

        Parameters
        --
        a, b : hashable
            Distinct endpoint values.

        Raises
        --
        SelfLoopError
            If ``a`` and ``b`` are the same vertex. Nothing is registered in that
            case.
        TypeError
            If either endpoint is unhashable. Nothing is registered then either.

        """
        # unhashable endpoints fail here, before anything is registered
        hash(a)
        hash(b)
        if a is b or a == b:
            raise SelfLoopError(a)
        ai = self.add_vertex(a)
        bi = self.add_vertex(b)
        self._adj[ai][bi] = None
        self._adj[bi][ai] = None

    def add_edges(self, pairs):
        for a, b in pairs:
            self.add_edge(a, b)

    def remove_edge(self, a, b):
        """Disconnect ``a`` and ``b`` if they are adjacent.

        Both endpoints stay registered, even if this was their last edge.

        Raises
        --
        VertexNotFoundError
            If either endpoint is not registered.

        """
        ai = self.slot_of(a)
        bi = self.slot_of(b)
        self._adj[ai].pop(bi, None)
        self._adj[bi].pop(ai, None)

    def is_edge(self, a, b):
        """True iff ``a`` and ``b`` are registered and adjacent."""
        if not (self.contains(a) and self.contains(b)):
            return False
        return self._slots[b] in self._adj[self._slots[a]]

    # alias
    has_edge = is_edge

    def neighbor_slots(self, slot):
        """Neighbor slots of ``slot`` in insertion order."""
        return list(self._adj[slot])

    def neighbor_values(self, a):
        """Set of values adjacent to ``a``.

        Raises
        --
        VertexNotFoundError
            If ``a`` is not registered.

        """
        values = self._values
        return {values[s] for s in self._adj[self.slot_of(a)]}

    # alias
    neighbors = neighbor_values

    def degree(self, a):
        return len(self._adj[self.slot_of(a)])

    def edge_count(self):
        """Number of edges (each undirected edge counted once)."""
        return sum(len(nbrs) for nbrs in self._adj if nbrs is not None) // 2

    def edges(self):
        """Every edge once, as ``(value_of(i), value_of(j))`` with ``i < j``.

        Ordered by the lower slot, then by neighbor insertion order.

        Returns
        ---
        list[tuple]

        """
        values = self._values
        return [(values[i], values[j]) for i, j in self.edge_slots()]

    def edge_slots(self):
        """Like :meth:`edges`, but yields ``(i, j)`` slot pairs."""
        for i, nbrs in enumerate(self._adj):
            if nbrs is None:
                continue
            for j in nbrs:
                if j > i:
                    yield i, j
