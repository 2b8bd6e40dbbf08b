# Traversal (breadth-first search)
from collections import deque

import numpy as np

# BFS vertex states
UNVISITED = 0
FRONTIER = 1  # enqueued, not yet expanded
VISITED = 2  # expanded


class Traversal:
    """Breadth-first search over the adjacency store.

    Neighbors are expanded in insertion order, so when several shortest paths
    exist the one returned is reproducible, though not otherwise specified.
    """

    def _bfs(self, source_slot):
        """INTERNAL: Run BFS from ``source_slot`` to exhaustion of its component.

        Returns
        ---
        tuple[list[int], np.ndarray, np.ndarray]
            Expansion order, parent slot per slot (``-1`` = none) and hop
            distance per slot (``-1`` = unreachable).

        """
        n = len(self._adj)
        state = np.full(n, UNVISITED, dtype=np.int8)
        parent = np.full(n, -1, dtype=np.int64)
        dist = np.full(n, -1, dtype=np.int64)

        state[source_slot] = FRONTIER
        dist[source_slot] = 0
        queue = deque([source_slot])
        order = []
        while queue:
            f = queue.popleft()
            for e in self._adj[f]:
                if state[e] == UNVISITED:
                    state[e] = FRONTIER
                    parent[e] = f
                    dist[e] = dist[f] + 1
                    queue.append(e)
            state[f] = VISITED
            order.append(f)
        return order, parent, dist

    def shortest_path(self, source, destination):
        """Intermediate vertices on a shortest ``source`` -> ``destination`` path.

        Parameters
        --
        source, destination : hashable
            Registered vertex values.

        Returns
        ---
        list
            Values strictly between the endpoints, in source-to-destination
            order. Empty if the endpoints are adjacent, identical, or not
            connected at all.

        Raises
        --
        VertexNotFoundError
            If either endpoint is not registered.

        """
        src = self.slot_of(source)
        dst = self.slot_of(destination)
        _, parent, dist = self._bfs(src)
        if dist[dst] < 0:
            # never discovered: no parent chain to follow
            return []

        values = self._values
        path = []
        node = dst
        while node != src:
            if node != dst:
                path.append(values[node])
            node = int(parent[node])
        path.reverse()
        return path

    def shortest_path_length(self, source, destination):
        """Hop count between two vertices, or ``None`` if unreachable."""
        src = self.slot_of(source)
        dst = self.slot_of(destination)
        d = int(self._bfs(src)[2][dst])
        return d if d >= 0 else None

    def has_path(self, source, destination):
        if not (self.contains(source) and self.contains(destination)):
            return False
        return self.shortest_path_length(source, destination) is not None

    def bfs(self, source):
        """Vertex values in BFS expansion order, starting with ``source``."""
        order, _, _ = self._bfs(self.slot_of(source))
        values = self._values
        return [values[s] for s in order]

    def distances(self, source):
        """Hop distance from ``source`` to every reachable vertex.

        Returns
        ---
        dict
            value -> int, including ``source`` itself at distance 0.

        """
        order, _, dist = self._bfs(self.slot_of(source))
        values = self._values
        return {values[s]: int(dist[s]) for s in order}

    def connected_component(self, value):
        return set(self.bfs(value))

    def connected_components(self):
        """All components as sets of values, ordered by their lowest slot."""
        seen = np.zeros(len(self._adj), dtype=bool)
        values = self._values
        out = []
        for s in self.slots():
            if seen[s]:
                continue
            order, _, _ = self._bfs(s)
            seen[order] = True
            out.append({values[i] for i in order})
        return out
