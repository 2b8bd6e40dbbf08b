from collections import deque
from numbers import Integral

from ._errors import VertexNotFoundError

# marks a vacated position in the value store
_VACANT = object()


class VertexRegistry:
    """Value <-> slot mapping and free-slot allocation.

    Mixin; expects the host to provide ``_adj`` (the slot table). Values live
    once, in ``_values`` addressed by slot; ``_slots`` maps a value to its
    slot index only.
    """

    def _init_registry(self):
        self._values = []  # slot -> value (or _VACANT)
        self._slots = {}  # value -> slot
        self._free = deque([0])  # FIFO of slots to hand out next
        self._adj = []  # slot -> ordered neighbor slots (dict used as ordered set) or None

    # Allocation

    def _allocate_slot(self):
        """INTERNAL: Pop the next slot and keep the free queue non-empty.

        Returns
        ---
        int

        """
        slot = self._free.popleft()
        if slot == len(self._adj):
            self._adj.append({})
            self._values.append(_VACANT)
        else:
            self._adj[slot] = {}
        if not self._free:
            self._free.append(len(self._adj))
        return slot

    def add_vertex(self, value):
        """Register ``value`` as a vertex; no-op if already present.

        Parameters
        --
        value : hashable

        Returns
        ---
        int
            Slot of the vertex (existing or newly allocated).

        """
        slot = self._slots.get(value)
        if slot is not None:
            return slot
        slot = self._allocate_slot()
        self._values[slot] = value
        self._slots[value] = slot
        return slot

    def add_vertices(self, values):
        for value in values:
            self.add_vertex(value)

    def remove_vertex(self, value):
        """Remove ``value`` and every edge touching it.

        The vacated slot goes back on the free queue, ahead of the pending
        fresh index, so the next ``add_vertex`` reuses it.

        Raises
        --
        VertexNotFoundError
            If ``value`` is not registered.

        """
        slot = self.slot_of(value)
        for nbr in self._adj[slot]:
            del self._adj[nbr][slot]
        self._adj[slot] = None
        self._values[slot] = _VACANT
        del self._slots[value]

        # the fresh high-water index always stays last
        fresh = self._free.pop()
        self._free.append(slot)
        self._free.append(fresh)

    # Lookups

    def contains(self, value):
        """True if ``value`` is a registered vertex."""
        try:
            return value in self._slots
        except TypeError:  # unhashable
            return False

    def slot_of(self, value):
        """Map a vertex value to its slot index."""
        try:
            return self._slots[value]
        except (KeyError, TypeError):
            raise VertexNotFoundError(value) from None

    def value_of(self, slot):
        """Map a slot index back to its vertex value."""
        if isinstance(slot, bool) or not isinstance(slot, Integral):
            raise VertexNotFoundError(slot, f"slot {slot!r} is not an integer index")
        if slot < 0 or slot >= len(self._values):
            raise VertexNotFoundError(slot, f"slot {slot!r} not allocated")
        value = self._values[slot]
        if value is _VACANT:
            raise VertexNotFoundError(slot, f"slot {slot!r} is vacant")
        return value

    def vertices(self):
        """Live vertex values in slot order.

        Returns
        ---
        list

        """
        return [v for v in self._values if v is not _VACANT]

    def slots(self):
        """Live slot indices, ascending."""
        return [s for s, v in enumerate(self._values) if v is not _VACANT]

    def vertex_count(self):
        """Size of the slot table, vacated-but-unreused slots included."""
        return len(self._adj)

    def live_vertex_count(self):
        """Number of registered vertices."""
        return len(self._slots)

    def slot_capacity(self):
        """Length of the slot table (high-water mark, vacated slots included)."""
        return len(self._adj)
