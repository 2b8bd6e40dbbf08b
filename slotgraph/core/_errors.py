class GraphError(Exception):
    """Base class for every error raised by slotgraph."""


class VertexNotFoundError(GraphError, KeyError):
    """A vertex (or slot) named by an operation is not registered.

    Parameters
    --
    vertex : object
        The missing value, or the slot index when raised by ``value_of``.

    """

    def __init__(self, vertex, message=None):
        self.vertex = vertex
        super().__init__(message or f"vertex {vertex!r} not found")

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class SelfLoopError(GraphError, ValueError):
    """``add_edge(a, a)``: self-loops are not representable."""

    def __init__(self, vertex):
        self.vertex = vertex
        super().__init__(f"self-loop on {vertex!r} is not allowed")


class GraphFormatError(GraphError, ValueError):
    """Malformed text dump.

    ``lineno`` is 1-based, or ``None`` when the error is not tied to a line.
    """

    def __init__(self, message, lineno=None):
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)
