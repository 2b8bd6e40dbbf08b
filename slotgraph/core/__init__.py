from ._errors import GraphError, GraphFormatError, SelfLoopError, VertexNotFoundError
from .graph import SlotGraph

__all__ = [
    "SlotGraph",
    "GraphError",
    "GraphFormatError",
    "SelfLoopError",
    "VertexNotFoundError",
]
