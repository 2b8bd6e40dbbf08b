from .traversal import FRONTIER, UNVISITED, VISITED, Traversal

__all__ = ["Traversal", "UNVISITED", "FRONTIER", "VISITED"]
