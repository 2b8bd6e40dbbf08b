"""Human-readable text dump of a :class:`SlotGraph`.

Layout::

    <n> <m>
    <i> <repr(value_of(i))> <j>     m edge lines, every slot i, neighbor j > i
    <i> <repr(value_of(i))>         n vertex lines, one per slot ascending
    <i>                             (a vacated slot: index only)

Values are written with ``repr`` and read back with ``ast.literal_eval``, so
str, bytes, int, float, bool, None and tuples of those round-trip. The vertex
section carries isolated vertices and the values of higher-index endpoints,
which the edge lines alone do not. ``n`` is the slot table size, so vacated
slots are listed too.
"""

from __future__ import annotations

import ast
import io
import os
from typing import TYPE_CHECKING, Iterator, TextIO

from ..core._errors import GraphFormatError

if TYPE_CHECKING:
    from ..core.graph import SlotGraph


def _encode_value(value) -> str:
    text = repr(value)
    try:
        ast.literal_eval(text)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError):
        raise GraphFormatError(
            f"vertex value {text} has no literal representation; cannot be dumped"
        ) from None
    return text


def _decode_value(text: str, lineno: int):
    try:
        return ast.literal_eval(text)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError):
        raise GraphFormatError(f"cannot parse vertex value {text!r}", lineno) from None


def _parse_index(token: str, lineno: int) -> int:
    try:
        idx = int(token)
    except ValueError:
        raise GraphFormatError(f"expected a slot index, got {token!r}", lineno) from None
    if idx < 0:
        raise GraphFormatError(f"negative slot index {idx}", lineno)
    return idx


def _content_lines(stream: TextIO) -> Iterator[tuple[int, str]]:
    for lineno, line in enumerate(stream, start=1):
        line = line.rstrip("\r\n")
        if line.strip():
            yield lineno, line


def _next_line(lines: Iterator[tuple[int, str]], what: str) -> tuple[int, str]:
    try:
        return next(lines)
    except StopIteration:
        raise GraphFormatError(f"unexpected end of input while reading {what}") from None


# ======================================================================
# WRITE
# ======================================================================


def iter_lines(graph: SlotGraph) -> Iterator[str]:
    """Yield the dump line by line (no trailing newlines)."""
    encoded = {s: _encode_value(graph.value_of(s)) for s in graph.slots()}
    yield f"{graph.vertex_count()} {graph.edge_count()}"
    for i, j in graph.edge_slots():
        yield f"{i} {encoded[i]} {j}"
    for s in range(graph.vertex_count()):
        yield f"{s} {encoded[s]}" if s in encoded else f"{s}"


def to_text(graph: SlotGraph) -> str:
    return "".join(line + "\n" for line in iter_lines(graph))


def write(graph: SlotGraph, path_or_stream, *, encoding: str = "utf-8") -> None:
    """Write ``graph`` to a file path or an open text stream.

    Parameters
    --
    graph : SlotGraph
    path_or_stream : str | os.PathLike | TextIO
    encoding : str
        Used only when a path is given.

    Raises
    --
    GraphFormatError
        If a vertex value has no literal ``repr``. Nothing is written then.

    """
    text = to_text(graph)
    if isinstance(path_or_stream, (str, os.PathLike)):
        with open(path_or_stream, "w", encoding=encoding) as f:
            f.write(text)
    else:
        path_or_stream.write(text)


# ======================================================================
# READ
# ======================================================================


def _parse(stream: TextIO, graph_cls):
    lines = _content_lines(stream)

    lineno, header = _next_line(lines, "header")
    tokens = header.split()
    if len(tokens) != 2:
        raise GraphFormatError(f"header must be '<n> <m>', got {header!r}", lineno)
    n = _parse_index(tokens[0], lineno)
    m = _parse_index(tokens[1], lineno)

    edge_lines = []
    for _ in range(m):
        lineno, line = _next_line(lines, "edges")
        head, sep, j_tok = line.rpartition(" ")
        i_tok, sep2, value_text = head.partition(" ")
        if not sep or not sep2 or not value_text:
            raise GraphFormatError(f"edge line must be '<i> <value> <j>', got {line!r}", lineno)
        i = _parse_index(i_tok, lineno)
        j = _parse_index(j_tok, lineno)
        if j <= i:
            raise GraphFormatError(f"edge lines need i < j, got {i} and {j}", lineno)
        edge_lines.append((lineno, i, _decode_value(value_text, lineno), j))

    by_index = {}
    vacant = set()
    seen_values = set()
    for _ in range(n):
        lineno, line = _next_line(lines, "vertices")
        i_tok, sep, value_text = line.partition(" ")
        if sep and not value_text:
            raise GraphFormatError(
                f"vertex line must be '<i> [<value>]', got {line!r}", lineno
            )
        i = _parse_index(i_tok, lineno)
        if i in by_index or i in vacant:
            raise GraphFormatError(f"slot index {i} listed twice", lineno)
        if not sep:
            vacant.add(i)
            continue
        value = _decode_value(value_text, lineno)
        try:
            if value in seen_values:
                raise GraphFormatError(f"vertex value {value!r} listed twice", lineno)
        except TypeError:
            raise GraphFormatError(f"vertex value {value!r} is not hashable", lineno) from None
        seen_values.add(value)
        by_index[i] = value

    extra = next(lines, None)
    if extra is not None:
        raise GraphFormatError("trailing data after the vertex section", extra[0])

    G = graph_cls()
    for i in sorted(by_index):
        G.add_vertex(by_index[i])

    for lineno, i, value, j in edge_lines:
        if i not in by_index or j not in by_index:
            missing = i if i not in by_index else j
            raise GraphFormatError(f"edge refers to unknown slot index {missing}", lineno)
        if by_index[i] != value:
            raise GraphFormatError(
                f"edge value {value!r} disagrees with vertex {i} ({by_index[i]!r})", lineno
            )
        G.add_edge(value, by_index[j])

    if G.edge_count() != m:
        raise GraphFormatError(f"header declares {m} edges, found {G.edge_count()} distinct")
    return G


def read(path_or_stream, *, encoding: str = "utf-8", graph_cls=None) -> SlotGraph:
    """Rebuild a graph from a dump produced by :func:`write`.

    Serialized slot indices are only used to pair edges with vertex values;
    the returned graph numbers its live vertices ``0..k-1`` in ascending
    serialized order, dropping vacated slots.

    Parameters
    --
    path_or_stream : str | os.PathLike | TextIO
    encoding : str
        Used only when a path is given.
    graph_cls : type, optional
        Graph class to instantiate (default :class:`SlotGraph`).

    Returns
    ---
    SlotGraph

    Raises
    --
    GraphFormatError
        Malformed header or line, wrong line counts, unknown or duplicate
        indices, or an edge value that disagrees with the vertex section.

    """
    if graph_cls is None:
        from ..core.graph import SlotGraph as graph_cls

    if isinstance(path_or_stream, (str, os.PathLike)):
        with open(path_or_stream, encoding=encoding) as f:
            return _parse(f, graph_cls)
    return _parse(path_or_stream, graph_cls)


def from_text(text: str, *, graph_cls=None) -> SlotGraph:
    return read(io.StringIO(text), graph_cls=graph_cls)
