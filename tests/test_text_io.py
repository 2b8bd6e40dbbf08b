import io
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

import pytest

from conftest import assert_graphs_equal, assert_slot_invariants
from slotgraph.core._errors import GraphFormatError
from slotgraph.core.graph import SlotGraph
from slotgraph.io.text_io import from_text, read, to_text, write


class TestWrite:
    def test_layout(self):
        G = SlotGraph([("A", "B"), ("B", "C")])
        G.add_vertex("D")
        assert to_text(G).splitlines() == [
            "4 2",
            "0 'A' 1",
            "1 'B' 2",
            "0 'A'",
            "1 'B'",
            "2 'C'",
            "3 'D'",
        ]

    def test_empty_graph(self):
        assert to_text(SlotGraph()) == "0 0\n"
        assert len(from_text("0 0\n")) == 0

    def test_str_is_dump(self, path_graph):
        assert str(path_graph) == to_text(path_graph)

    def test_unrepresentable_value_rejected(self, tmpdir_fixture):
        G = SlotGraph()
        G.add_vertex(object())
        with pytest.raises(GraphFormatError):
            write(G, tmpdir_fixture / "bad.txt")
        # nothing half-written
        assert not (tmpdir_fixture / "bad.txt").exists()

    def test_vacated_slot_listed_by_index(self, path_graph):
        path_graph.remove_vertex("B")
        assert to_text(path_graph).splitlines() == [
            "4 1",
            "2 'C' 3",
            "0 'A'",
            "1",
            "2 'C'",
            "3 'D'",
        ]


class TestRoundTrip:
    def test_file_round_trip(self, mixed_graph, tmpdir_fixture):
        path = tmpdir_fixture / "graph.txt"
        write(mixed_graph, path)
        G2 = read(path)
        assert_graphs_equal(mixed_graph, G2)
        assert_slot_invariants(G2)
        assert G2 == mixed_graph

    def test_method_round_trip(self, word_ladder, tmpdir_fixture):
        path = str(tmpdir_fixture / "ladder.txt")
        word_ladder.write(path)
        G2 = SlotGraph.read(path)
        assert_graphs_equal(word_ladder, G2)
        assert G2.shortest_path("cold", "warm") == word_ladder.shortest_path("cold", "warm")

    def test_stream_round_trip(self, disjoint_graph):
        buf = io.StringIO()
        write(disjoint_graph, buf)
        buf.seek(0)
        assert_graphs_equal(disjoint_graph, read(buf))

    def test_compacts_slots(self, path_graph):
        path_graph.remove_vertex("A")
        G2 = from_text(to_text(path_graph))
        assert G2.slots() == [0, 1, 2]
        assert G2.vertices() == ["B", "C", "D"]
        assert_graphs_equal(path_graph, G2)
        assert path_graph.vertex_count() == 4
        assert G2.vertex_count() == 3

    def test_string_values_with_whitespace_and_escapes(self):
        G = SlotGraph([("a b", "tab\there"), ("line\nbreak", "a b"), ("3", 3)])
        assert_graphs_equal(G, from_text(to_text(G)))

    def test_blank_lines_ignored(self):
        G = from_text("\n2 1\n\n0 'x' 1\n0 'x'\n\n1 'y'\n\n")
        assert G.is_edge("x", "y")


class TestReadErrors:
    @pytest.mark.parametrize(
        "text, lineno",
        [
            ("2\n", 1),
            ("two 1\n", 1),
            ("-1 0\n", 1),
            ("2 1\n0 'a'\n", 2),  # edge line without j
            ("2 1\n1 'b' 0\n0 'a'\n1 'b'\n", 2),  # j <= i
            ("2 1\n0 'a' 1\n0 'a'\n0 'b'\n", 4),  # duplicate index
            ("2 1\n0 'a' 1\n0 'a'\n1 'a'\n", 4),  # duplicate value
            ("1 0\n0 [1, 2]\n", 2),  # unhashable value
            ("1 0\n0 open('x')\n", 2),  # not a literal
            ("1 0\n0 'a'\n0 'extra'\n", 3),
            ("2 1\n0 'a' 5\n0 'a'\n1 'b'\n", 2),  # unknown index
            ("3 1\n0 'a' 1\n0 'a'\n1\n2 'b'\n", 2),  # edge to a vacated slot
            ("2 0\n0\n0\n", 3),  # vacated slot listed twice
            ("1 0\n0 \n", 2),  # index followed by nothing
            ("2 1\n0 'zz' 1\n0 'a'\n1 'b'\n", 2),  # value disagrees
        ],
    )
    def test_malformed(self, text, lineno):
        with pytest.raises(GraphFormatError) as exc:
            from_text(text)
        assert exc.value.lineno == lineno
        assert f"line {lineno}" in str(exc.value)

    def test_truncated(self):
        with pytest.raises(GraphFormatError, match="end of input"):
            from_text("3 1\n0 'a' 1\n0 'a'\n")
        with pytest.raises(GraphFormatError, match="end of input"):
            from_text("")

    def test_duplicate_edge_lines(self):
        with pytest.raises(GraphFormatError, match="declares 2 edges"):
            from_text("2 2\n0 'a' 1\n0 'a' 1\n0 'a'\n1 'b'\n")

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            from_text("x y\n")
