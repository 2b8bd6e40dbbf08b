"""Shared fixtures and helpers for slotgraph tests."""

import pathlib
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from slotgraph.core.graph import SlotGraph  # noqa: E402

# ======================================================================
# FIXTURES
# ======================================================================


@pytest.fixture
def path_graph():
    """A - B - C - D."""
    G = SlotGraph()
    G.add_edge("A", "B")
    G.add_edge("B", "C")
    G.add_edge("C", "D")
    return G


@pytest.fixture
def disjoint_graph():
    """Two components, (A, B) and (C, D)."""
    G = SlotGraph()
    G.add_edge("A", "B")
    G.add_edge("C", "D")
    return G


@pytest.fixture
def mixed_graph():
    """Mixed value types, an isolated vertex and a cycle."""
    G = SlotGraph()
    G.add_vertex("lonely")
    G.add_edge(1, 2)
    G.add_edge(2, ("t", 3))
    G.add_edge(("t", 3), "word with spaces")
    G.add_edge("word with spaces", 1)
    G.add_edge(2.5, None)
    return G


@pytest.fixture
def word_ladder():
    """Four-letter words joined when they differ in exactly one position."""
    words = ["cold", "cord", "card", "ward", "warm", "word", "worm", "corm", "wore"]
    G = SlotGraph()
    G.add_vertices(words)
    for i, w1 in enumerate(words):
        for w2 in words[i + 1 :]:
            if sum(c1 != c2 for c1, c2 in zip(w1, w2)) == 1:
                G.add_edge(w1, w2)
    return G


@pytest.fixture
def tmpdir_fixture():
    """Temporary directory for file I/O (input/output) tests."""
    tmpdir = Path(tempfile.mkdtemp())
    yield tmpdir
    shutil.rmtree(tmpdir)


# ======================================================================
# HELPERS
# ======================================================================


def assert_graphs_equal(G1, G2):
    """Assert two graphs have the same vertex set and edge set."""
    assert set(G1.vertices()) == set(G2.vertices()), "Vertex sets differ"
    assert G1.edge_count() == G2.edge_count(), "Edge counts differ"
    e1 = {frozenset(e) for e in G1.edges()}
    e2 = {frozenset(e) for e in G2.edges()}
    assert e1 == e2, f"Edge sets differ: {e1 ^ e2}"


def assert_slot_invariants(G):
    """Registry bijection and adjacency symmetry hold."""
    for s in G.slots():
        assert G.slot_of(G.value_of(s)) == s
        for t in G.neighbor_slots(s):
            assert s in G.neighbor_slots(t), f"slot {s} -> {t} is not mirrored"
            assert s != t
    assert len(G.slots()) == G.live_vertex_count() == len(G)
    assert G.vertex_count() == G.slot_capacity()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
