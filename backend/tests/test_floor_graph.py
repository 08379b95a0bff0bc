import pytest

from facility.facility_errors import OutOfRangeError, UnreachableError
from planning.floor_graph import FloorGraph


def test_same_node_is_zero_hops():
    graph = FloorGraph.linear(4)
    for node in range(4):
        assert graph.shortest_hops(node, node) == 0


def test_linear_chain():
    graph = FloorGraph.linear(6)
    assert graph.shortest_hops(0, 5) == 5
    assert graph.shortest_hops(5, 0) == 5
    assert graph.shortest_path(0, 3) == [0, 1, 2, 3]


def test_cross_edge_shortcut():
    # positions 1 and 4 are slots 2 and 5
    graph = FloorGraph.linear(6, extra_edges=[(1, 4)])
    assert graph.shortest_hops(1, 4) == 1
    assert graph.shortest_hops(0, 5) == 3
    assert graph.shortest_path(0, 5) == [0, 1, 4, 5]


def test_disconnected_nodes_are_unreachable():
    graph = FloorGraph(5, [(0, 1), (1, 2), (3, 4)])
    assert graph.shortest_hops(0, 2) == 2
    with pytest.raises(UnreachableError):
        graph.shortest_hops(0, 4)


def test_out_of_range_endpoints():
    graph = FloorGraph.linear(3)
    with pytest.raises(OutOfRangeError):
        graph.shortest_hops(-1, 2)
    with pytest.raises(OutOfRangeError):
        graph.shortest_hops(0, 3)


def test_bad_edge_rejected():
    with pytest.raises(ValueError):
        FloorGraph(3, [(0, 3)])


def test_duplicate_edges_and_self_loops_collapse():
    graph = FloorGraph(3, [(0, 1), (1, 0), (0, 1), (2, 2)])
    assert graph.neighbors(0) == [1]
    assert graph.neighbors(2) == []
    assert graph.edges() == [(0, 1)]
