"""Tests for graph algorithms."""

import pytest

from scicalc.core.errors import InvalidArgument
from scicalc.core.graph import (
    UnionFind,
    breadth_first_order,
    depth_first_order,
    dijkstra_distances,
    eulerian_circuit,
    hamiltonian_path,
    is_connected,
    is_tree,
    minimum_spanning_tree_kruskal,
    shortest_path_dijkstra,
    vertices,
)
from scicalc.core.outcome import Status

TRIANGLE = {0: {1: 4, 2: 1}, 1: {0: 4, 2: 2}, 2: {0: 1, 1: 2}}

SQUARE = {
    "A": {"B": 1, "D": 1},
    "B": {"A": 1, "C": 1},
    "C": {"B": 1, "D": 1},
    "D": {"C": 1, "A": 1},
}


def _edges_of(path):
    return {frozenset(pair) for pair in zip(path, path[1:])}


class TestDijkstra:
    def test_prefers_indirect_route(self):
        result = shortest_path_dijkstra(TRIANGLE, 0, 1).unwrap()
        assert result.path == [0, 2, 1]
        assert result.distance == pytest.approx(3.0)

    def test_start_equals_end(self):
        result = shortest_path_dijkstra(TRIANGLE, 2, 2).unwrap()
        assert result.path == [2]
        assert result.distance == 0.0

    def test_unreachable(self):
        graph = {"a": {"b": 1}, "b": {"a": 1}, "c": {}}
        out = shortest_path_dijkstra(graph, "a", "c")
        assert out.status is Status.NO_RESULT

    def test_unknown_vertex(self):
        with pytest.raises(InvalidArgument):
            shortest_path_dijkstra(TRIANGLE, 0, 9)

    def test_distances(self):
        assert dijkstra_distances(TRIANGLE, 0) == {0: 0.0, 1: 3.0, 2: 1.0}

    def test_neighbour_only_vertex_counted(self):
        assert vertices({"a": {"b": 1}}) == ["a", "b"]


class TestKruskal:
    def test_triangle(self):
        tree = minimum_spanning_tree_kruskal(TRIANGLE)
        assert len(tree.edges) == 2
        assert tree.total_weight == pytest.approx(3.0)

    def test_forest_for_disconnected_graph(self):
        graph = {1: {2: 5}, 2: {1: 5}, 3: {4: 1}, 4: {3: 1}}
        tree = minimum_spanning_tree_kruskal(graph)
        assert len(tree.edges) == 2
        assert tree.total_weight == pytest.approx(6.0)

    def test_union_find(self):
        uf = UnionFind(["a", "b", "c"])
        assert uf.union("a", "b")
        assert not uf.union("b", "a")
        assert uf.find("a") == uf.find("b")
        assert uf.find("c") != uf.find("a")


class TestHamiltonian:
    def test_square(self):
        path = hamiltonian_path(SQUARE).unwrap()
        assert path[0] == "A"
        assert sorted(path) == ["A", "B", "C", "D"]
        for u, v in zip(path, path[1:]):
            assert v in SQUARE[u]

    def test_star_has_no_path_from_leaf(self):
        # Leaf first: any path from a leaf through the hub can only reach one more leaf
        star = {"x": {"hub": 1}, "hub": {"x": 1, "y": 1, "z": 1}, "y": {"hub": 1}, "z": {"hub": 1}}
        assert hamiltonian_path(star).status is Status.NO_RESULT

    def test_single_vertex(self):
        assert hamiltonian_path({"a": {}}).unwrap() == ["a"]

    def test_empty_graph(self):
        with pytest.raises(InvalidArgument):
            hamiltonian_path({})


class TestEulerian:
    def test_square_circuit(self):
        circuit = eulerian_circuit(SQUARE).unwrap()
        assert circuit[0] == circuit[-1]
        assert len(circuit) == 5
        assert _edges_of(circuit) == {
            frozenset(("A", "B")),
            frozenset(("B", "C")),
            frozenset(("C", "D")),
            frozenset(("D", "A")),
        }

    def test_odd_degree(self):
        out = eulerian_circuit({"a": {"b": 1}, "b": {"a": 1}})
        assert out.status is Status.NO_RESULT

    def test_disconnected_components(self):
        two_triangles = {
            1: {2: 1, 3: 1}, 2: {1: 1, 3: 1}, 3: {1: 1, 2: 1},
            4: {5: 1, 6: 1}, 5: {4: 1, 6: 1}, 6: {4: 1, 5: 1},
        }
        assert eulerian_circuit(two_triangles).status is Status.NO_RESULT

    def test_input_not_mutated(self):
        graph = {k: dict(v) for k, v in SQUARE.items()}
        eulerian_circuit(graph)
        assert graph == SQUARE


class TestTraversal:
    def test_bfs(self):
        assert breadth_first_order(SQUARE, "A") == ["A", "B", "D", "C"]

    def test_dfs(self):
        assert depth_first_order(SQUARE, "A") == ["A", "B", "C", "D"]

    def test_connectivity(self):
        assert is_connected(SQUARE)
        assert not is_connected({"a": {}, "b": {}})

    def test_is_tree(self):
        path_graph = {1: {2: 1}, 2: {1: 1, 3: 1}, 3: {2: 1}}
        assert is_tree(path_graph)
        assert not is_tree(SQUARE)

    def test_deep_path_does_not_recurse(self):
        n = 5000
        chain = {i: {} for i in range(n)}
        for i in range(n - 1):
            chain[i][i + 1] = 1
            chain[i + 1][i] = 1
        assert len(depth_first_order(chain, 0)) == n
        assert len(hamiltonian_path(chain).unwrap()) == n
