"""Graph algorithms for SciCalc.

Graphs are adjacency mappings ``{vertex: {neighbour: weight}}`` with
non-negative weights. Undirected graphs must be encoded symmetrically by
the caller; symmetry is not validated. Every traversal here runs on an
explicit stack or queue, so graph size is bounded by memory rather than
by the interpreter's recursion limit.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Hashable, Iterator, Mapping

from scicalc.core.errors import InvalidArgument
from scicalc.core.outcome import Outcome

logger = logging.getLogger(__name__)

Vertex = Hashable
Graph = Mapping[Vertex, Mapping[Vertex, float]]


@dataclass
class PathResult:
    """A path through a graph and its total weight."""

    path: list[Vertex]
    distance: float


@dataclass
class SpanningTree:
    """Edges of a minimum spanning tree (or forest) and their total weight."""

    edges: list[tuple[Vertex, Vertex, float]] = field(default_factory=list)
    total_weight: float = 0.0


def _require_graph(graph: Graph) -> None:
    if not graph:
        raise InvalidArgument("Graph is empty")


def vertices(graph: Graph) -> list[Vertex]:
    """All vertices, including those that appear only as neighbours, in first-seen order."""
    seen: dict[Vertex, None] = {}
    for v, nbrs in graph.items():
        seen.setdefault(v, None)
        for u in nbrs:
            seen.setdefault(u, None)
    return list(seen)


# --- Shortest paths ---


def dijkstra_distances(graph: Graph, start: Vertex) -> dict[Vertex, float]:
    """Shortest distance from ``start`` to every vertex (``inf`` if unreachable)."""
    dist, _ = _dijkstra(graph, start)
    return dist


def _dijkstra(
    graph: Graph, start: Vertex
) -> tuple[dict[Vertex, float], dict[Vertex, Vertex]]:
    _require_graph(graph)
    all_vertices = vertices(graph)
    if start not in all_vertices:
        raise InvalidArgument(f"Start vertex {start!r} is not in the graph")

    dist = {v: float("inf") for v in all_vertices}
    prev: dict[Vertex, Vertex] = {}
    dist[start] = 0.0
    # Counter breaks ties so vertices never need to be comparable
    tie = itertools.count()
    heap: list[tuple[float, int, Vertex]] = [(0.0, next(tie), start)]
    done: set[Vertex] = set()

    while heap:
        d, _, u = heapq.heappop(heap)
        if u in done:
            continue
        done.add(u)
        for v, w in graph.get(u, {}).items():
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                prev[v] = u
                heapq.heappush(heap, (nd, next(tie), v))
    return dist, prev


def shortest_path_dijkstra(graph: Graph, start: Vertex, end: Vertex) -> Outcome[PathResult]:
    """Shortest path between two vertices using a binary-heap Dijkstra.

    Weights are assumed non-negative and are not checked.

    Returns:
        Outcome with the ordered vertex path and its total distance, or
        no-result when ``end`` is unreachable.
    """
    dist, prev = _dijkstra(graph, start)
    if end not in dist:
        raise InvalidArgument(f"End vertex {end!r} is not in the graph")
    if dist[end] == float("inf"):
        return Outcome.no_result(f"No path from {start!r} to {end!r}")

    path = [end]
    while path[-1] != start:
        path.append(prev[path[-1]])
    path.reverse()
    return Outcome.ok(PathResult(path=path, distance=dist[end]))


# --- Minimum spanning tree ---


class UnionFind:
    """Disjoint-set forest with path compression and union by rank."""

    def __init__(self, items: list[Vertex]) -> None:
        self._parent: dict[Vertex, Vertex] = {x: x for x in items}
        self._rank: dict[Vertex, int] = {x: 0 for x in items}

    def find(self, x: Vertex) -> Vertex:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: Vertex, b: Vertex) -> bool:
        """Merge the sets holding a and b; False if they were already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._rank[ra] < self._rank[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        if self._rank[ra] == self._rank[rb]:
            self._rank[ra] += 1
        return True


def minimum_spanning_tree_kruskal(graph: Graph) -> SpanningTree:
    """Kruskal's algorithm: take edges by ascending weight, skip cycle-forming ones.

    A disconnected graph yields a minimum spanning forest.
    """
    _require_graph(graph)
    edges = [(w, u, v) for u, nbrs in graph.items() for v, w in nbrs.items() if u != v]
    edges.sort(key=lambda e: e[0])

    uf = UnionFind(vertices(graph))
    tree = SpanningTree()
    for w, u, v in edges:
        if uf.union(u, v):
            tree.edges.append((u, v, w))
            tree.total_weight += w
    return tree


# --- Hamiltonian path and Eulerian circuit ---


def hamiltonian_path(graph: Graph) -> Outcome[list[Vertex]]:
    """First Hamiltonian path found by backtracking from the first vertex.

    Exponential in the worst case; the path found is not optimal in any
    sense. Only paths starting at the first vertex of the mapping are tried.
    """
    _require_graph(graph)
    all_vertices = vertices(graph)
    total = len(all_vertices)
    start = all_vertices[0]

    path = [start]
    on_path = {start}
    stack: list[Iterator[Vertex]] = [iter(graph.get(start, {}))]

    while stack:
        if len(path) == total:
            return Outcome.ok(path)
        for nxt in stack[-1]:
            if nxt not in on_path:
                path.append(nxt)
                on_path.add(nxt)
                stack.append(iter(graph.get(nxt, {})))
                break
        else:
            # Neighbours exhausted: backtrack
            stack.pop()
            on_path.discard(path.pop())
    return Outcome.no_result("No Hamiltonian path starting at the first vertex")


def eulerian_circuit(graph: Graph) -> Outcome[list[Vertex]]:
    """Eulerian circuit by Hierholzer's algorithm on a private copy of the graph.

    Every vertex must have even degree; otherwise, or when the edges do not
    form a single connected component, there is no circuit. Behaviour on
    asymmetric (directed) input is unspecified.
    """
    _require_graph(graph)
    for v, nbrs in graph.items():
        if len(nbrs) % 2 != 0:
            return Outcome.no_result(f"Vertex {v!r} has odd degree {len(nbrs)}")

    work: dict[Vertex, list[Vertex]] = {v: list(nbrs) for v, nbrs in graph.items()}
    start = next((v for v, n in work.items() if n), next(iter(work)))

    stack = [start]
    circuit: list[Vertex] = []
    while stack:
        v = stack[-1]
        if work.get(v):
            u = work[v].pop(0)
            back = work.get(u)
            if back is not None and v in back:
                back.remove(v)
            stack.append(u)
        else:
            circuit.append(stack.pop())

    if any(work.values()):
        logger.debug("Edges left after traversal from %r: graph is disconnected", start)
        return Outcome.no_result("Edges do not form a single connected component")
    circuit.reverse()
    logger.debug("Eulerian circuit of length %d from %r", len(circuit), start)
    return Outcome.ok(circuit)


# --- Traversal and structure ---


def breadth_first_order(graph: Graph, start: Vertex) -> list[Vertex]:
    """Vertices in the order a breadth-first search from ``start`` visits them."""
    _require_graph(graph)
    if start not in vertices(graph):
        raise InvalidArgument(f"Start vertex {start!r} is not in the graph")
    order = [start]
    seen = {start}
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for v in graph.get(u, {}):
            if v not in seen:
                seen.add(v)
                order.append(v)
                queue.append(v)
    return order


def depth_first_order(graph: Graph, start: Vertex) -> list[Vertex]:
    """Vertices in pre-order of a depth-first search from ``start``."""
    _require_graph(graph)
    if start not in vertices(graph):
        raise InvalidArgument(f"Start vertex {start!r} is not in the graph")
    order: list[Vertex] = []
    seen: set[Vertex] = set()
    stack = [start]
    while stack:
        u = stack.pop()
        if u in seen:
            continue
        seen.add(u)
        order.append(u)
        # Reverse so neighbours are visited in mapping order
        stack.extend(v for v in reversed(list(graph.get(u, {}))) if v not in seen)
    return order


def is_connected(graph: Graph) -> bool:
    """True when every vertex is reachable from the first one. Empty graphs count as connected."""
    if not graph:
        return True
    all_vertices = vertices(graph)
    return len(breadth_first_order(graph, all_vertices[0])) == len(all_vertices)


def is_tree(graph: Graph) -> bool:
    """True for a connected undirected graph with exactly |V| - 1 edges."""
    if not graph:
        return False
    edges = {frozenset((u, v)) for u, nbrs in graph.items() for v in nbrs}
    return is_connected(graph) and len(edges) == len(vertices(graph)) - 1
