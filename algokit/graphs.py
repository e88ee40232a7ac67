"""Graph algorithms: traversals, shortest paths, articulation points, colouring, bipartiteness."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Hashable, Iterable, Sequence
from itertools import count


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


class Graph:
    """An unweighted, undirected graph whose nodes are any hashable values."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, first: Hashable, second: Hashable) -> None:
        """Connect two nodes in both directions."""
        self._adjacency.setdefault(first, []).append(second)
        self._adjacency.setdefault(second, []).append(first)

    def neighbours(self, node: Hashable) -> list[Hashable]:
        """Neighbours of ``node`` in the order their edges were added."""
        return list(self._adjacency.get(node, ()))

    def bfs(self, source: Hashable) -> list[Hashable]:
        """Nodes reachable from ``source`` in breadth-first order."""
        visited = {source}
        order: list[Hashable] = []
        pending = deque([source])
        while pending:
            node = pending.popleft()
            order.append(node)
            for neighbour in self._adjacency.get(node, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    pending.append(neighbour)
        return order

    def dfs(self, source: Hashable) -> list[Hashable]:
        """Nodes reachable from ``source`` in depth-first order."""
        visited = {source}
        order = [source]
        stack = [iter(self._adjacency.get(source, ()))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency.get(neighbour, ())))
                    break
            else:
                stack.pop()
        return order


class WeightedGraph:
    """A weighted graph whose edges may be one-way or two-way."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[tuple[Hashable, float]]] = {}

    def add_edge(
        self,
        source: Hashable,
        target: Hashable,
        weight: float,
        bidirectional: bool = True,
    ) -> None:
        """Add an edge from ``source`` to ``target``, and back when ``bidirectional``."""
        self._adjacency.setdefault(source, []).append((target, weight))
        self._adjacency.setdefault(target, [])
        if bidirectional:
            self._adjacency[target].append((source, weight))

    def adjacency(self) -> dict[Hashable, list[tuple[Hashable, float]]]:
        """Each node with its outgoing ``(neighbour, weight)`` pairs."""
        return {node: list(edges) for node, edges in self._adjacency.items()}

    def dijkstra(self, source: Hashable) -> dict[Hashable, float]:
        """Shortest distance from ``source`` to every node, keyed in sorted order.

        Nodes that cannot be reached are at ``math.inf``.
        """
        distances: dict[Hashable, float] = {node: math.inf for node in self._adjacency}
        distances[source] = 0
        tie = count()
        pending = [(0, next(tie), source)]
        while pending:
            distance, _, node = heapq.heappop(pending)
            if distance > distances[node]:
                continue
            for neighbour, weight in self._adjacency.get(node, ()):
                candidate = distance + weight
                if candidate < distances[neighbour]:
                    distances[neighbour] = candidate
                    heapq.heappush(pending, (candidate, next(tie), neighbour))
        return dict(sorted(distances.items()))


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} out of range")


def _undirected(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for first, second in edges:
        _check_vertex(first, vertex_count)
        _check_vertex(second, vertex_count)
        adjacency[first].append(second)
        adjacency[second].append(first)
    return adjacency


def articulation_points(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Vertices whose removal disconnects their component, in ascending order."""
    adjacency = _undirected(vertex_count, edges)
    discovery = [-1] * vertex_count
    low = [0] * vertex_count
    parent = [-1] * vertex_count
    is_point = [False] * vertex_count
    timer = 0

    def visit(u: int) -> None:
        nonlocal timer
        discovery[u] = low[u] = timer
        timer += 1
        children = 0
        for v in adjacency[u]:
            if discovery[v] == -1:
                children += 1
                parent[v] = u
                visit(v)
                low[u] = min(low[u], low[v])
                if parent[u] == -1 and children > 1:
                    is_point[u] = True
                if parent[u] != -1 and low[v] >= discovery[u]:
                    is_point[u] = True
            elif v != parent[u]:
                low[u] = min(low[u], discovery[v])

    for vertex in range(vertex_count):
        if discovery[vertex] == -1:
            visit(vertex)
    return [vertex for vertex, flagged in enumerate(is_point) if flagged]


def greedy_coloring(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> tuple[int, list[int]]:
    """Colour vertices in index order with the smallest free colour.

    Returns the number of colours used and the colour of each vertex.
    """
    adjacency = _undirected(vertex_count, edges)
    colors = [-1] * vertex_count
    for vertex, neighbours in enumerate(adjacency):
        taken = {colors[other] for other in neighbours if colors[other] != -1}
        colors[vertex] = next(color for color in count() if color not in taken)
    used = max(colors) + 1 if colors else 0
    return used, colors


def bellman_ford(
    vertex_count: int, edges: Iterable[Sequence[float]], source: int = 0
) -> list[float]:
    """Shortest distances from ``source`` over directed ``(u, v, weight)`` edges.

    Unreachable vertices are at ``math.inf``. Raises ``NegativeCycleError``
    when a negative cycle is reachable from the source.
    """
    edge_list = [(int(u), int(v), w) for u, v, w in edges]
    _check_vertex(source, vertex_count)
    for u, v, _ in edge_list:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
    distances = [math.inf] * vertex_count
    distances[source] = 0
    for _ in range(vertex_count - 1):
        updated = False
        for u, v, weight in edge_list:
            if distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
                updated = True
        if not updated:
            return distances
    if any(distances[u] + weight < distances[v] for u, v, weight in edge_list):
        raise NegativeCycleError("graph has a negative weight cycle")
    return distances


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square weight matrix; ``math.inf`` means no edge."""
    distances = [list(row) for row in matrix]
    size = len(distances)
    if any(len(row) != size for row in distances):
        raise ValueError("matrix must be square")
    for k, through_row in enumerate(distances):
        for row in distances:
            to_k = row[k]
            if to_k == math.inf:
                continue
            for j, onward in enumerate(through_row):
                if to_k + onward < row[j]:
                    row[j] = to_k + onward
    return distances


def is_bipartite(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """Whether the graph can be coloured with two colours, neighbours differing."""
    adjacency = _undirected(vertex_count, edges)
    colors = [-1] * vertex_count
    for start in range(vertex_count):
        if colors[start] != -1:
            continue
        colors[start] = 1
        pending = deque([start])
        while pending:
            node = pending.popleft()
            for neighbour in adjacency[node]:
                if colors[neighbour] == -1:
                    colors[neighbour] = 1 - colors[node]
                    pending.append(neighbour)
                elif colors[neighbour] == colors[node]:
                    return False
    return True