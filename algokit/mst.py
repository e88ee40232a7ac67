"""Minimum spanning tree weight by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from algokit.disjoint_set import UnionFind


def kruskal_weight(vertex_count: int, edges: Iterable[Sequence[float]]) -> float:
    """Total weight of a minimum spanning forest over undirected ``(u, v, weight)`` edges."""
    sets = UnionFind(vertex_count)
    total = 0
    for weight, first, second in sorted((w, u, v) for u, v, w in edges):
        if not sets.same_set(first, second):
            sets.union(first, second)
            total += weight
    return total


def prim_weight(vertex_count: int, edges: Iterable[Sequence[float]]) -> float:
    """Total weight of a minimum spanning tree of the component holding vertex 0."""
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for first, second, weight in edges:
        if not (0 <= first < vertex_count and 0 <= second < vertex_count):
            raise IndexError(f"edge ({first}, {second}) out of range")
        adjacency[first].append((second, weight))
        adjacency[second].append((first, weight))
    if vertex_count == 0:
        return 0
    visited = [False] * vertex_count
    total = 0
    pending: list[tuple[float, int]] = [(0, 0)]
    while pending:
        weight, node = heapq.heappop(pending)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, edge_weight in adjacency[node]:
            if not visited[neighbour]:
                heapq.heappush(pending, (edge_weight, neighbour))
    return total