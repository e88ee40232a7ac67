"""Maximum flow by the Ford-Fulkerson method with breadth-first augmenting paths."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FlowResult:
    """The maximum flow value and the augmenting paths used, source to sink."""

    max_flow: float
    augmenting_paths: list[list[int]] = field(default_factory=list)


def _augmenting_path(
    residual: list[list[float]], source: int, sink: int
) -> tuple[float, list[int]]:
    parent = [-1] * len(residual)
    parent[source] = source
    pending = deque([(source, math.inf)])
    while pending:
        node, capacity = pending.popleft()
        for target, room in enumerate(residual[node]):
            if target != node and parent[target] == -1 and room > 0:
                parent[target] = node
                bottleneck = min(capacity, room)
                if target == sink:
                    return bottleneck, parent
                pending.append((target, bottleneck))
    return 0, parent


def ford_fulkerson(
    capacity: Sequence[Sequence[float]], source: int, sink: int
) -> FlowResult:
    """Maximum flow from ``source`` to ``sink`` through a square capacity matrix."""
    residual = [list(row) for row in capacity]
    size = len(residual)
    if any(len(row) != size for row in residual):
        raise ValueError("capacity must be a square matrix")
    if any(value < 0 for row in residual for value in row):
        raise ValueError("capacities must not be negative")
    for vertex in (source, sink):
        if not 0 <= vertex < size:
            raise IndexError(f"vertex {vertex} out of range")

    total: float = 0
    paths: list[list[int]] = []
    while True:
        bottleneck, parent = _augmenting_path(residual, source, sink)
        if not bottleneck:
            break
        total += bottleneck
        path = [sink]
        vertex = sink
        while vertex != source:
            previous = parent[vertex]
            residual[vertex][previous] += bottleneck
            residual[previous][vertex] -= bottleneck
            vertex = previous
            path.append(vertex)
        paths.append(path[::-1])
    return FlowResult(total, paths)