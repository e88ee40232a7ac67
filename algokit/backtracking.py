"""Backtracking searches: Hamiltonian cycles, N queens and paths through a maze."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional


def hamiltonian_cycles(
    adjacency: Sequence[Sequence[int]], start: int = 0
) -> list[list[int]]:
    """Every cycle from ``start`` through each vertex once and back to ``start``.

    ``adjacency`` is a square 0/1 matrix. Each cycle lists its vertices with
    ``start`` at both ends; cycles come in depth-first order, lower vertices first.
    """
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency must be a square matrix")
    if not 0 <= start < size:
        raise IndexError(f"start {start} out of range")

    visited = [False] * size
    visited[start] = True
    path = [start]

    def extend(vertex: int) -> Iterator[list[int]]:
        if len(path) == size:
            if adjacency[vertex][start] == 1:
                yield [*path, start]
            return
        for neighbour, connected in enumerate(adjacency[vertex]):
            if connected == 1 and not visited[neighbour]:
                visited[neighbour] = True
                path.append(neighbour)
                yield from extend(neighbour)
                path.pop()
                visited[neighbour] = False

    return list(extend(start))


def n_queens(size: int) -> Optional[list[list[int]]]:
    """First placement of ``size`` non-attacking queens as a 0/1 board, or ``None``.

    Queens are placed column by column, trying rows from the top.
    """
    if size < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * size for _ in range(size)]
    rows: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(column: int) -> bool:
        if column >= size:
            return True
        for row in range(size):
            if row in rows or row - column in falling or row + column in rising:
                continue
            board[row][column] = 1
            rows.add(row)
            falling.add(row - column)
            rising.add(row + column)
            if place(column + 1):
                return True
            board[row][column] = 0
            rows.discard(row)
            falling.discard(row - column)
            rising.discard(row + column)
        return False

    return board if place(0) else None


def rat_in_maze_paths(maze: Sequence[str]) -> list[list[list[int]]]:
    """Every path from the top-left to the bottom-right cell moving right or down.

    Cells marked ``X`` are blocked. Each path is a grid with 1 on the cells it
    uses; paths that go right first come before those that go down.
    """
    if not maze or not maze[0]:
        raise ValueError("maze must have at least one cell")
    width = len(maze[0])
    if any(len(row) != width for row in maze):
        raise ValueError("maze rows must all have the same length")
    last_row, last_column = len(maze) - 1, width - 1
    grid = [[0] * width for _ in maze]

    def walk(i: int, j: int) -> Iterator[list[list[int]]]:
        if i == last_row and j == last_column:
            grid[i][j] = 1
            yield [list(row) for row in grid]
            grid[i][j] = 0
            return
        if i > last_row or j > last_column or maze[i][j] == "X":
            return
        grid[i][j] = 1
        yield from walk(i, j + 1)
        yield from walk(i + 1, j)
        grid[i][j] = 0

    return list(walk(0, 0))