"""Grid and state-space searches: fills, breadth-first and weighted shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
# Headings in turning order: west, north, east, south.
_HEADINGS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_NORTH = 1
_LOCK_START = "0000"


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _STEPS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def flood_fill(image: list[list[int]], sr: int, sc: int, color: int) -> list[list[int]]:
    """Recolour, in place, the 4-connected region sharing the start cell's colour.

    Returns the same image object.
    """
    rows, cols = len(image), len(image[0])
    original = image[sr][sc]
    if original == color:
        return image
    stack = [(sr, sc)]
    while stack:
        row, col = stack.pop()
        if image[row][col] != original:
            continue
        image[row][col] = color
        stack.extend(_neighbours(row, col, rows, cols))
    return image


def _turns(code: str) -> Iterator[str]:
    for position, digit in enumerate(code):
        value = int(digit)
        for step in (1, -1):
            yield code[:position] + str((value + step) % 10) + code[position + 1:]


def open_lock(deadends: Iterable[str], target: str) -> int:
    """Return the fewest wheel turns from ``0000`` to ``target`` avoiding dead ends, or -1."""
    dead = set(deadends)
    if _LOCK_START in dead:
        return -1
    seen = {_LOCK_START}
    queue: deque[tuple[str, int]] = deque([(_LOCK_START, 0)])
    while queue:
        code, moves = queue.popleft()
        if code == target:
            return moves
        for following in _turns(code):
            if following not in dead and following not in seen:
                seen.add(following)
                queue.append((following, moves + 1))
    return -1


def robot_sim(commands: Iterable[int], obstacles: Iterable[Sequence[int]]) -> int:
    """Return the largest squared distance from the origin a walking robot reaches.

    The robot starts facing north; -2 turns left, -1 turns right, and a
    positive number walks that many steps, stopping short of obstacles.
    """
    blocked = {(obstacle[0], obstacle[1]) for obstacle in obstacles}
    heading = _NORTH
    x = y = 0
    best = 0
    for command in commands:
        if command == -2:
            heading = (heading - 1) % 4
        elif command == -1:
            heading = (heading + 1) % 4
        else:
            dx, dy = _HEADINGS[heading]
            for _ in range(command):
                if (x + dx, y + dy) in blocked:
                    break
                x += dx
                y += dy
                best = max(best, x * x + y * y)
    return best


def minimum_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Return the fewest obstacle cells (value 1) to remove to walk corner to corner."""
    rows, cols = len(grid), len(grid[0])
    dist = [[math.inf] * cols for _ in range(rows)]
    dist[0][0] = 0
    queue: deque[tuple[int, int]] = deque([(0, 0)])
    while queue:
        row, col = queue.popleft()
        for nr, nc in _neighbours(row, col, rows, cols):
            blocked = grid[nr][nc] == 1
            cost = dist[row][col] + (1 if blocked else 0)
            if cost < dist[nr][nc]:
                dist[nr][nc] = cost
                if blocked:
                    queue.append((nr, nc))
                else:
                    queue.appendleft((nr, nc))
    return int(dist[rows - 1][cols - 1])


def minimum_time(grid: Sequence[Sequence[int]]) -> int:
    """Return the earliest time to reach the bottom-right cell, or -1.

    A cell may be entered only at a time at least its value; every second the
    walker must move to a neighbour, so it may pace back and forth to wait.
    """
    rows, cols = len(grid), len(grid[0])
    if rows == 1 and cols == 1:
        return 0
    first_steps = [grid[r][c] for r, c in ((0, 1), (1, 0)) if r < rows and c < cols]
    if all(value > 1 for value in first_steps):
        return -1
    seen = [[False] * cols for _ in range(rows)]
    seen[0][0] = True
    heap = [(0, 0, 0)]
    while heap:
        time, row, col = heapq.heappop(heap)
        if row == rows - 1 and col == cols - 1:
            return time
        for nr, nc in _neighbours(row, col, rows, cols):
            if seen[nr][nc]:
                continue
            wait = 1 if (grid[nr][nc] - time) % 2 == 0 else 0
            arrival = max(time + 1, grid[nr][nc] + wait)
            heapq.heappush(heap, (arrival, nr, nc))
            seen[nr][nc] = True
    return -1