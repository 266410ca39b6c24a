"""Graph problems on trees and directed edge lists."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from collections.abc import Iterable, Sequence


def _adjacency(edges: Iterable[Sequence[int]]) -> dict[int, list[int]]:
    graph: defaultdict[int, list[int]] = defaultdict(list)
    for edge in edges:
        graph[edge[0]].append(edge[1])
        graph[edge[1]].append(edge[0])
    return dict(graph)


def _count_within(graph: dict[int, list[int]], start: int, limit: int) -> int:
    if limit < 0:
        return 0
    seen = {start}
    frontier = [start]
    count = 1
    for _ in range(limit):
        if not frontier:
            break
        following = []
        for node in frontier:
            for neighbour in graph[node]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    following.append(neighbour)
        count += len(following)
        frontier = following
    return count


def max_target_nodes(
    edges1: Iterable[Sequence[int]], edges2: Iterable[Sequence[int]], k: int
) -> list[int]:
    """For each node of the first tree, the most nodes within ``k`` edges once
    it is joined by one edge to some node of the second tree."""
    first = _adjacency(edges1)
    second = _adjacency(edges2)
    best_second = max((_count_within(second, node, k - 1) for node in second), default=0)
    return [_count_within(first, node, k) + best_second for node in range(len(first))]


def valid_arrangement(pairs: Iterable[Sequence[int]]) -> list[list[int]]:
    """Order directed pairs so that each one ends where the next begins."""
    edges = [(pair[0], pair[1]) for pair in pairs]
    if not edges:
        return []
    adjacency: defaultdict[int, deque[int]] = defaultdict(deque)
    out_degree: Counter[int] = Counter()
    in_degree: Counter[int] = Counter()
    for start, end in edges:
        adjacency[start].append(end)
        out_degree[start] += 1
        in_degree[end] += 1
    origin = next(
        (node for node in out_degree if out_degree[node] == in_degree[node] + 1),
        edges[0][0],
    )
    stack = [origin]
    route: list[int] = []
    while stack:
        pending = adjacency.get(stack[-1])
        if pending:
            stack.append(pending.popleft())
        else:
            route.append(stack.pop())
    route.reverse()
    return [[a, b] for a, b in zip(route, route[1:])]