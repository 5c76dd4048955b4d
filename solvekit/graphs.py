"""Shortest paths, best-probability paths, transitive costs and grid connectivity."""

from __future__ import annotations

import heapq
import math
from string import ascii_lowercase
from typing import Sequence

_INF = math.inf


def _build_adjacency(n: int, edges: Sequence[Sequence[float]]) -> list[list[tuple[int, float]]]:
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    return adjacency


def _reachable_within(adjacency: list[list[tuple[int, float]]], source: int, threshold: int) -> int:
    dist = [_INF] * len(adjacency)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, vertex = heapq.heappop(heap)
        if d > dist[vertex] or d >= threshold:
            continue
        for child, weight in adjacency[vertex]:
            candidate = d + weight
            if candidate < dist[child]:
                dist[child] = candidate
                heapq.heappush(heap, (candidate, child))
    return sum(1 for node, d in enumerate(dist) if node != source and d <= threshold)


def find_the_city(n: int, edges: Sequence[Sequence[int]], distance_threshold: int) -> int:
    """City reaching the fewest others within the threshold; ties go to the largest index."""
    adjacency = _build_adjacency(n, edges)
    best_count = _INF
    best_city = -1
    for city in range(n):
        count = _reachable_within(adjacency, city, distance_threshold)
        if count <= best_count:
            best_count = count
            best_city = city
    return best_city


def max_probability(
    n: int,
    edges: Sequence[Sequence[int]],
    succ_prob: Sequence[float],
    start_node: int,
    end_node: int,
) -> float:
    """Highest product of edge probabilities along a path; 0.0 when unreachable."""
    adjacency = _build_adjacency(n, [(u, v, p) for (u, v), p in zip(edges, succ_prob)])
    best = [0.0] * n
    best[start_node] = 1.0
    heap = [(-1.0, start_node)]
    while heap:
        negated, node = heapq.heappop(heap)
        probability = -negated
        if probability < best[node]:
            continue
        for child, weight in adjacency[node]:
            candidate = probability * weight
            if best[child] < candidate:
                best[child] = candidate
                heapq.heappush(heap, (-candidate, child))
    return best[end_node]


def minimum_conversion_cost(
    source: str,
    target: str,
    original: Sequence[str],
    changed: Sequence[str],
    cost: Sequence[int],
) -> int:
    """Cheapest cost to turn ``source`` into ``target`` letter by letter; -1 if impossible."""
    if len(source) != len(target):
        raise ValueError("source and target must have the same length")
    index = {letter: i for i, letter in enumerate(ascii_lowercase)}
    size = len(ascii_lowercase)
    dist = [[0 if i == j else _INF for j in range(size)] for i in range(size)]
    for before, after, price in zip(original, changed, cost):
        row = dist[index[before]]
        column = index[after]
        row[column] = min(row[column], price)

    for k in range(size):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == _INF:
                continue
            for j, onward in enumerate(through):
                if via + onward < row[j]:
                    row[j] = via + onward

    total = 0
    for before, after in zip(source, target):
        step = dist[index[before]][index[after]]
        if step == _INF:
            return -1
        total += step
    return total


def _count_islands(land: set[tuple[int, int]], limit: int = 2) -> int:
    """Count connected land components, stopping once ``limit`` is reached."""
    seen: set[tuple[int, int]] = set()
    islands = 0
    for cell in sorted(land):
        if cell in seen:
            continue
        islands += 1
        if islands >= limit:
            return islands
        stack = [cell]
        seen.add(cell)
        while stack:
            i, j = stack.pop()
            for neighbour in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)):
                if neighbour in land and neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
    return islands


def min_days_to_disconnect(grid: Sequence[Sequence[int]]) -> int:
    """Fewest land cells to turn to water so the grid is not one single island."""
    land = {(i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell}
    islands = _count_islands(land)
    if islands != 1:
        return 0
    for cell in sorted(land):
        remaining = land - {cell}
        if _count_islands(remaining) != 1:
            return 1
    return 2