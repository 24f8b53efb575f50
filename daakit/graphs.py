"""Shortest paths and minimum spanning trees on small weighted graphs.

Graphs are given as adjacency lists: ``adjacency[node]`` is a sequence of
``(destination, weight)`` pairs.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Optional, Sequence

Adjacency = Sequence[Sequence[tuple[int, int]]]

NO_EDGE = -1


@dataclass(frozen=True)
class SpanningTree:
    """Edges of a spanning tree and their total weight."""

    edges: tuple[tuple[int, int], ...]
    weight: int


def _normalise(adjacency: Adjacency) -> list[list[tuple[int, int]]]:
    graph = [[(int(dest), int(weight)) for dest, weight in edges] for edges in adjacency]
    size = len(graph)
    for node, edges in enumerate(graph):
        for dest, _ in edges:
            if not 0 <= dest < size:
                raise ValueError(f"edge from {node} leads to unknown node {dest}")
    return graph


def dijkstra(adjacency: Adjacency, source: int) -> list[Optional[int]]:
    """Return the shortest distance from ``source`` to each node, None where unreachable."""
    graph = _normalise(adjacency)
    if not 0 <= source < len(graph):
        raise ValueError(f"source {source} is not a node of the graph")
    distances: list[Optional[int]] = [None] * len(graph)
    distances[source] = 0
    queue = [(0, source)]
    while queue:
        distance, node = heapq.heappop(queue)
        if distance > distances[node]:
            continue
        for dest, weight in graph[node]:
            candidate = distance + weight
            current = distances[dest]
            if current is None or candidate < current:
                distances[dest] = candidate
                heapq.heappush(queue, (candidate, dest))
    return distances


def prim(adjacency: Adjacency) -> SpanningTree:
    """Grow a minimum spanning tree from node 0; edges are ``(node, parent)`` pairs."""
    graph = _normalise(adjacency)
    if not graph:
        return SpanningTree((), 0)
    visited = [False] * len(graph)
    edges: list[tuple[int, int]] = []
    total = 0
    queue = [(0, 0, -1)]
    while queue:
        weight, node, parent = heapq.heappop(queue)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for dest, edge_weight in graph[node]:
            if not visited[dest]:
                heapq.heappush(queue, (edge_weight, dest, node))
        if parent != -1:
            edges.append((node, parent))
    return SpanningTree(tuple(edges), total)


def kruskal(adjacency: Adjacency) -> SpanningTree:
    """Build a minimum spanning forest by taking the lightest edges that join two components."""
    graph = _normalise(adjacency)
    candidates = sorted(
        ((weight, src, dest) for src, edges in enumerate(graph) for dest, weight in edges),
        key=lambda edge: edge[0],
    )
    parents = list(range(len(graph)))

    def root(node: int) -> int:
        while parents[node] != node:
            parents[node] = parents[parents[node]]
            node = parents[node]
        return node

    edges: list[tuple[int, int]] = []
    total = 0
    for weight, src, dest in candidates:
        src_root, dest_root = root(src), root(dest)
        if src_root != dest_root:
            edges.append((src, dest))
            total += weight
            parents[src_root] = dest_root
    return SpanningTree(tuple(edges), total)


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return all-pairs shortest distances; -1 marks a missing edge or an unreachable pair."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("distance matrix must be square")
    dist = [[math.inf if value == NO_EDGE else value for value in row] for row in matrix]
    for k in range(size):
        via = dist[k]
        for row in dist:
            through = row[k]
            if through == math.inf:
                continue
            for j, value in enumerate(via):
                if through + value < row[j]:
                    row[j] = through + value
    return [[NO_EDGE if value == math.inf else int(value) for value in row] for row in dist]