"""Travelling salesman by trying every tour that starts and ends at node 0."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise, permutations
from typing import Sequence


@dataclass(frozen=True)
class Tour:
    """A round trip from node 0 through every other node and back to 0."""

    cost: int
    route: tuple[int, ...]

    @property
    def closed_route(self) -> tuple[int, ...]:
        """The route with the return to the starting node appended."""
        return self.route + (self.route[0],)


def _tour_cost(matrix: Sequence[Sequence[int]], route: tuple[int, ...]) -> int:
    return sum(matrix[a][b] for a, b in pairwise(route)) + matrix[route[-1]][route[0]]


def travelling_salesman(matrix: Sequence[Sequence[int]]) -> Tour:
    """Return the cheapest tour; among equally cheap tours the first in lexicographic order."""
    size = len(matrix)
    if size == 0:
        raise ValueError("cost matrix must not be empty")
    if any(len(row) != size for row in matrix):
        raise ValueError("cost matrix must be square")
    best: Tour | None = None
    for rest in permutations(range(1, size)):
        route = (0, *rest)
        cost = _tour_cost(matrix, route)
        if best is None or cost < best.cost:
            best = Tour(cost, route)
    assert best is not None
    return best