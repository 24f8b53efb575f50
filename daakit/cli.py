"""Command-line front end: each subcommand reads whitespace-separated input and prints a result."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import Optional

from daakit.graphs import dijkstra, floyd_warshall, kruskal, prim
from daakit.knapsack import knapsack
from daakit.queens import solve_n_queens
from daakit.scheduling import Job, sequence_jobs
from daakit.searching import HitKind, binary_search, kmp_search, rabin_karp
from daakit.sorting import insertion_sort, merge_sort, quick_sort, selection_sort
from daakit.subsets import subset_sums, subset_sums_pruned
from daakit.tsp import travelling_salesman

_UNREACHABLE = 2**31 - 1


class InputError(ValueError):
    """Raised when the input text does not have the expected shape."""


class _Tokens:
    """Sequential reader over the whitespace-separated words of the input."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise InputError("unexpected end of input") from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise InputError(f"expected an integer, got {word!r}") from None

    def count(self) -> int:
        value = self.integer()
        if value < 0:
            raise InputError(f"expected a count, got {value}")
        return value

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def matrix(self, size: int) -> list[list[int]]:
        return [self.integers(size) for _ in range(size)]

    def adjacency(self) -> list[list[tuple[int, int]]]:
        graph = []
        for _ in range(self.count()):
            edges = self.count()
            graph.append([(self.integer(), self.integer()) for _ in range(edges)])
        return graph


Handler = Callable[[_Tokens, argparse.Namespace], Iterable[str]]


def _join(values: Iterable[object]) -> str:
    return " ".join(str(value) for value in values)


def _sorter(sort: Callable[[list[int]], list[int]]) -> Handler:
    def handle(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
        yield _join(sort(tokens.integers(tokens.count())))

    return handle


def _binary_search(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    values = tokens.integers(tokens.count())
    key = tokens.integer()
    index = binary_search(values, key)
    yield "Not Found" if index is None else f"Found at : {index}"


def _dijkstra(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    distances = dijkstra(tokens.adjacency(), args.source)
    yield _join(_UNREACHABLE if d is None else d for d in distances)


def _prim(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    tree = prim(tokens.adjacency())
    for node, parent in tree.edges:
        yield f"{node} {parent}"
    yield ""
    yield str(tree.weight)


def _kruskal(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    tree = kruskal(tokens.adjacency())
    for src, dest in tree.edges:
        yield f"{src} {dest}"
    yield str(tree.weight)


def _jobs(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    jobs = [
        Job(tokens.word(), tokens.integer(), tokens.integer())
        for _ in range(tokens.count())
    ]
    schedule = sequence_jobs(jobs)
    for job, slot in schedule.assignments:
        yield f"{-1 if slot is None else slot} {job.id}"
    yield _join(schedule.order)


def _floyd_warshall(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    size = tokens.count()
    for row in floyd_warshall(tokens.matrix(size)):
        yield "".join(f"{value:5d}" for value in row)


def _knapsack(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    items = [(tokens.integer(), tokens.integer()) for _ in range(tokens.count())]
    yield str(knapsack(items, tokens.integer()))


def _tsp(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    size = tokens.count()
    tour = travelling_salesman(tokens.matrix(size))
    yield str(tour.cost)
    yield "->".join(str(node + 1) for node in tour.closed_route)


def _subset_sum_pruned(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    count = tokens.count()
    target = tokens.integer()
    for subset in subset_sums_pruned(tokens.integers(count), target):
        yield _join(subset)


def _subset_sum(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    numbers = tokens.integers(tokens.count())
    for subset in subset_sums(numbers, tokens.integer()):
        yield _join(subset)


def _n_queens(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    boards = solve_n_queens(tokens.count())
    for board in boards:
        yield from board
        yield ""
    yield str(len(boards))


def _kmp(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    text = tokens.word()
    yield _join(kmp_search(text, tokens.word()))


def _rabin_karp(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    text = tokens.word()
    pattern = tokens.word()
    for hit in rabin_karp(text, pattern, args.modulus):
        label = "pattern found" if hit.kind is HitKind.MATCH else "spurious hit"
        yield f"{label} at : {hit.position}"


_COMMANDS: dict[str, tuple[Handler, str]] = {
    "selection-sort": (_sorter(selection_sort), "sort: n, then n integers"),
    "insertion-sort": (_sorter(insertion_sort), "sort: n, then n integers"),
    "merge-sort": (_sorter(merge_sort), "sort: n, then n integers"),
    "quick-sort": (_sorter(quick_sort), "sort: n, then n integers"),
    "binary-search": (_binary_search, "n, n integers, then the key"),
    "dijkstra": (_dijkstra, "shortest distances over an adjacency list"),
    "prim": (_prim, "minimum spanning tree grown from node 0"),
    "kruskal": (_kruskal, "minimum spanning tree from the lightest edges"),
    "jobs": (_jobs, "n, then n lines of: id deadline profit"),
    "floyd-warshall": (_floyd_warshall, "n, then an n-by-n matrix; -1 for no edge"),
    "knapsack": (_knapsack, "n, n lines of: weight profit, then the capacity"),
    "tsp": (_tsp, "n, then an n-by-n cost matrix"),
    "subset-sum-pruned": (_subset_sum_pruned, "n target, then n integers"),
    "subset-sum": (_subset_sum, "n, n integers, then the target"),
    "n-queens": (_n_queens, "the board size"),
    "kmp": (_kmp, "text, then pattern"),
    "rabin-karp": (_rabin_karp, "digit text, then digit pattern"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daakit", description="Run a classic algorithm on input read from stdin."
    )
    parser.add_argument(
        "-i", "--input", metavar="PATH", help="read input from PATH instead of stdin"
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (handler, summary) in _COMMANDS.items():
        sub = commands.add_parser(name, help=summary, description=summary)
        sub.set_defaults(handler=handler)
        if name == "dijkstra":
            sub.add_argument("--source", type=int, default=2, help="start node (default 2)")
        elif name == "rabin-karp":
            sub.add_argument("--modulus", type=int, default=13, help="hash modulus (default 13)")
    return parser


def _read_input(path: Optional[str]) -> str:
    if path is None:
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Optional[list[str]] = None) -> int:
    """Parse ``argv``, run the chosen algorithm and print its result; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        lines = list(args.handler(_Tokens(_read_input(args.input)), args))
    except (ValueError, OSError) as exc:
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())