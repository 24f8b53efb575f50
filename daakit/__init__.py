"""Classic algorithms: sorting, searching, graphs, scheduling, knapsack, tours, subsets and queens."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "graphs",
    "knapsack",
    "queens",
    "scheduling",
    "searching",
    "sorting",
    "subsets",
    "tsp",
]