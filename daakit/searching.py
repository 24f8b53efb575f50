"""Searching in sorted sequences and in text."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Optional

_DIGITS = frozenset("0123456789")


def binary_search(values: Iterable[int], key: int) -> Optional[int]:
    """Sort ``values`` and return an index of ``key`` in the sorted order, or None."""
    ordered = sorted(values)
    left, right = 0, len(ordered) - 1
    while left <= right:
        middle = left + (right - left) // 2
        if ordered[middle] == key:
            return middle
        if key < ordered[middle]:
            right = middle - 1
        else:
            left = middle + 1
    return None


def compute_lps(pattern: str) -> list[int]:
    """Return the longest proper prefix that is also a suffix for each prefix of ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length == 0:
            lps[i] = 0
            i += 1
        else:
            length = lps[length - 1]
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return the 1-based start positions of every occurrence of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = compute_lps(pattern)
    found: list[int] = []
    j = 0
    for i, char in enumerate(text):
        while j > 0 and pattern[j] != char:
            j = lps[j - 1]
        if pattern[j] == char:
            j += 1
        if j == len(pattern):
            found.append(i - j + 2)
            j = lps[j - 1]
    return found


class HitKind(enum.Enum):
    """Outcome of a hash match in the Rabin-Karp search."""

    MATCH = "pattern found"
    SPURIOUS = "spurious hit"


@dataclass(frozen=True)
class RabinKarpHit:
    """A window whose hash equalled the pattern's, at a 1-based position."""

    kind: HitKind
    position: int


def _require_digits(name: str, value: str) -> None:
    if not value or not set(value) <= _DIGITS:
        raise ValueError(f"{name} must be a non-empty string of decimal digits")


def rabin_karp(text: str, pattern: str, modulus: int = 13) -> list[RabinKarpHit]:
    """Search a digit string for a digit pattern, reporting every hash hit.

    Each window is hashed as its decimal value modulo ``modulus``; windows whose
    hash equals the pattern's are checked and reported as a match or a spurious hit.
    """
    _require_digits("pattern", pattern)
    if text:
        _require_digits("text", text)
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    width = len(pattern)
    target = int(pattern) % modulus
    hits: list[RabinKarpHit] = []
    for start in range(len(text) - width + 1):
        window = text[start:start + width]
        if int(window) % modulus != target:
            continue
        kind = HitKind.MATCH if window == pattern else HitKind.SPURIOUS
        hits.append(RabinKarpHit(kind, start + 1))
    return hits