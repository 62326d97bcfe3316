"""Collection helpers: counting, filtering, grouping and de-duplication."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Hashable, Iterable
from itertools import groupby
from typing import TypeVar

__all__ = [
    "dedup_by_key",
    "filter_with",
    "frequencies",
    "group_by",
    "remove_duplicates",
    "remove_duplicates_generic",
]

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)
K = TypeVar("K", bound=Hashable)


def frequencies(items: Iterable[H]) -> dict[H, int]:
    """Map each distinct item to the number of times it occurs."""
    return dict(Counter(items))


def filter_with(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return a new list of the items for which ``predicate`` is true."""
    return [item for item in items if predicate(item)]


def group_by(items: Iterable[T], key_selector: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items by ``key_selector(item)``, keeping their original order."""
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key_selector(item), []).append(item)
    return groups


def remove_duplicates(nums: list[T]) -> int:
    """Collapse runs of equal values in a sorted list in place.

    The list is truncated to its unique values and their count is returned.
    """
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_duplicates_generic(items: Iterable[H]) -> list[H]:
    """Return the items with later repeats dropped, keeping first occurrences."""
    return list(dict.fromkeys(items))


def dedup_by_key(items: Iterable[T], key_fn: Callable[[T], K]) -> list[T]:
    """Keep only the first item for each distinct ``key_fn(item)``."""
    seen: set[K] = set()
    result: list[T] = []
    for item in items:
        key = key_fn(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result