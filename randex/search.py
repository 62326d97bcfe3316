"""Searching sequences: predicates, pair sums, repeats, maxima and frequencies."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

__all__ = [
    "Wrapper",
    "find_first",
    "find_first_index",
    "find_first_repeating_element",
    "max_of_three",
    "max_ref",
    "max_wrapper",
    "most_frequent",
    "two_sum",
]

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def find_first(items: Iterable[T], predicate: Callable[[T], bool]) -> T | None:
    """Return the first item matching ``predicate``, or None."""
    return next((item for item in items if predicate(item)), None)


def find_first_index(items: Sequence[T], predicate: Callable[[T], bool]) -> int | None:
    """Return the index of the first item matching ``predicate``, or None.

    The index lets the caller replace the element in a mutable sequence.
    """
    return next((i for i, item in enumerate(items) if predicate(item)), None)


def two_sum(nums: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)``, ``i < j``, of two numbers adding up to ``target``.

    The pair found is the one whose second index is smallest.
    """
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        j = seen.get(target - num)
        if j is not None:
            return j, i
        seen[num] = i
    return None


def find_first_repeating_element(nums: Iterable[H]) -> H | None:
    """Return the first element that has already appeared earlier, or None."""
    seen: set[H] = set()
    for num in nums:
        if num in seen:
            return num
        seen.add(num)
    return None


def max_ref(items: Iterable[T]) -> T | None:
    """Return the largest item, or None for an empty iterable."""
    best: Any = None
    found = False
    for item in items:
        if not found or not best > item:
            best = item
            found = True
    return best


def _max2(a: T, b: T) -> T:
    """Return the larger value; when equal, the second one."""
    return a if a > b else b  # type: ignore[operator]


def max_of_three(one: T, two: T, three: T) -> T:
    """Return the largest of three values; ties go to the later argument."""
    return _max2(_max2(one, two), three)


def most_frequent(items: Sequence[H]) -> H | None:
    """Return the most frequent item; ties go to the one appearing first."""
    if not items:
        return None
    counts = Counter(items)
    top = max(counts.values())
    return next(item for item in items if counts[item] == top)


@dataclass(frozen=True, order=True)
class Wrapper(Generic[T]):
    """An ordered, immutable box around a single value."""

    inner: T

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.inner


def max_wrapper(a: Wrapper[T], b: Wrapper[T]) -> Wrapper[T]:
    """Return the larger wrapper; when equal, the second one."""
    return _max2(a, b)