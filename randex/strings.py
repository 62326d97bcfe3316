"""Small text utilities: anagrams, bracket balance, log levels and substring search."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "StrPair",
    "are_anagrams",
    "count_log_levels",
    "find_all_containing",
    "is_valid_parentheses",
    "longest_str",
]

_CLOSING_TO_OPENING = {")": "(", "}": "{", "]": "["}
_OPENING = frozenset(_CLOSING_TO_OPENING.values())


def _normalized_counts(text: str) -> Counter[str]:
    """Count characters, ignoring whitespace and ASCII case."""
    return Counter(
        ch.lower() if ch.isascii() else ch for ch in text if not ch.isspace()
    )


def are_anagrams(s1: str, s2: str) -> bool:
    """Return True if both strings use the same letters, ignoring case and spaces."""
    return _normalized_counts(s1) == _normalized_counts(s2)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def longest_str(a: str, b: str) -> str:
    """Return the longer string; on a tie the second one wins."""
    return a if _byte_len(a) > _byte_len(b) else b


@dataclass(frozen=True)
class StrPair:
    """A pair of strings that can report which one is longer."""

    a: str
    b: str

    def longest(self) -> str:
        """Return the longer of the two strings; on a tie, ``b``."""
        return longest_str(self.a, self.b)


def is_valid_parentheses(s: str) -> bool:
    """Check that brackets in ``s`` are balanced and properly nested.

    Whitespace is ignored. Any other character that is not a bracket
    raises ValueError.
    """
    stack: list[str] = []
    for ch in s:
        if ch.isspace():
            continue
        if ch in _OPENING:
            stack.append(ch)
        elif ch in _CLOSING_TO_OPENING:
            if not stack or stack.pop() != _CLOSING_TO_OPENING[ch]:
                return False
        else:
            raise ValueError(f"unexpected character {ch!r} in bracket sequence")
    return not stack


def count_log_levels(logs: Iterable[str]) -> dict[str, int]:
    """Count log lines by their first word, the log level.

    A blank line has no level and raises ValueError.
    """
    counts: Counter[str] = Counter()
    for line in logs:
        words = line.split()
        if not words:
            raise ValueError("log line has no level")
        counts[words[0]] += 1
    return dict(counts)


def find_all_containing(items: Sequence[str], needle: str) -> list[str]:
    """Return the items that contain ``needle``, in their original order."""
    return [item for item in items if needle in item]