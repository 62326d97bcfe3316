import pytest

from randex.strings import (
    StrPair,
    are_anagrams,
    count_log_levels,
    find_all_containing,
    is_valid_parentheses,
    longest_str,
)


@pytest.mark.parametrize(
    ("s1", "s2", "expected"),
    [
        ("listen", "silent", True),
        ("rail safety", "fairy tales", True),
        ("hello", "world", False),
        ("aabb", "ab", False),
        ("Dormitory", "Dirty room", True),
    ],
)
def test_are_anagrams(s1, s2, expected):
    assert are_anagrams(s1, s2) is expected


def test_are_anagrams_is_symmetric():
    assert are_anagrams("Dirty room", "Dormitory") == are_anagrams("Dormitory", "Dirty room")
    assert are_anagrams("ab", "aabb") == are_anagrams("aabb", "ab")


def test_longest_str():
    assert longest_str("short", "longer string") == "longer string"
    assert longest_str("longer string", "short") == "longer string"


def test_longest_str_tie_returns_second():
    first = "abc"
    second = "xyz"
    assert longest_str(first, second) is second


def test_str_pair_longest():
    pair = StrPair("short", "longer string")
    assert pair.longest() == "longer string"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("()", True),
        ("()[]{}", True),
        ("(]", False),
        ("([)]", False),
        ("{()[]}{}", True),
        ("{()[]}({})", True),
    ],
)
def test_is_valid_parentheses(text, expected):
    assert is_valid_parentheses(text) is expected


def test_is_valid_parentheses_ignores_whitespace():
    assert is_valid_parentheses(" ( [ ] ) ") == is_valid_parentheses("([])")


def test_is_valid_parentheses_unclosed_and_unopened():
    assert not is_valid_parentheses("(")
    assert not is_valid_parentheses(")")


def test_is_valid_parentheses_rejects_other_characters():
    with pytest.raises(ValueError):
        is_valid_parentheses("(a)")


def test_count_log_levels():
    logs = [
        "INFO User logged in: user_id=42",
        "ERROR Disk is full",
        "INFO User logged out: user_id=42",
        "WARNING High memory usage",
    ]
    result = count_log_levels(logs)
    assert result["INFO"] == 2
    assert result["ERROR"] == 1
    assert result["WARNING"] == 1
    assert sum(result.values()) == len(logs)


def test_count_log_levels_blank_line_raises():
    with pytest.raises(ValueError):
        count_log_levels(["INFO ok", "   "])


def test_find_all_containing():
    data = ["rustacean", "crab", "trust", "safe", "fast"]
    assert find_all_containing(data, "st") == ["rustacean", "trust", "fast"]


def test_find_all_containing_keeps_identity_and_order():
    data = ["rustacean", "crab", "trust", "safe", "fast"]
    result = find_all_containing(data, "a")
    assert all("a" in item for item in result)
    assert [data.index(item) for item in result] == sorted(data.index(item) for item in result)