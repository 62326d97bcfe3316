# randex

A small library of everyday helpers for strings, searching, collections and
shared mutable state. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

### `randex.strings`

- `are_anagrams(s1, s2)`: whether both strings use the same characters.
  Whitespace is ignored, and ASCII letters are compared without regard to case.
- `longest_str(a, b)`: the longer of two strings. Length is measured in UTF-8
  bytes, and on a tie the second string is returned.
- `StrPair(a, b)`: a frozen pair of strings. Its `longest()` method follows the
  same rule.
- `is_valid_parentheses(s)`: whether `()`, `[]` and `{}` are balanced and
  properly nested. Whitespace is skipped. Any other character raises
  `ValueError`.
- `count_log_levels(logs)`: counts lines by their first word and returns a
  `dict`. A blank line raises `ValueError`.
- `find_all_containing(items, needle)`: the items that contain `needle`, in
  their original order.

### `randex.search`

- `find_first(items, predicate)`: the first matching item, or `None`.
- `find_first_index(items, predicate)`: its index, or `None`. Use the index to
  replace the element in a list.
- `two_sum(nums, target)`: indices `(i, j)` with `i < j` of two numbers that sum
  to `target`. The pair returned is the one with the smallest second index.
  Returns `None` if there is no such pair.
- `find_first_repeating_element(nums)`: the first element seen for a second
  time, or `None`.
- `max_ref(items)`: the largest item, or `None` when `items` is empty. On a tie
  the later item wins.
- `max_of_three(one, two, three)`: the largest of three values. On a tie the
  later argument wins.
- `most_frequent(items)`: the most common item, or `None` when `items` is empty.
  On a tie the item that appears first wins.
- `Wrapper(inner)`: a frozen, ordered box around a single value, with
  `unwrap()`.
- `max_wrapper(a, b)`: the larger of two wrappers. When they are equal, `b` is
  returned.

### `randex.collections_ops`

- `frequencies(items)`: a `dict` mapping each distinct item to its count.
- `filter_with(items, predicate)`: a new list of the items that match.
- `group_by(items, key_selector)`: a `dict` of lists keyed by
  `key_selector(item)`. Items keep their original order.
- `remove_duplicates(nums)`: collapses runs of equal values in a sorted list in
  place and returns the new length.
- `remove_duplicates_generic(items)`: the items without later repeats, keeping
  first occurrences.
- `dedup_by_key(items, key_fn)`: keeps the first item for each distinct key.

### `randex.shared`

- `ChatRoom`: holds one shared list of messages.
  - `create_user()` returns a `User` that posts into that list.
  - `messages()` returns a copy of the messages in the order they were sent.
- `User.send_message(message)`: appends a message to the room it belongs to.
- `Node(value)`: a tree node with a `children` list and a `parent` property.
  The parent is held by a weak reference, so `parent` is `None` for a root or
  when the parent is no longer alive.
- `add_child(parent, value)`: creates a child node, links it to `parent` and
  returns it.

## Examples

```python
from randex.strings import are_anagrams, is_valid_parentheses
from randex.search import two_sum, most_frequent
from randex.collections_ops import group_by

are_anagrams("Dormitory", "Dirty room")      # True
is_valid_parentheses("{()[]}({})")           # True
two_sum([2, 3, 5, 7, 11, 15, 20], 12)        # (2, 3)
most_frequent(["a", "b", "b", "a"])          # 'a'
group_by(["alice", "bob", "amelia"], lambda s: s[0])
# {'a': ['alice', 'amelia'], 'b': ['bob']}
```

```python
from randex.shared import ChatRoom, Node, add_child

room = ChatRoom()
room.create_user().send_message("Hello")
room.messages()                              # ['Hello']

root = Node(1)
child = add_child(root, 2)
child.parent.value                           # 1
```

## Running the tests

```
pip install ".[test]"
pytest
```