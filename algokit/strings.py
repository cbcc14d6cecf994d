"""String puzzles: isomorphism, brackets, zigzags, prefixes and palindromes."""

from __future__ import annotations

from functools import lru_cache
from itertools import cycle, groupby, product
from typing import Iterable

_BRACKETS = {"(": ")", "[": "]", "{": "}"}

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def is_isomorphic(s: str, t: str) -> bool:
    """Whether the characters of s map one-to-one onto those of t, position by position."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def is_valid_parentheses(text: str) -> bool:
    """Whether every bracket in text is closed in the right order.

    Any character that is not part of a matched pair makes the text invalid.
    """
    stack: list[str] = []
    for char in text:
        if stack and _BRACKETS.get(stack[-1]) == char:
            stack.pop()
        else:
            stack.append(char)
    return not stack


def zigzag_convert(word: str, num_rows: int) -> str:
    """Write word in a zigzag over num_rows rows and read it back row by row."""
    if num_rows < 1:
        raise ValueError(f"num_rows must be at least 1, got {num_rows}")
    if num_rows == 1:
        return word
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    pattern = [*range(num_rows), *range(num_rows - 2, 0, -1)]
    for char, row in zip(word, cycle(pattern)):
        rows[row].append(char)
    return "".join("".join(row) for row in rows)


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Return the longest prefix shared by all the strings; empty input gives ''."""
    prefix = []
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def _expand(word: str, left: int, right: int) -> int:
    while left >= 0 and right < len(word) and word[left] == word[right]:
        left -= 1
        right += 1
    return right - left - 1


def longest_palindrome_length(word: str) -> int:
    """Return the length of the longest palindromic substring of word."""
    return max(
        (
            max(_expand(word, center, center), _expand(word, center, center + 1))
            for center in range(len(word))
        ),
        default=0,
    )


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if char in last_seen:
            start = max(start, last_seen[char] + 1)
        best = max(best, index - start + 1)
        last_seen[char] = index
    return best


def longest_word(words: Iterable[str]) -> str:
    """Return the longest word that can be built one letter at a time from the others.

    Ties go to the word that comes first in sorted order.
    """
    built: set[str] = set()
    best = ""
    for word in sorted(words):
        if len(word) == 1 or word[:-1] in built:
            if len(word) > len(best):
                best = word
            built.add(word)
    return best


@lru_cache(maxsize=None)
def _balanced(n: int) -> tuple[str, ...]:
    if n == 0:
        return ("",)
    return tuple(
        f"({inner}){rest}"
        for split in range(n)
        for inner in _balanced(split)
        for rest in _balanced(n - 1 - split)
    )


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of n pairs of parentheses; negative n gives []."""
    if n < 0:
        return []
    return list(_balanced(n))


def letter_combinations(digits: str) -> list[str]:
    """Return every string a phone keypad can spell from digits 2-9."""
    if not digits:
        return []
    try:
        letters = [_KEYPAD[digit] for digit in digits]
    except KeyError as error:
        raise ValueError(f"no letters on key {error.args[0]!r}") from None
    return ["".join(combination) for combination in product(*letters)]


def reduce_string(s: str) -> int:
    """Count the characters left after removing adjacent equal pairs within each run."""
    return sum(1 for _, run in groupby(s) if sum(1 for _ in run) % 2)


def collapse_runs(s: str) -> str:
    """Replace every run of equal characters with a single one."""
    return "".join(char for char, _ in groupby(s))