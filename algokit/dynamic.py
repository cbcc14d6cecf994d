"""Dynamic programming classics and a stack that tracks its minimum."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from itertools import accumulate
from typing import Iterable, Optional, Sequence


def _solve_coins(
    coins: Iterable[int], x: int
) -> tuple[list[Optional[int]], list[Optional[int]]]:
    coins = list(coins)
    if x < 0:
        raise ValueError(f"amount must not be negative, got {x}")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")

    counts: list[Optional[int]] = [0] + [None] * x
    first: list[Optional[int]] = [None] * (x + 1)
    for amount in range(1, x + 1):
        options = [
            (counts[amount - coin] + 1, coin)
            for coin in coins
            if coin <= amount and counts[amount - coin] is not None
        ]
        if options:
            # min keeps the earliest coin among equally good choices
            counts[amount], first[amount] = min(options, key=lambda option: option[0])
    return counts, first


def coin_table(coins: Iterable[int], x: int) -> list[Optional[int]]:
    """Fewest coins for every amount from 0 to x; None where an amount cannot be made."""
    counts, _ = _solve_coins(coins, x)
    return counts


def min_coins(coins: Iterable[int], x: int) -> int:
    """Fewest coins that add up to x; ValueError if x cannot be made."""
    counts, _ = _solve_coins(coins, x)
    result = counts[x]
    if result is None:
        raise ValueError(f"amount {x} cannot be made from these coins")
    return result


def coin_choices(coins: Iterable[int], x: int) -> list[int]:
    """The coins of an optimal way to make x, in the order they are taken."""
    counts, first = _solve_coins(coins, x)
    if counts[x] is None:
        raise ValueError(f"amount {x} cannot be made from these coins")
    chosen = []
    while x:
        coin = first[x]
        assert coin is not None
        chosen.append(coin)
        x -= coin
    return chosen


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def max_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Largest sum along a path from the top-left to the bottom-right cell.

    The path moves only right or down. An empty grid gives 0; ragged rows
    raise ValueError.
    """
    rows = [list(row) for row in grid]
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    if width == 0:
        return 0

    best = list(accumulate(rows[0]))
    for row in rows[1:]:
        current: list[int] = []
        for above, value in zip(best, row):
            current.append((max(above, current[-1]) if current else above) + value)
        best = current
    return best[-1]


@dataclass
class MinStack:
    """A stack that also reports the smallest value it holds."""

    _items: list[tuple[int, int]] = field(default_factory=list, repr=False)

    def push(self, value: int) -> None:
        """Put value on top of the stack."""
        smallest = min(value, self._items[-1][1]) if self._items else value
        self._items.append((value, smallest))

    def pop(self) -> int:
        """Remove and return the top value; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self) -> int:
        """Return the top value; IndexError when empty."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def minimum(self) -> int:
        """Return the smallest value on the stack; IndexError when empty."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)