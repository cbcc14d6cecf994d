import pytest

from algokit.dynamic import (
    MinStack,
    coin_choices,
    coin_table,
    longest_increasing_subsequence,
    max_path_sum,
    min_coins,
)


def test_coin_table_book_example():
    assert coin_table([1, 3, 4], 10) == [0, 1, 2, 1, 1, 2, 2, 2, 2, 3, 3]


def test_coin_choices_book_example():
    assert coin_choices([1, 3, 4], 10) == [3, 3, 4]


def test_min_coins_book_example():
    assert min_coins([1, 3, 4], 10) == 3


@pytest.mark.parametrize("amount", [1, 5, 7, 12, 23])
def test_choices_agree_with_minimum(amount):
    coins = [1, 2, 4]
    choices = coin_choices(coins, amount)
    assert sum(choices) == amount
    assert len(choices) == min_coins(coins, amount)
    assert all(coin in coins for coin in choices)


def test_coin_choices_tie_break_follows_coin_order():
    assert coin_choices([1, 2, 4], 7) == [1, 2, 4]


def test_zero_amount():
    assert min_coins([1, 2, 4], 0) == 0
    assert coin_choices([1, 2, 4], 0) == []


def test_unreachable_amount():
    assert coin_table([3], 4) == [0, None, None, 1, None]
    with pytest.raises(ValueError):
        min_coins([3], 4)
    with pytest.raises(ValueError):
        coin_choices([3], 4)


@pytest.mark.parametrize("coins, amount", [([1, 2], -1), ([0, 1], 3), ([-2, 1], 3)])
def test_coin_rejects_bad_input(coins, amount):
    with pytest.raises(ValueError):
        coin_table(coins, amount)


def test_longest_increasing_subsequence():
    assert longest_increasing_subsequence([6, 2, 5, 1, 7, 4, 8, 3]) == 4


@pytest.mark.parametrize(
    "values, expected",
    [([], 0), ([5], 1), ([3, 2, 1], 1), ([2, 2, 2], 1), ([1, 2, 3], 3)],
)
def test_longest_increasing_subsequence_edges(values, expected):
    assert longest_increasing_subsequence(values) == expected


def test_max_path_sum_book_grid():
    grid = [
        [3, 7, 9, 2, 7],
        [9, 8, 3, 5, 5],
        [1, 7, 9, 8, 5],
        [3, 8, 6, 4, 10],
        [6, 3, 9, 7, 8],
    ]
    assert max_path_sum(grid) == 67


def test_max_path_sum_single_row_and_column():
    assert max_path_sum([[1, 2, 3]]) == 6
    assert max_path_sum([[1], [2], [3]]) == 6


def test_max_path_sum_empty():
    assert max_path_sum([]) == 0


def test_max_path_sum_ragged():
    with pytest.raises(ValueError):
        max_path_sum([[1, 2], [3]])


def test_min_stack_book_sequence():
    stack = MinStack()
    for value in [10, 20, 4, 24, 1, 2, 43, -1, 23]:
        stack.push(value)
    popped = []
    while len(stack):
        popped.append((stack.top(), stack.minimum()))
        stack.pop()
    assert popped == [
        (23, -1),
        (-1, -1),
        (43, 1),
        (2, 1),
        (1, 1),
        (24, 4),
        (4, 4),
        (20, 10),
        (10, 10),
    ]


def test_min_stack_pop_returns_value():
    stack = MinStack()
    stack.push(5)
    stack.push(3)
    assert stack.pop() == 3
    assert stack.minimum() == 5
    assert len(stack) == 1


def test_min_stack_pop_empty_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.pop()


def test_min_stack_top_empty_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.top()


def test_min_stack_minimum_empty_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.minimum()


def test_min_stack_empty_after_draining_raises():
    stack = MinStack()
    stack.push(7)
    assert stack.pop() == 7
    assert len(stack) == 0
    with pytest.raises(IndexError):
        stack.top()