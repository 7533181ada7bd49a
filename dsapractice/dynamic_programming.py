"""Dynamic programming questions: counting, games, knapsacks, subsequences and subarrays."""

from __future__ import annotations

from typing import Iterable, Sequence

BOOLEAN_MOD = 1003

_SYMBOLS = frozenset("TF")
_OPERATORS = frozenset("|&^")

# Keys reachable from each digit (itself included) on a phone keypad.
_KEYPAD_MOVES: tuple[tuple[int, ...], ...] = (
    (0, 8),
    (1, 2, 4),
    (2, 1, 3, 5),
    (3, 2, 6),
    (4, 1, 5, 7),
    (5, 2, 4, 6, 8),
    (6, 3, 5, 9),
    (7, 4, 8),
    (8, 0, 5, 7, 9),
    (9, 6, 8),
)


def count_boolean_parenthesizations(expression: str) -> int:
    """Ways, modulo 1003, to parenthesize ``expression`` so that it evaluates to true.

    The expression alternates ``T``/``F`` with the operators ``|``, ``&`` and ``^``.
    Raises ``ValueError`` for anything else.
    """
    if len(expression) % 2 == 0:
        raise ValueError("expression must alternate symbols and operators")
    symbols = expression[::2]
    operators = expression[1::2]
    if not set(symbols) <= _SYMBOLS or not set(operators) <= _OPERATORS:
        raise ValueError(f"malformed boolean expression {expression!r}")

    n = len(symbols)
    true = [[0] * n for _ in range(n)]
    false = [[0] * n for _ in range(n)]
    for i, symbol in enumerate(symbols):
        true[i][i] = int(symbol == "T")
        false[i][i] = int(symbol == "F")

    for span in range(1, n):
        for low in range(n - span):
            high = low + span
            t = f = 0
            for split in range(low, high):
                lt, lf = true[low][split], false[low][split]
                rt, rf = true[split + 1][high], false[split + 1][high]
                operator = operators[split]
                if operator == "|":
                    t += lt * rt + lt * rf + lf * rt
                    f += lf * rf
                elif operator == "&":
                    t += lt * rt
                    f += lt * rf + lf * rt + lf * rf
                else:
                    t += lt * rf + lf * rt
                    f += lt * rt + lf * rf
            true[low][high] = t % BOOLEAN_MOD
            false[low][high] = f % BOOLEAN_MOD
    return true[0][n - 1]


def find_coin_game_winner(n: int, x: int, y: int) -> bool:
    """True when the first player wins a pile of ``n`` coins.

    Players alternately take 1, ``x`` or ``y`` coins; whoever takes the last coin wins.
    Raises ``ValueError`` for a negative pile or a move smaller than one.
    """
    if n < 0:
        raise ValueError("pile size must not be negative")
    if x < 1 or y < 1:
        raise ValueError("moves must take at least one coin")
    wins = [False] * (n + 1)
    if n >= 1:
        wins[1] = True
    for pile in range(2, n + 1):
        wins[pile] = any(not wins[pile - move] for move in (1, x, y) if move <= pile)
    return wins[n]


def max_gold(grid: Sequence[Sequence[int]]) -> int:
    """Most gold collected walking from the first column to the last.

    Each step moves one column right, to the same row or a neighbouring one.
    Returns 0 for an empty grid; raises ``ValueError`` for ragged or column-less rows.
    """
    rows = [list(row) for row in grid]
    if not rows:
        return 0
    width = len(rows[0])
    if width == 0 or any(len(row) != width for row in rows):
        raise ValueError("grid rows must be non-empty and of equal length")
    columns = list(zip(*rows))
    best = list(columns[0])
    for column in columns[1:]:
        best = [
            gold + max(best[max(row - 1, 0) : row + 2])
            for row, gold in enumerate(column)
        ]
    return max([0, *best])


def unbounded_knapsack(capacity: int, values: Iterable[int], weights: Iterable[int]) -> int:
    """Greatest value fitting in ``capacity`` when each item may be taken any number of times.

    Raises ``ValueError`` for mismatched lists, a negative capacity or a weight below one.
    """
    value_list = list(values)
    weight_list = list(weights)
    if len(value_list) != len(weight_list):
        raise ValueError("values and weights differ in length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 1 for weight in weight_list):
        raise ValueError("weights must be positive")
    items = list(zip(value_list, weight_list))
    best = [0] * (capacity + 1)
    for load in range(1, capacity + 1):
        best[load] = max(
            (value + best[load - weight] for value, weight in items if weight <= load),
            default=0,
        )
    return best[capacity]


def lcs_of_three(a: str, b: str, c: str) -> int:
    """Length of the longest subsequence common to all three strings."""
    table = [[[0] * (len(c) + 1) for _ in range(len(b) + 1)] for _ in range(len(a) + 1)]
    for i, ca in enumerate(a, 1):
        for j, cb in enumerate(b, 1):
            for k, cc in enumerate(c, 1):
                if ca == cb == cc:
                    table[i][j][k] = table[i - 1][j - 1][k - 1] + 1
                else:
                    table[i][j][k] = max(
                        table[i - 1][j][k], table[i][j - 1][k], table[i][j][k - 1]
                    )
    return table[len(a)][len(b)][len(c)]


def longest_adjacent_difference_subsequence(values: Iterable[int]) -> int:
    """Length of the longest subsequence whose neighbours differ by exactly one."""
    seq = list(values)
    lengths: list[int] = []
    for value in seq:
        lengths.append(
            1
            + max(
                (length for prev, length in zip(seq, lengths) if abs(value - prev) == 1),
                default=0,
            )
        )
    return max(lengths, default=0)


def max_sum_increasing_subsequence(values: Iterable[int]) -> int:
    """Largest sum of a strictly increasing subsequence.

    Raises ``ValueError`` for an empty sequence.
    """
    seq = list(values)
    if not seq:
        raise ValueError("empty sequence")
    sums: list[int] = []
    for value in seq:
        sums.append(value + max([0, *(s for prev, s in zip(seq, sums) if prev < value)]))
    return max(sums)


def keypad_count(n: int) -> int:
    """How many ``n``-digit numbers can be typed moving only to the same or an adjacent key.

    Raises ``ValueError`` when ``n`` is below one.
    """
    if n < 1:
        raise ValueError("length must be at least one")
    counts = [1] * 10
    for _ in range(n - 1):
        counts = [sum(counts[key] for key in moves) for moves in _KEYPAD_MOVES]
    return sum(counts)


def optimal_game_amount(values: Iterable[int]) -> int:
    """Most the first player can secure taking coins from either end against an optimal rival."""
    seq = list(values)
    n = len(seq)
    if n == 0:
        return 0
    best = [[0] * n for _ in range(n)]
    for i, value in enumerate(seq):
        best[i][i] = value
    for i in range(n - 1):
        best[i][i + 1] = max(seq[i], seq[i + 1])
    for span in range(2, n):
        for i in range(n - span):
            j = i + span
            take_left = seq[i] + min(best[i + 1][j - 1], best[i + 2][j])
            take_right = seq[j] + min(best[i + 1][j - 1], best[i][j - 2])
            best[i][j] = max(take_left, take_right)
    return best[0][n - 1]


def min_palindromic_cuts(text: str) -> int:
    """Fewest cuts splitting ``text`` into palindromes; 0 for an empty string."""
    n = len(text)
    if n == 0:
        return 0
    is_palindrome = [[False] * n for _ in range(n)]
    cuts = [0] * n
    for end, last in enumerate(text):
        best = end
        for start in range(end + 1):
            if text[start] == last and (end - start < 2 or is_palindrome[start + 1][end - 1]):
                is_palindrome[start][end] = True
                best = 0 if start == 0 else min(best, cuts[start - 1] + 1)
        cuts[end] = best
    return cuts[-1]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run.

    Raises ``ValueError`` for an empty sequence.
    """
    seq = list(values)
    if not seq:
        raise ValueError("empty sequence")
    best = seq[0]
    running = 0
    for value in seq:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def max_product_subarray(values: Iterable[int]) -> int:
    """Largest product of a non-empty contiguous run; 0 for an empty sequence."""
    seq = list(values)
    if not seq:
        return 0
    best = high = low = seq[0]
    for value in seq[1:]:
        if value < 0:
            high, low = low, high
        high = max(value, high * value)
        low = min(value, low * value)
        best = max(best, high)
    return best