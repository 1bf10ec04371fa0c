"""Array problems: pair sums, profits, counting and in-place rearrangements."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import chain, combinations, islice
from operator import xor
from typing import MutableSequence, Optional, Sequence


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return indices ``(i, j)``, ``i < j``, of two values that add up to ``target``.

    The first such pair in lexicographic order is returned; ``None`` if there
    is no pair at all.
    """
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return i, j
    return None


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from buying once and selling later, or 0.

    Raises ``ValueError`` for an empty price list.
    """
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    best = 0
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def majority_element(nums: Sequence[int]) -> int:
    """Return the value that fills more than half of ``nums``, or -1 if none does."""
    counts = Counter(nums).most_common(1)
    if counts and counts[0][1] > len(nums) // 2:
        return counts[0][0]
    return -1


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list in place so its distinct values lead it.

    Returns how many distinct values there are; the items past that point are
    left as they were.
    """
    if not nums:
        return 0
    last = 0
    for value in islice(nums, 1, None):
        if value != nums[last]:
            last += 1
            nums[last] = value
    return last + 1


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of ``0..len(nums)`` that ``nums`` lacks."""
    return reduce(xor, chain(range(1, len(nums) + 1), nums), 0)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def rotate_matrix(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place.

    Raises ``ValueError`` if the matrix is not square.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(reversed(column)) for column in zip(*matrix)]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place by counting them.

    Values other than 0, 1 and 2 are not counted; the counted values are
    written from the front and whatever lies beyond them is left unchanged.
    """
    counts = Counter(nums)
    ordered = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]
    nums[: len(ordered)] = ordered