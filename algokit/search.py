"""Binary searches over rotated arrays, peaks and eating speeds."""

from __future__ import annotations

from typing import Sequence


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted array of distinct values.

    Raises ``ValueError`` for an empty array.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] <= nums[high]:
            high = mid
        else:
            low = mid + 1
    return nums[low]


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of a value larger than its neighbours.

    Beyond both ends the array counts as minus infinity. Raises
    ``ValueError`` for an empty array.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] < nums[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low


def search_rotated(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted array that may hold duplicates."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
        elif nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def can_finish(piles: Sequence[int], h: int, speed: int) -> bool:
    """Tell whether eating ``speed`` per hour clears every pile within ``h`` hours.

    Raises ``ValueError`` if ``speed`` is below 1.
    """
    if speed < 1:
        raise ValueError(f"speed must be at least 1, got {speed}")
    return sum(-(-pile // speed) for pile in piles) <= h


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the lowest speed that clears every pile within ``h`` hours.

    The search never goes past the largest pile, so that is the answer when
    no speed is fast enough. Raises ``ValueError`` for no piles.
    """
    if not piles:
        raise ValueError("piles must not be empty")
    low, high = 1, max(piles)
    while low < high:
        mid = (low + high) // 2
        if can_finish(piles, h, mid):
            high = mid
        else:
            low = mid + 1
    return low