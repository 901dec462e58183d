"""Two-pointer algorithms over sequences."""

from __future__ import annotations

from collections.abc import Sequence


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(c in remaining for c in s)


def max_operations(nums: Sequence[int], k: int) -> int:
    """Return the largest number of disjoint pairs whose sum is ``k``."""
    ordered = sorted(nums)
    left, right = 0, len(ordered) - 1
    count = 0
    while left < right:
        total = ordered[left] + ordered[right]
        if total == k:
            count += 1
            left += 1
            right -= 1
        elif total < k:
            left += 1
        else:
            right -= 1
    return count


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the given lines can hold."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the other elements."""
    nonzero = [value for value in nums if value != 0]
    zeros = [value for value in nums if value == 0]
    nums[:] = nonzero + zeros