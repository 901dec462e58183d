"""Algorithms over sequences of integers."""

from __future__ import annotations

import heapq
import math
import operator
from collections.abc import Sequence
from itertools import accumulate, groupby


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` stairs taking one or two steps at a time."""
    if n < 0:
        raise ValueError("the number of stairs must not be negative")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def third_max(nums: Sequence[int]) -> int:
    """Return the third largest distinct value, or the largest if there are fewer than three."""
    top = heapq.nlargest(3, set(nums))
    if not top:
        raise ValueError("third_max() needs at least one number")
    return top[2] if len(top) == 3 else top[0]


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three elements that lies closest to ``target``."""
    ordered = sorted(nums)
    if len(ordered) < 3:
        raise ValueError("three_sum_closest() needs at least three numbers")
    best = sum(ordered[:3])
    last = len(ordered) - 1
    for i, first in enumerate(ordered[:-2]):
        left, right = i + 1, last
        while left < right:
            total = first + ordered[left] + ordered[right]
            if abs(target - total) < abs(target - best):
                best = total
            if total == target:
                return target
            if total < target:
                left += 1
            else:
                right -= 1
    return best


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct quadruplet of elements whose sum is ``target``."""
    ordered = sorted(nums)
    n = len(ordered)
    found: list[list[int]] = []
    i = 0
    while i < n - 3:
        j = i + 1
        while j < n - 2:
            rest = target - ordered[i] - ordered[j]
            low, high = j + 1, n - 1
            while low < high:
                pair = ordered[low] + ordered[high]
                if pair < rest:
                    low += 1
                elif pair > rest:
                    high -= 1
                else:
                    found.append([ordered[i], ordered[j], ordered[low], ordered[high]])
                    low_value, high_value = ordered[low], ordered[high]
                    while low < high and ordered[low] == low_value:
                        low += 1
                    while low < high and ordered[high] == high_value:
                        high -= 1
            while j + 1 < n and ordered[j] == ordered[j + 1]:
                j += 1
            j += 1
        while i + 1 < n and ordered[i] == ordered[i + 1]:
            i += 1
        i += 1
    return found


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """Flag each kid who would hold the most candies after receiving the extra ones."""
    if not candies:
        raise ValueError("kids_with_candies() needs at least one kid")
    most = max(candies)
    return [count + extra_candies >= most for count in candies]


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit into the bed without two of them being adjacent."""
    if n == 0:
        return True
    bed = list(flowerbed)
    last = len(bed) - 1
    for i, plot in enumerate(bed):
        if plot == 0 and (i == 0 or bed[i - 1] == 0) and (i == last or bed[i + 1] == 0):
            bed[i] = 1
            n -= 1
            if n == 0:
                return True
    return False


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Tell whether the sequence holds a strictly increasing subsequence of length three."""
    smallest = middle = math.inf
    for value in nums:
        if value <= smallest:
            smallest = value
        elif value <= middle:
            middle = value
        else:
            return True
    return False


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits, most significant first."""
    result: list[int] = []
    carry = 1
    for digit in reversed(digits):
        carry, digit = divmod(digit + carry, 10)
        result.append(digit)
    if carry:
        result.append(1)
    result.reverse()
    return result


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    prefix = list(accumulate(nums, operator.mul, initial=1))[:-1]
    suffix = list(accumulate(reversed(nums), operator.mul, initial=1))[:-1]
    return [before * after for before, after in zip(prefix, reversed(suffix))]


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its first k items are distinct; return k."""
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a sorted sequence, or where it would be inserted."""
    if not nums:
        return 0
    start, end, mid = 0, len(nums) - 1, 0
    while start <= end:
        mid = (start + end) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            start = mid + 1
        else:
            end = mid - 1
    return mid + 1 if target > nums[mid] else mid


def single_number(nums: Sequence[int]) -> int:
    """Return the one element that appears once when every other appears twice."""
    ordered = sorted(nums)
    if not ordered:
        raise ValueError("single_number() needs at least one number")
    for first, second in zip(ordered[::2], ordered[1::2]):
        if first != second:
            return first
    return ordered[-1]


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two elements summing to ``target``, or an empty list."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []