"""Algorithms built on hash sets and counters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def find_difference(nums1: Sequence[int], nums2: Sequence[int]) -> list[list[int]]:
    """Return the distinct values found only in ``nums1`` and those found only in ``nums2``."""
    set1, set2 = set(nums1), set(nums2)
    only_first = [value for value in dict.fromkeys(nums1) if value not in set2]
    only_second = [value for value in dict.fromkeys(nums2) if value not in set1]
    return [only_first, only_second]


def close_strings(word1: str, word2: str) -> bool:
    """Tell whether one word can become the other by swapping characters or letter labels."""
    if len(word1) != len(word2):
        return False
    freq1, freq2 = Counter(word1), Counter(word2)
    if freq1.keys() != freq2.keys():
        return False
    return sorted(freq1.values()) == sorted(freq2.values())


def unique_occurrences(arr: Sequence[int]) -> bool:
    """Tell whether every value occurs a different number of times."""
    counts = Counter(arr).values()
    return len(set(counts)) == len(counts)