"""Algorithms over strings and character lists."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby

_VOWELS = frozenset("aeiouAEIOU")


def is_vowel(c: str) -> bool:
    """Tell whether ``c`` is an English vowel, in either case."""
    return c in _VOWELS


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving other characters in place."""
    chars = list(s)
    positions = [i for i, c in enumerate(chars) if is_vowel(c)]
    for target, source in zip(positions, reversed(positions)):
        chars[target] = s[source]
    return "".join(chars)


def reverse_words(s: str) -> str:
    """Reverse the order of space-separated words, joining them with single spaces."""
    words = [word for word in s.split(" ") if word]
    if not words:
        raise ValueError("reverse_words() needs at least one word")
    return " ".join(reversed(words))


def compress(chars: list[str]) -> int:
    """Run-length encode ``chars`` in place and return the encoded length."""
    encoded: list[str] = []
    for letter, run in groupby(chars):
        count = sum(1 for _ in run)
        encoded.append(letter)
        if count > 1:
            encoded.extend(str(count))
    chars[: len(encoded)] = encoded
    return len(encoded)


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").split(" ")[-1])


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    if not strs:
        raise ValueError("longest_common_prefix() needs at least one string")
    first, last = min(strs), max(strs)
    prefix: list[str] = []
    for a, b in zip(first, last):
        if a != b:
            break
        prefix.append(a)
    return "".join(prefix)