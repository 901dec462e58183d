"""Stack-based algorithms over sequences and strings."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_DIGITS = "0123456789"
_OPENERS = {")": "(", "]": "[", "}": "{"}


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Return the asteroids left after every collision; sign gives direction."""
    stack: list[int] = []
    for asteroid in asteroids:
        alive = True
        if stack and asteroid < 0 and stack[-1] > 0:
            size = -asteroid
            while stack and 0 < stack[-1] < size:
                stack.pop()
            if stack and stack[-1] == size:
                stack.pop()
                alive = False
            elif stack and size < stack[-1]:
                alive = False
        if alive:
            stack.append(asteroid)
    return stack


def _decode(chars: Iterator[str]) -> str:
    parts: list[str] = []
    count = 0
    for c in chars:
        if c in _DIGITS:
            count = count * 10 + int(c)
        elif c == "[":
            parts.append(_decode(chars) * count)
            count = 0
        elif c == "]":
            break
        else:
            parts.append(c)
    return "".join(parts)


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, nested or not, into ``text`` repeated ``k`` times."""
    return _decode(iter(s))


def remove_stars(s: str) -> str:
    """Let each ``*`` erase the closest kept character to its left."""
    kept: list[str] = []
    for c in s:
        if c == "*":
            if not kept:
                raise ValueError("a star has no character to remove")
            kept.pop()
        else:
            kept.append(c)
    return "".join(kept)


def is_valid(s: str) -> bool:
    """Tell whether the brackets in ``s`` are balanced and properly nested."""
    stack: list[str] = []
    for c in s:
        if c in "([{":
            stack.append(c)
            continue
        if not stack:
            return False
        top = stack.pop()
        if c in _OPENERS and _OPENERS[c] != top:
            return False
    return not stack