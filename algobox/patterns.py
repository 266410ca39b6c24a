"""String matching: wildcards, prefix functions and sliding windows."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache

_VOWEL_BITS = {vowel: 1 << bit for bit, vowel in enumerate("aeiou")}


def _prefix_function(text: str) -> list[int]:
    """Return, for each position, the length of the longest proper border ending there."""
    borders = [0] * len(text)
    length = 0
    for index, ch in enumerate(text[1:], start=1):
        while length and ch != text[length]:
            length = borders[length - 1]
        if ch == text[length]:
            length += 1
        borders[index] = length
    return borders


def is_match(s: str, p: str) -> bool:
    """Return whether pattern ``p`` with ``.`` and ``*`` matches all of ``s``."""

    @lru_cache(maxsize=None)
    def match(i: int, j: int) -> bool:
        if j == len(p):
            return i == len(s)
        first = i < len(s) and p[j] in (s[i], ".")
        if j + 1 < len(p) and p[j + 1] == "*":
            return (first and match(i + 1, j)) or match(i, j + 2)
        return first and match(i + 1, j + 1)

    return match(0, 0)


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def shortest_palindrome(s: str) -> str:
    """Return the shortest palindrome made by adding characters in front of ``s``."""
    if not s:
        return s
    reverse = s[::-1]
    border = _prefix_function(s + "&" + reverse)[-1]
    return reverse[: len(s) - border] + s


def repeated_substring_pattern(s: str) -> bool:
    """Return whether ``s`` is some shorter string repeated two or more times."""
    if not s:
        raise ValueError("string must not be empty")
    return s in (s + s)[1:-1]


def longest_prefix(s: str) -> str:
    """Return the longest proper prefix of ``s`` that is also a suffix."""
    if not s:
        return ""
    length = _prefix_function(s)[-1]
    return s[len(s) - length:] if length else ""


def check_inclusion(s1: str, s2: str) -> bool:
    """Return whether some permutation of ``s1`` is a substring of ``s2``."""
    width = len(s1)
    if width > len(s2):
        return False
    target = Counter(s1)
    window: Counter[str] = Counter()
    for index, ch in enumerate(s2):
        window[ch] += 1
        if index >= width:
            old = s2[index - width]
            window[old] -= 1
            if not window[old]:
                del window[old]
        if window == target:
            return True
    return False


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    counts: Counter[str] = Counter()
    left = 0
    best = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        while counts[ch] > 1:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def find_the_longest_substring(s: str) -> int:
    """Return the length of the longest substring holding each vowel an even number of times."""
    first_seen = {0: -1}
    mask = 0
    best = 0
    for index, ch in enumerate(s):
        mask ^= _VOWEL_BITS.get(ch, 0)
        start = first_seen.setdefault(mask, index)
        best = max(best, index - start)
    return best