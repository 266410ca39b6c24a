"""String puzzles: palindromes, sentences, greedy construction and segmentation."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable
from functools import cmp_to_key

_REMOVABLE = {"AB", "CD"}


def is_palindrome(s: str) -> bool:
    """Return whether ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    kept = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return kept == kept[::-1]


def uncommon_from_sentences(s1: str, s2: str) -> list[str]:
    """Return the words that occur exactly once across both sentences."""
    counts = Counter(s1.split())
    counts.update(s2.split())
    return [word for word, count in counts.items() if count == 1]


def is_prefix_of_word(sentence: str, search_word: str) -> int:
    """Return the 1-based position of the first word starting with ``search_word``, or -1."""
    for position, word in enumerate(sentence.split(), start=1):
        if word.startswith(search_word):
            return position
    return -1


def count_consistent_strings(allowed: str, words: Iterable[str]) -> int:
    """Count the non-empty words made only of characters from ``allowed``."""
    permitted = set(allowed)
    return sum(1 for word in words if word and set(word) <= permitted)


def are_sentences_similar(sentence1: str, sentence2: str) -> bool:
    """Return whether inserting one run of words into one sentence can give the other."""
    words1 = [word for word in sentence1.split(" ") if word]
    words2 = [word for word in sentence2.split(" ") if word]
    if len(words1) < len(words2):
        words1, words2 = words2, words1
    shorter = len(words2)
    start = 0
    while start < shorter and words1[start] == words2[start]:
        start += 1
    end = 0
    while end < shorter and words1[-end - 1] == words2[-end - 1]:
        end += 1
    return start + end >= shorter


def get_lucky(s: str, k: int) -> int:
    """Spell each letter as its alphabet position, then sum the digits ``k`` times."""
    number = "".join(str(ord(ch) - ord("a") + 1) for ch in s)
    for _ in range(k):
        number = str(sum(int(digit) for digit in number))
    return int(number)


def add_spaces(s: str, spaces: Iterable[int]) -> str:
    """Insert a space before each index listed, in increasing order, in ``spaces``."""
    positions = iter(spaces)
    upcoming = next(positions, None)
    pieces: list[str] = []
    for index, ch in enumerate(s):
        if index == upcoming:
            pieces.append(" ")
            upcoming = next(positions, None)
        pieces.append(ch)
    return "".join(pieces)


def repeat_limited_string(s: str, repeat_limit: int) -> str:
    """Return the largest string from the letters of ``s`` with no run longer than the limit."""
    if repeat_limit < 1:
        raise ValueError("repeat_limit must be positive")
    heap = [(-ord(ch), count) for ch, count in Counter(s).items()]
    heapq.heapify(heap)
    pieces: list[str] = []
    previous = None
    while heap:
        code, count = heapq.heappop(heap)
        ch = chr(-code)
        if ch != previous:
            pieces.append(ch * min(count, repeat_limit))
            previous = ch
            if count > repeat_limit:
                heapq.heappush(heap, (code, count - repeat_limit))
            continue
        if not heap:
            break
        next_code, next_count = heapq.heappop(heap)
        previous = chr(-next_code)
        pieces.append(previous)
        if next_count > 1:
            heapq.heappush(heap, (next_code, next_count - 1))
        heapq.heappush(heap, (code, count))
    return "".join(pieces)


def can_change(start: str, target: str) -> bool:
    """Return whether sliding ``L`` left and ``R`` right over ``_`` turns start into target."""
    pieces_start = [(ch, index) for index, ch in enumerate(start) if ch != "_"]
    pieces_target = [(ch, index) for index, ch in enumerate(target) if ch != "_"]
    if len(pieces_start) != len(pieces_target):
        return False
    for (ch, here), (wanted, there) in zip(pieces_start, pieces_target):
        if ch != wanted:
            return False
        if ch == "L" and here < there:
            return False
        if ch == "R" and here > there:
            return False
    return True


def min_extra_char(s: str, dictionary: Iterable[str]) -> int:
    """Return the fewest characters left over when ``s`` is cut into dictionary words."""
    words = set(dictionary)
    n = len(s)
    best = [0] * (n + 1)
    for start in range(n - 1, -1, -1):
        best[start] = min(
            [1 + best[start + 1]]
            + [best[end] for end in range(start + 1, n + 1) if s[start:end] in words]
        )
    return best[0]


def min_length(s: str) -> int:
    """Return the length left after repeatedly removing ``AB`` and ``CD``."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] + ch in _REMOVABLE:
            stack.pop()
        else:
            stack.append(ch)
    return len(stack)


def can_make_subsequence(str1: str, str2: str) -> bool:
    """Return whether ``str2`` is a subsequence of ``str1`` after bumping some letters by one.

    An empty ``str2`` gives False.
    """
    if not str2 or len(str2) > len(str1):
        return False
    matched = 0
    for ch in str1:
        bumped = "a" if ch == "z" else chr(ord(ch) + 1)
        if str2[matched] in (ch, bumped):
            matched += 1
            if matched == len(str2):
                return True
    return False


def maximum_length(s: str) -> int:
    """Return the length of the longest one-letter substring occurring at least three times, or -1."""
    occurrences: Counter[tuple[str, int]] = Counter()
    for start, ch in enumerate(s):
        length = 0
        for other in s[start:]:
            if other != ch:
                break
            length += 1
            occurrences[ch, length] += 1
    return max((length for (_, length), count in occurrences.items() if count >= 3), default=-1)


def _concat_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Iterable[int]) -> str:
    """Return the largest number formed by concatenating ``nums``, as a string."""
    texts = sorted((str(num) for num in nums), key=cmp_to_key(_concat_order))
    if not texts:
        raise ValueError("nums must not be empty")
    joined = "".join(texts)
    return "0" if joined[0] == "0" else joined