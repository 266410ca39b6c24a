"""A character trie that counts how many words share each prefix."""

from __future__ import annotations

from collections.abc import Iterable


class _Node:
    __slots__ = ("count", "children")

    def __init__(self) -> None:
        self.count = 0
        self.children: dict[str, _Node] = {}


class PrefixTrie:
    """Trie where each node records how many inserted words pass through it."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word``, counting it at every prefix."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.count += 1

    def score(self, word: str) -> int:
        """Sum, over the prefixes of ``word``, how many inserted words start with each.

        Prefixes that no inserted word shares contribute nothing.
        """
        node = self._root
        total = 0
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                break
            total += child.count
            node = child
        return total


def sum_prefix_scores(words: Iterable[str]) -> list[int]:
    """Return the prefix score of each word against the whole list."""
    items = list(words)
    trie = PrefixTrie(items)
    return [trie.score(word) for word in items]