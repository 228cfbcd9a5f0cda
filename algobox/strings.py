"""String routines: palindromes, brackets, prefixes and letter multisets."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    count: int = 0


class PrefixTrie:
    """A trie that counts how many inserted words pass through each prefix."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
            node.count += 1

    def count(self, prefix: str) -> int:
        """Return how many inserted words start with a non-empty ``prefix``; 0 for the empty one."""
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return 0
        return node.count


def can_construct_palindromes(s: str, k: int) -> bool:
    """Tell whether all characters of ``s`` can form exactly ``k`` palindromes."""
    if len(s) < k:
        return False
    if len(s) == k:
        return True
    odd = sum(count % 2 for count in Counter(s).values())
    return odd <= k


def can_be_valid(s: str, locked: str) -> bool:
    """Tell whether the unlocked brackets of ``s`` can be changed to balance it."""
    open_locked: list[int] = []
    free: list[int] = []

    for i, (ch, lock) in enumerate(zip(s, locked)):
        if lock == "1":
            if ch == "(":
                open_locked.append(i)
            elif open_locked:
                open_locked.pop()
            elif free:
                free.pop()
            else:
                return False
        else:
            free.append(i)

    while open_locked and free:
        if open_locked[-1] > free[-1]:
            return False
        open_locked.pop()
        free.pop()

    return not open_locked and len(free) % 2 == 0


def prefix_count(words: Iterable[str], pref: str) -> int:
    """Return how many of ``words`` start with ``pref``."""
    return PrefixTrie(words).count(pref)


def minimum_length(s: str) -> int:
    """Return the shortest length ``s`` can be reduced to by removing matched letter pairs."""
    return sum(2 if count % 2 == 0 else 1 for count in Counter(s).values())


def word_subsets(words1: Sequence[str], words2: Iterable[str]) -> list[str]:
    """Return the words of ``words1`` that contain every word of ``words2`` as a letter multiset."""
    needed: Counter[str] = Counter()
    for word in words2:
        needed |= Counter(word)

    result = []
    for word in words1:
        have = Counter(word)
        if all(have[ch] >= amount for ch, amount in needed.items()):
            result.append(word)
    return result