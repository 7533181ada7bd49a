"""A prefix tree over lower-case words."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Iterable

_ALPHABET = frozenset(string.ascii_lowercase)


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    is_end: bool = False


def _check(key: str) -> None:
    if not set(key) <= _ALPHABET:
        raise ValueError(f"key {key!r} holds characters outside a-z")


class Trie:
    """A trie storing words made of the letters ``a`` to ``z``."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, key: str) -> None:
        """Add ``key``; raises ``ValueError`` for characters outside a-z."""
        _check(key)
        node = self._root
        for char in key:
            node = node.children.setdefault(char, _TrieNode())
        node.is_end = True

    def search(self, key: str) -> bool:
        """True when ``key`` was inserted as a whole word."""
        _check(key)
        node = self._root
        for char in key:
            child = node.children.get(char)
            if child is None:
                return False
            node = child
        return node.is_end

    def __contains__(self, key: str) -> bool:
        return self.search(key)