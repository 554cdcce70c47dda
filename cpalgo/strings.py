"""Prefix trie and Z-function based substring search, split and join."""

from __future__ import annotations

from collections.abc import Iterable


class Trie:
    """A prefix tree over inserted words."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._children: list[dict[str, int]] = [{}]
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add a word to the trie."""
        node = 0
        for ch in word:
            nxt = self._children[node].get(ch)
            if nxt is None:
                self._children.append({})
                nxt = len(self._children) - 1
                self._children[node][ch] = nxt
            node = nxt

    def search(self, word: str) -> bool:
        """Whether ``word`` is a prefix of some inserted word."""
        node: int | None = 0
        for ch in word:
            node = self._children[node].get(ch)
            if node is None:
                return False
        return True


def _z_array(s: str) -> list[int]:
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


def z_occurrences(s: str, length: int) -> list[int]:
    """Positions ``i >= 1`` whose longest common prefix with ``s`` is exactly ``length``."""
    return [i for i, value in enumerate(_z_array(s)) if i > 0 and value == length]


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on non-overlapping occurrences of ``sep``, left to right."""
    if not sep:
        raise ValueError("empty separator")
    width = len(sep)
    z = _z_array(sep + "$" + text)
    parts: list[str] = []
    begin = 0
    for i in range(width + 1, len(z)):
        start = i - width - 1
        if z[i] >= width and start >= begin:
            parts.append(text[begin:start])
            begin = start + width
    parts.append(text[begin:])
    return parts


def join(parts: Iterable[str], sep: str = " ") -> str:
    """Concatenate ``parts`` with ``sep`` between neighbours."""
    return sep.join(parts)