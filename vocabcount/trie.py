"""A character trie holding every suffix of an inserted string."""

from __future__ import annotations

from typing import Dict, Optional

ALPHABET_SIZE = 31

_SPECIAL = {" ": 26, "'": 27, "-": 28, "_": 29, "\0": 30}


def char_index(ch: str) -> Optional[int]:
    """Return the trie slot for ``ch``, or None if the character is not valid.

    Lower-case ASCII letters map to 0-25, followed by space, apostrophe,
    hyphen, underscore and the NUL character.
    """
    if "a" <= ch <= "z" and len(ch) == 1:
        return ord(ch) - ord("a")
    return _SPECIAL.get(ch)


def _c_string(text: str) -> str:
    """Cut ``text`` at its first NUL, as a C string would end there."""
    return text.split("\0", 1)[0]


class CharTrie:
    """Trie in which a search succeeds for any substring of an inserted text.

    Invalid characters are skipped on insertion and make a search fail.
    """

    def __init__(self) -> None:
        self._root: Dict[int, dict] = {}

    def insert(self, text: Optional[str]) -> bool:
        """Insert every suffix of ``text``; return False if ``text`` is None."""
        if text is None:
            return False
        text = _c_string(text)
        indices = [char_index(ch) for ch in text]
        for start in range(len(indices)):
            node = self._root
            for index in indices[start:]:
                if index is None:
                    continue
                node = node.setdefault(index, {})
        return True

    def search(self, text: str) -> bool:
        """Return True if ``text`` is a path from the root of the trie."""
        node = self._root
        for ch in _c_string(text):
            index = char_index(ch)
            if index is None or index not in node:
                return False
            node = node[index]
        return True

    def __contains__(self, text: str) -> bool:
        return self.search(text)