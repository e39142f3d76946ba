"""
Bidirectional word ↔ integer vocabulary used by the hashing extractors.

A WordIndex is created per embedding request (or per batch) and passed
explicitly to every extractor that should share slot assignments. It is
never persisted and never global.
"""

import threading
from typing import Dict, List

from schemavec.errors import NotFoundError


class WordIndex:
    """
    Assigns sequential integer indices to words in first-seen order.

    The mapping is a bijection over the inserted words: each word gets one
    index, starting at 0, and no two words share an index. There is no
    removal operation.

    WordIndex is not thread-safe. Use LockedWordIndex when one index is
    shared by several threads.

    Examples
    --------
        index = WordIndex()
        index.get_or_add("users")   # 0
        index.get_or_add("id")      # 1
        index.get_or_add("users")   # 0
        index.get_word(1)           # "id"
    """

    def __init__(self) -> None:
        self._index_by_word: Dict[str, int] = {}
        self._words: List[str] = []

    def get_or_add(self, word: str) -> int:
        """Return the index of ``word``, assigning the next one if unseen."""
        index = self._index_by_word.get(word)
        if index is None:
            index = len(self._words)
            self._index_by_word[word] = index
            self._words.append(word)
        return index

    def get_word(self, index: int) -> str:
        """
        Return the word stored at ``index``.

        Raises
        ------
        NotFoundError
            If ``index`` was never assigned.
        """
        if index < 0 or index >= len(self._words):
            raise NotFoundError(f"No word has been assigned index {index}.")
        return self._words[index]

    @property
    def count(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._index_by_word

    def __len__(self) -> int:
        return len(self._words)


class LockedWordIndex(WordIndex):
    """WordIndex whose inserts are serialized by a lock."""

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()

    def get_or_add(self, word: str) -> int:
        with self._lock:
            return super().get_or_add(word)
