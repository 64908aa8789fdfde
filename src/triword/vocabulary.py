"""
Vocabulary index for the word triple encoding.

The word list is shipped as a package resource. Only its first 4096 lines are used, so every word carries exactly
12 bits. The index maps in both directions: position to word (forward) and word to position (reverse).
"""

from __future__ import annotations

import importlib.resources
import logging
import threading
import types

from typing import Iterable, Mapping

from .config import VOCABULARY_SIZE, WORDLIST_RESOURCE

logger = logging.getLogger(__name__)


class VocabularyError(RuntimeError):
    pass


class WordListTooShortError(VocabularyError):
    def __init__(self, length: int):
        super().__init__(f"Word list too short, expected at least {VOCABULARY_SIZE} entries, got {length}.")
        self.length = length


class Vocabulary:
    """Read-only, bidirectional index over the first 4096 words of a word list."""

    def __init__(self, words: Iterable[str]):
        words = tuple(words)
        if len(words) < VOCABULARY_SIZE:
            raise WordListTooShortError(len(words))

        self._forward: tuple[str, ...] = words[:VOCABULARY_SIZE]
        # Duplicates are not rejected, the last occurrence of a word wins.
        self._reverse: dict[str, int] = {word: index for index, word in enumerate(self._forward)}

    @classmethod
    def from_text(cls, text: str) -> Vocabulary:
        """Builds a vocabulary from a newline separated word list."""
        return cls(text.splitlines())

    @property
    def words(self) -> tuple[str, ...]:
        return self._forward

    @property
    def indices(self) -> Mapping[str, int]:
        return types.MappingProxyType(self._reverse)

    def word_at(self, index: int) -> str:
        if not 0 <= index < VOCABULARY_SIZE:
            raise IndexError(f"Word index out of range ({index!r}).")
        return self._forward[index]

    def index_of(self, word: str) -> int | None:
        return self._reverse.get(word)

    def __len__(self) -> int:
        return len(self._forward)

    def __contains__(self, word: object) -> bool:
        return word in self._reverse


def load() -> Vocabulary:
    """Reads the word list shipped with the package and builds its index."""
    text = importlib.resources.files(__package__).joinpath(WORDLIST_RESOURCE).read_text(encoding="utf-8")
    vocabulary = Vocabulary.from_text(text)
    logger.debug(f"Loaded {len(vocabulary)} words from {WORDLIST_RESOURCE}.")
    return vocabulary


_default: Vocabulary | None = None
_default_lock = threading.Lock()


def get_default() -> Vocabulary:
    """Returns the process-wide vocabulary, building it on first use.

    Concurrent first callers block on the lock until the single construction is done. Afterwards no lock is taken.
    """
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = load()
    return _default
