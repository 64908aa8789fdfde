"""
Word triple encoding and decoding of 32 bit identifiers.

An identifier is split into three fragments of 12, 12 and 8 bits. Each fragment is used as an index into the
vocabulary and the resulting words are joined with a hyphen, e.g. 12 becomes "abacus-abacus-abridge".
"""

from __future__ import annotations

from . import vocabulary as _vocabulary
from .config import FRAGMENTS, MAX_VALUE, SEPARATOR
from .vocabulary import Vocabulary


class DecodeError(ValueError):
    pass


class UnknownWordError(DecodeError):
    def __init__(self, word: str):
        super().__init__(f"Unknown word {word!r}.")
        self.word = word


class WordCountError(DecodeError):
    def __init__(self, count: int):
        super().__init__(f"Expected {len(FRAGMENTS)} words, got {count}.")
        self.count = count


def fragments(value: int) -> tuple[int, ...]:
    """Splits a 32 bit value into its word indices, most significant fragment first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected an integer, got {value!r}.")
    if not 0 <= value <= MAX_VALUE:
        raise ValueError(f"Value out of range for a 32 bit identifier ({value!r}).")
    return tuple((value >> f.shift) & f.mask for f in FRAGMENTS)


class Codec:
    def __init__(self, vocabulary: Vocabulary):
        self.vocabulary = vocabulary

    def encode(self, value: int) -> str:
        """Converts a 32 bit unsigned integer into a word triple."""
        return SEPARATOR.join(self.vocabulary.word_at(index) for index in fragments(value))

    def decode(self, triple: str) -> int:
        """Converts a word triple back into an integer.
        Raises a DecodeError if a word is not in the vocabulary or the triple does not consist of exactly three words.
        """
        indices = []
        for word in triple.split(SEPARATOR):
            index = self.vocabulary.index_of(word)
            if index is None:
                raise UnknownWordError(word)
            indices.append(index)

        if len(indices) != len(FRAGMENTS):
            raise WordCountError(len(indices))

        value = 0
        for index, f in zip(indices, FRAGMENTS):
            value |= index << f.shift
        return value


def encode(value: int) -> str:
    """Encodes a value using the vocabulary shipped with the package."""
    return Codec(_vocabulary.get_default()).encode(value)


def decode(triple: str) -> int:
    """Decodes a word triple using the vocabulary shipped with the package."""
    return Codec(_vocabulary.get_default()).decode(triple)
