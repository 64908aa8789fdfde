"""
Human friendly word triples for 32 bit identifiers.
"""

from .codec import Codec, DecodeError, UnknownWordError, WordCountError, decode, encode, fragments
from .vocabulary import Vocabulary, VocabularyError, WordListTooShortError

__all__ = [
    "Codec",
    "DecodeError",
    "UnknownWordError",
    "Vocabulary",
    "VocabularyError",
    "WordCountError",
    "WordListTooShortError",
    "decode",
    "encode",
    "fragments",
]
