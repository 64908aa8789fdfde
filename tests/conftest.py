"""Shared pytest fixtures."""

import pytest

from triword import vocabulary as vocabulary_module
from triword.codec import Codec
from triword.vocabulary import Vocabulary


@pytest.fixture
def vocabulary():
    return vocabulary_module.get_default()


@pytest.fixture
def codec(vocabulary):
    return Codec(vocabulary)


@pytest.fixture
def synthetic_words():
    """A word list with predictable words, word0000 to word4095."""
    return [f"word{i:04d}" for i in range(4096)]


@pytest.fixture
def synthetic_codec(synthetic_words):
    return Codec(Vocabulary(synthetic_words))
