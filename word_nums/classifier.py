"""Map word tokens to their semantic category."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .exceptions import UnknownWord
from .models import ClassifiedToken
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary


def classify(token: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> ClassifiedToken:
    """Classify a single word.

    Raises:
        UnknownWord: If the word is in none of the vocabulary tables.
    """
    classified = vocabulary.lookup(token)
    if classified is None:
        raise UnknownWord(token)
    return classified


def classify_all(
    tokens: Iterable[str], vocabulary: Vocabulary = DEFAULT_VOCABULARY
) -> Iterator[ClassifiedToken]:
    """Lazily classify a token stream, reporting the position of unknown words."""
    for position, token in enumerate(tokens):
        classified = vocabulary.lookup(token)
        if classified is None:
            raise UnknownWord(token, position)
        yield classified
