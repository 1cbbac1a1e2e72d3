"""
Split a number phrase into lowercase word tokens.

The tokenizer never fails: any non-whitespace run becomes a token and
validity is judged by the classifier.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

# Words dropped from the stream ("one hundred and five")
_FILLER: frozenset[str] = frozenset({"and"})

_WORD_SEPARATOR = re.compile(r"[\s\-]+")


def tokenize(text: str) -> Iterator[str]:
    """Yield the lowercase words of `text`, skipping filler words.

    Hyphens count as separators so "eighty-three" yields "eighty", "three".
    """
    for piece in _WORD_SEPARATOR.split(text):
        if not piece:
            continue
        word = piece.lower()
        if word in _FILLER:
            continue
        yield word


class TokenStream(Iterable[str]):
    """A restartable view over the tokens of one phrase."""

    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Iterator[str]:
        return tokenize(self.text)

    def __repr__(self) -> str:
        return f"TokenStream({self.text!r})"
