"""
Closed vocabulary of English number words.

Scale words are an ordered word → magnitude mapping (short scale: each name
is 1000× the previous) so new scales can be added without touching the
evaluator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .models import ClassifiedToken, TokenKind

# ─── Word Lookup Tables ──────────────────────────────────────────────

_SIGNS: dict[str, int] = {
    "plus": 1,
    "positive": 1,
    "minus": -1,
    "negative": -1,
}

_DIGITS: dict[str, int] = {
    "zero": 0,
    "a": 1,  # "a hundred twenty three"
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

_TEENS: dict[str, int] = {
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}

_TENS: dict[str, int] = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fourty": 40,  # Common misspelling
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

_SHORT_SCALE_NAMES: tuple[str, ...] = (
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
)

_SCALES: dict[str, int] = {
    "hundred": 100,
    **{name: 1000 ** (i + 1) for i, name in enumerate(_SHORT_SCALE_NAMES)},
}

HUNDRED = 100


# ─── Vocabulary ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Vocabulary:
    """Lookup tables used by the classifier.

    Instances are immutable; `with_scale` returns an extended copy.
    """

    signs: Mapping[str, int] = field(default_factory=lambda: MappingProxyType(dict(_SIGNS)))
    digits: Mapping[str, int] = field(default_factory=lambda: MappingProxyType(dict(_DIGITS)))
    teens: Mapping[str, int] = field(default_factory=lambda: MappingProxyType(dict(_TEENS)))
    tens: Mapping[str, int] = field(default_factory=lambda: MappingProxyType(dict(_TENS)))
    scales: Mapping[str, int] = field(default_factory=lambda: MappingProxyType(dict(_SCALES)))

    def lookup(self, word: str) -> ClassifiedToken | None:
        """Return the classified token for `word`, or None if unknown."""
        word = word.lower()
        if word in self.signs:
            return ClassifiedToken(TokenKind.SIGN, self.signs[word], word)
        if word in self.digits:
            return ClassifiedToken(TokenKind.DIGIT, self.digits[word], word)
        if word in self.teens:
            return ClassifiedToken(TokenKind.TEEN, self.teens[word], word)
        if word in self.tens:
            return ClassifiedToken(TokenKind.TENS, self.tens[word], word)
        if word in self.scales:
            return ClassifiedToken(TokenKind.SCALE, self.scales[word], word)
        return None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.lookup(word) is not None

    def with_scale(self, word: str, magnitude: int) -> Vocabulary:
        """Return a copy that also recognises `word` as a scale of `magnitude`.

        Raises:
            ValueError: If the word is already known or the magnitude is
                already taken or is not a power of ten of at least 1000.
        """
        word = word.lower()
        if word in self:
            raise ValueError(f"{word!r} is already a number word")
        if magnitude < 1000 or str(magnitude).rstrip("0") != "1":
            raise ValueError(f"Scale magnitude must be a power of ten >= 1000, got {magnitude}")
        if magnitude in self.scales.values():
            raise ValueError(f"Magnitude {magnitude} is already named")

        scales = sorted({**self.scales, word: magnitude}.items(), key=lambda item: item[1])
        return Vocabulary(
            signs=self.signs,
            digits=self.digits,
            teens=self.teens,
            tens=self.tens,
            scales=MappingProxyType(dict(scales)),
        )

    @property
    def largest_scale(self) -> tuple[str, int]:
        """The (word, magnitude) pair of the biggest scale word."""
        return max(self.scales.items(), key=lambda item: item[1])


DEFAULT_VOCABULARY = Vocabulary()
