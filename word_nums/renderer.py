"""
Render integers as canonical English number phrases.

The output is exactly what the parser reads back: lower case, single spaces,
no "and", no hyphens. Negative numbers are prefixed with "minus".

    155372  → "one hundred fifty five thousand three hundred seventy two"
    -10     → "minus ten"
    0       → "zero"
"""

from __future__ import annotations

from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

_UNITS: tuple[str, ...] = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)

_TENS: tuple[str, ...] = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)


def _render_group(number: int) -> list[str]:
    """Words for 1..999."""
    words: list[str] = []
    hundreds, remainder = divmod(number, 100)

    if hundreds:
        words += [_UNITS[hundreds], "hundred"]

    if remainder >= 20:
        tens, units = divmod(remainder, 10)
        words.append(_TENS[tens])
        if units:
            words.append(_UNITS[units])
    elif remainder:
        words.append(_UNITS[remainder])

    return words


def number_to_words(number: int, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    """Render `number` as an English phrase.

    Raises:
        ValueError: If the magnitude needs a scale word beyond the vocabulary.
    """
    if number == 0:
        return "zero"

    magnitude = abs(number)
    scales = sorted(
        ((word, value) for word, value in vocabulary.scales.items() if value >= 1000),
        key=lambda item: item[1],
        reverse=True,
    )
    largest_word, largest = scales[0]
    if magnitude >= largest * 1000:
        raise ValueError(
            f"{number} is too large to name; the largest scale word is {largest_word!r}"
        )

    words: list[str] = ["minus"] if number < 0 else []
    for word, value in scales:
        group, magnitude = divmod(magnitude, value)
        if group >= 1000:
            raise ValueError(f"Cannot name {number}: the scale above {word!r} is missing")
        if group:
            words += _render_group(group) + [word]
    if magnitude:
        words += _render_group(magnitude)

    return " ".join(words)
