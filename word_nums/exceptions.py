"""
Exception hierarchy for number-phrase parsing.

Every failure is terminal for the call that raised it. Each exception carries
a machine-readable code so front ends (CLI, API) can report it precisely.
"""

from __future__ import annotations

from enum import Enum


class MalformedReason(str, Enum):
    """Which grammar rule a malformed phrase violated."""

    DUPLICATE_SIGN = "DUPLICATE_SIGN"
    MISPLACED_SIGN = "MISPLACED_SIGN"
    MISSING_NUMBER = "MISSING_NUMBER"  # Sign word with nothing after it
    REPEATED_UNIT = "REPEATED_UNIT"  # "one two", "twenty twelve"
    TENS_AFTER_UNIT = "TENS_AFTER_UNIT"  # "seven fifty"
    REPEATED_TENS = "REPEATED_TENS"  # "twenty thirty"
    REPEATED_HUNDRED = "REPEATED_HUNDRED"  # "hundred hundred"
    SCALE_ORDER = "SCALE_ORDER"  # "thousand million"
    MISSING_QUANTITY = "MISSING_QUANTITY"  # "one million thousand"
    GROUP_OVERFLOW = "GROUP_OVERFLOW"  # "fifty seven hundred thousand"
    MISPLACED_ZERO = "MISPLACED_ZERO"  # "one zero"


class ParseError(Exception):
    """Base exception for all number-phrase parsing failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class EmptyInput(ParseError):
    """Nothing left to parse after tokenization."""

    def __init__(self, message: str = "No number words to parse", details: dict | None = None):
        super().__init__("EMPTY_INPUT", message, details)


class UnknownWord(ParseError):
    """A token matches none of the recognised vocabularies."""

    def __init__(self, word: str, position: int | None = None):
        self.word = word
        self.position = position
        details: dict = {"word": word}
        if position is not None:
            details["position"] = position
        super().__init__("UNKNOWN_WORD", f"Unrecognized number word: {word!r}", details)


class MalformedNumber(ParseError):
    """The words are all known but do not form a valid English numeral."""

    def __init__(self, reason: MalformedReason, message: str, details: dict | None = None):
        self.reason = reason
        details = {"reason": reason.value, **(details or {})}
        super().__init__("MALFORMED_NUMBER", message, details)


class Overflow(ParseError):
    """The value does not fit in the widest supported integer type."""

    def __init__(self, value: int, message: str | None = None):
        self.value = value
        super().__init__(
            "OVERFLOW",
            message or f"Value {value} does not fit in a 128-bit integer",
            {"value": str(value)},
        )
