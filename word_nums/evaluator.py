"""
Evaluate a classified token stream under English numeral grammar.

Algorithm:
    We keep two accumulators:
    - `total`: completed scale groups (e.g. after processing "million")
    - `group`: the number being built in the current group

    For each token:
    - digit/teen/tens → add to `group`, checking the slot is free
    - "hundred"       → multiply `group` by 100 (an empty group counts as 1)
    - larger scale    → flush `group * scale` into `total`, reset `group`

    At the end, `total + group` is the magnitude and the sign is applied.

Scale words must strictly decrease across the phrase, so "thousand million"
is rejected rather than silently multiplied.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .exceptions import EmptyInput, MalformedNumber, MalformedReason
from .models import ClassifiedToken, EvaluatedNumber, Sign, TokenKind
from .vocabulary import HUNDRED

_MAX_GROUP = 999


@dataclass
class _Accumulator:
    total: int = 0
    group: int = 0
    sign: Sign = Sign.UNSPECIFIED
    has_units: bool = False
    has_tens: bool = False
    has_hundred: bool = False
    smallest_scale: int | None = None
    numerals: int = 0
    zero_seen: bool = False

    # ─── Token Handlers ──────────────────────────────────────────────

    def add_sign(self, token: ClassifiedToken, index: int) -> None:
        if self.sign is not Sign.UNSPECIFIED:
            raise MalformedNumber(
                MalformedReason.DUPLICATE_SIGN,
                f"Sign word {token.word!r} repeats an earlier sign",
                {"word": token.word, "position": index},
            )
        if index != 0:
            raise MalformedNumber(
                MalformedReason.MISPLACED_SIGN,
                f"Sign word {token.word!r} must come first",
                {"word": token.word, "position": index},
            )
        self.sign = token.sign

    def add_numeral(self, token: ClassifiedToken) -> None:
        if self.zero_seen:
            raise MalformedNumber(
                MalformedReason.MISPLACED_ZERO,
                f"'zero' cannot be followed by {token.word!r}",
                {"word": token.word},
            )

        if token.kind is TokenKind.DIGIT and token.value == 0:
            if self.numerals:
                raise MalformedNumber(
                    MalformedReason.MISPLACED_ZERO,
                    "'zero' is only valid on its own",
                    {"word": token.word},
                )
            self.zero_seen = True
        elif token.kind in (TokenKind.DIGIT, TokenKind.TEEN):
            self._add_unit(token)
        elif token.kind is TokenKind.TENS:
            self._add_tens(token)
        elif token.value == HUNDRED:
            self._apply_hundred(token)
        else:
            self._apply_scale(token)

        self.numerals += 1

    def _add_unit(self, token: ClassifiedToken) -> None:
        if self.has_units:
            raise MalformedNumber(
                MalformedReason.REPEATED_UNIT,
                f"{token.word!r} follows another unit word without a scale in between",
                {"word": token.word},
            )
        if token.kind is TokenKind.TEEN and self.has_tens:
            raise MalformedNumber(
                MalformedReason.REPEATED_UNIT,
                f"{token.word!r} cannot follow a tens word",
                {"word": token.word},
            )
        self.group += token.value
        self.has_units = True

    def _add_tens(self, token: ClassifiedToken) -> None:
        if self.has_units:
            raise MalformedNumber(
                MalformedReason.TENS_AFTER_UNIT,
                f"Tens word {token.word!r} must precede the unit word in its group",
                {"word": token.word},
            )
        if self.has_tens:
            raise MalformedNumber(
                MalformedReason.REPEATED_TENS,
                f"{token.word!r} follows another tens word",
                {"word": token.word},
            )
        self.group += token.value
        self.has_tens = True

    def _apply_hundred(self, token: ClassifiedToken) -> None:
        if self.has_hundred:
            raise MalformedNumber(
                MalformedReason.REPEATED_HUNDRED,
                f"{token.word!r} appears twice in the same group",
                {"word": token.word},
            )
        # "fifty seven hundred" leaves up to 9900 in the group
        self.group = (self.group or 1) * HUNDRED
        self.has_hundred = True
        self.has_units = False
        self.has_tens = False

    def _apply_scale(self, token: ClassifiedToken) -> None:
        if self.smallest_scale is not None and token.value >= self.smallest_scale:
            raise MalformedNumber(
                MalformedReason.SCALE_ORDER,
                f"Scale word {token.word!r} must be smaller than the scales before it",
                {"word": token.word, "previous_scale": self.smallest_scale},
            )

        group = self.group
        if group == 0:
            if self.numerals:
                raise MalformedNumber(
                    MalformedReason.MISSING_QUANTITY,
                    f"Scale word {token.word!r} has no quantity before it",
                    {"word": token.word},
                )
            group = 1  # Leading "thousand ..." means one thousand
        if group > _MAX_GROUP:
            raise MalformedNumber(
                MalformedReason.GROUP_OVERFLOW,
                f"Group value {group} is too large to precede {token.word!r}",
                {"word": token.word, "group": group},
            )

        self.total += group * token.value
        self.smallest_scale = token.value
        self.group = 0
        self.has_units = False
        self.has_tens = False
        self.has_hundred = False

    # ─── Result ──────────────────────────────────────────────────────

    def finish(self) -> EvaluatedNumber:
        if not self.numerals:
            raise MalformedNumber(
                MalformedReason.MISSING_NUMBER,
                "Sign word is not followed by a number",
            )
        if self.smallest_scale is not None and self.group >= self.smallest_scale:
            raise MalformedNumber(
                MalformedReason.GROUP_OVERFLOW,
                f"Trailing group {self.group} overlaps the preceding scale {self.smallest_scale}",
                {"group": self.group, "previous_scale": self.smallest_scale},
            )

        magnitude = self.total + self.group
        value = -magnitude if self.sign is Sign.NEGATIVE else magnitude
        return EvaluatedNumber(value=value, sign=self.sign)


def evaluate(tokens: Iterable[ClassifiedToken]) -> EvaluatedNumber:
    """Combine classified tokens into a signed value.

    Raises:
        EmptyInput: If the stream has no tokens.
        MalformedNumber: If the tokens break numeral grammar.
    """
    acc = _Accumulator()
    empty = True

    for index, token in enumerate(tokens):
        empty = False
        if token.kind is TokenKind.SIGN:
            acc.add_sign(token, index)
        else:
            acc.add_numeral(token)

    if empty:
        raise EmptyInput()

    return acc.finish()
