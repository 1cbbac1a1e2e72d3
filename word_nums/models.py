"""
Typed data passed between the parsing stages.

Tokens are tiny frozen dataclasses; results that cross the library boundary
(evaluated numbers, typed literals, batch outcomes) are pydantic models so
the API can serialise them directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field


# ─── Signs ───────────────────────────────────────────────────────────


class Sign(str, Enum):
    """Sign requested by the phrase."""

    UNSPECIFIED = "UNSPECIFIED"  # No sign word present
    POSITIVE = "POSITIVE"  # "plus" / "positive"
    NEGATIVE = "NEGATIVE"  # "minus" / "negative"


class SignPolicy(str, Enum):
    """How the narrower chooses between signed and unsigned widths."""

    PLUS_MEANS_UNSIGNED = "plus_means_unsigned"
    ALWAYS_SIGNED = "always_signed"
    NONNEGATIVE_UNSIGNED = "nonnegative_unsigned"


# ─── Classified Tokens ──────────────────────────────────────────────


class TokenKind(str, Enum):
    SIGN = "SIGN"
    DIGIT = "DIGIT"
    TEEN = "TEEN"
    TENS = "TENS"
    SCALE = "SCALE"


@dataclass(frozen=True)
class ClassifiedToken:
    """A word together with its semantic category.

    For SIGN tokens `value` is +1 or -1; otherwise it is the word's
    numeric value (digit, teen, tens) or magnitude (scale).
    """

    kind: TokenKind
    value: int
    word: str

    @property
    def sign(self) -> Sign:
        if self.kind is not TokenKind.SIGN:
            raise ValueError(f"{self.word!r} is not a sign word")
        return Sign.NEGATIVE if self.value < 0 else Sign.POSITIVE


# ─── Evaluation Result ──────────────────────────────────────────────


class EvaluatedNumber(BaseModel):
    """Signed value produced by the evaluator, before narrowing."""

    value: int
    sign: Sign = Sign.UNSPECIFIED

    @property
    def explicit_sign_requested(self) -> bool:
        return self.sign is not Sign.UNSPECIFIED

    @property
    def unsigned_requested(self) -> bool:
        """True when "plus" or "positive" led the phrase."""
        return self.sign is Sign.POSITIVE


# ─── Fixed-Width Integer Types ──────────────────────────────────────


class IntegerKind(str, Enum):
    """The fixed-width integer types a value can be narrowed to."""

    I8 = "i8"
    U8 = "u8"
    I16 = "i16"
    U16 = "u16"
    I32 = "i32"
    U32 = "u32"
    I64 = "i64"
    U64 = "u64"
    I128 = "i128"
    U128 = "u128"

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def holds(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


class TypedLiteral(BaseModel):
    """The final result: a value and the smallest type that can hold it."""

    value: int
    kind: IntegerKind

    @property
    def bits(self) -> int:
        return self.kind.bits

    @property
    def signed(self) -> bool:
        return self.kind.signed

    def render(self) -> str:
        """Suffixed literal form, e.g. ``1337u16`` or ``-10i8``."""
        return f"{self.value}{self.kind.value}"

    def to_bytes(self, byteorder: Literal["little", "big"] = "little") -> bytes:
        """Encode the value in exactly `bits // 8` bytes."""
        return self.value.to_bytes(self.bits // 8, byteorder, signed=self.signed)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.render()


# ─── Batch Outcome ──────────────────────────────────────────────────


class ParseOutcome(BaseModel):
    """Result of parsing one phrase in a batch: a literal or an error."""

    text: str
    literal: Optional[TypedLiteral] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    error_details: dict = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.literal is not None
