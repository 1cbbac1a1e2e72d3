"""
Pick the smallest fixed-width integer type that holds a value.

Widths are walked ascending (8, 16, 32, 64, 128 bits) and the first that
fits wins. Whether the signed or unsigned family is searched depends on the
configured `SignPolicy`.
"""

from __future__ import annotations

from .exceptions import Overflow
from .models import IntegerKind, SignPolicy, TypedLiteral

SIGNED_KINDS: tuple[IntegerKind, ...] = (
    IntegerKind.I8,
    IntegerKind.I16,
    IntegerKind.I32,
    IntegerKind.I64,
    IntegerKind.I128,
)

UNSIGNED_KINDS: tuple[IntegerKind, ...] = (
    IntegerKind.U8,
    IntegerKind.U16,
    IntegerKind.U32,
    IntegerKind.U64,
    IntegerKind.U128,
)


def wants_unsigned(value: int, explicit_sign_requested: bool, policy: SignPolicy) -> bool:
    """Decide which integer family to search.

    `explicit_sign_requested` is True only when "plus"/"positive" led the
    phrase; a leading "minus" yields a negative value and is always signed.
    """
    if value < 0 or policy is SignPolicy.ALWAYS_SIGNED:
        return False
    if policy is SignPolicy.NONNEGATIVE_UNSIGNED:
        return True
    return explicit_sign_requested


def narrow(
    value: int,
    explicit_sign_requested: bool,
    policy: SignPolicy = SignPolicy.PLUS_MEANS_UNSIGNED,
) -> TypedLiteral:
    """Return `value` typed as the narrowest integer kind that can hold it.

    Raises:
        Overflow: If even the 128-bit type of the chosen family is too small.
    """
    kinds = UNSIGNED_KINDS if wants_unsigned(value, explicit_sign_requested, policy) else SIGNED_KINDS

    for kind in kinds:
        if kind.holds(value):
            return TypedLiteral(value=value, kind=kind)

    widest = kinds[-1]
    raise Overflow(
        value,
        f"Value {value} does not fit in {widest.value} "
        f"(range {widest.min_value}..{widest.max_value})",
    )
