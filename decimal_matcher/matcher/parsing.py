"""Parsing of decimal text and the digit-count queries the matcher needs.

Decimal separator is always ".". Accepted literals are an optional sign,
ASCII digits with an optional fraction, and an optional exponent. Whitespace,
digit separators, non-ASCII digits, NaN and Infinity are rejected.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import cast

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class ParseError:
    """Reason a value could not be read as a decimal number."""

    value: object
    reason: str


@dataclass(frozen=True)
class Ok:
    number: Decimal


@dataclass(frozen=True)
class Err:
    error: ParseError


ParseResult = Ok | Err


def parse_decimal(value: object) -> ParseResult:
    """Parse ``value`` into an exact, finite ``Decimal``.

    Strings must match the decimal literal grammar. ``int``, ``float`` and
    ``Decimal`` values are read through their string form; ``bool`` and any
    other type are rejected.

    Unlike decimal.js, ``NaN``, ``Infinity`` and ``0x``/``0b``/``0o`` literals
    are not numbers here and yield an ``Err``.
    """
    text = _as_text(value)
    if text is None:
        return Err(ParseError(value=value, reason=f"unsupported type {type(value).__name__}"))
    if not _DECIMAL_LITERAL.fullmatch(text):
        return Err(ParseError(value=value, reason="not a decimal literal"))
    try:
        number = Decimal(text)
    except InvalidOperation:
        return Err(ParseError(value=value, reason="not a decimal literal"))
    return Ok(number)


def _as_text(value: object) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    return None


def _canonical(number: Decimal) -> tuple[tuple[int, ...], int]:
    """Return digits and exponent with trailing zeros folded into the exponent."""
    _, digits, raw_exponent = number.as_tuple()
    exponent = cast(int, raw_exponent)
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    exponent += len(digits) - end
    digits = digits[:end]
    if digits == (0,):
        exponent = 0
    return digits, exponent


def total_significant_digits(number: Decimal) -> int:
    """Significant digits, counting the zeros of the integer part.

    ``100`` has 3, ``0.0012`` has 2, ``12.340`` has 4, ``0`` has 1.
    """
    digits, exponent = _canonical(number)
    integer_digits = len(digits) + exponent
    return max(len(digits), integer_digits)


def fractional_digit_count(number: Decimal) -> int:
    """Digits after the decimal point, trailing zeros excluded."""
    _, exponent = _canonical(number)
    return max(0, -exponent)
