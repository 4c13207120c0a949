"""Digit limits a DecimalNumberMatcher can be configured with."""

from dataclasses import dataclass

from decimal_matcher.matcher.exceptions import MatcherConfigurationError

DEFAULT_DIGIT_LIMIT = 11


def _require_non_negative_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MatcherConfigurationError(f"'{name}' must be an integer, got {value!r}")
    if value < 0:
        raise MatcherConfigurationError(f"'{name}' must not be negative, got {value}")


@dataclass(frozen=True)
class DefaultLimit:
    """Total-digit check against the built-in default."""

    max_digits: int = DEFAULT_DIGIT_LIMIT

    def __post_init__(self) -> None:
        _require_non_negative_int("max_digits", self.max_digits)


@dataclass(frozen=True)
class TotalDigitsLimit:
    """Total-digit check against an explicit maximum."""

    max_digits: int

    def __post_init__(self) -> None:
        _require_non_negative_int("max_digits", self.max_digits)


@dataclass(frozen=True)
class TotalAndFractionalLimit:
    """Total-digit and decimal-places checks, evaluated independently."""

    max_digits: int
    max_decimal_places: int

    def __post_init__(self) -> None:
        _require_non_negative_int("max_digits", self.max_digits)
        _require_non_negative_int("max_decimal_places", self.max_decimal_places)


DigitLimit = DefaultLimit | TotalDigitsLimit | TotalAndFractionalLimit


def limit_from_params(*params: int, default_digit_limit: int = DEFAULT_DIGIT_LIMIT) -> DigitLimit:
    """Map a positional parameter list onto a digit limit.

    - no parameters: ``DefaultLimit``
    - one parameter: maximum number of digits
    - two parameters: maximum number of digits, maximum number of decimal places

    Raises:
        MatcherConfigurationError: on any other number of parameters.
    """
    if len(params) == 0:
        return DefaultLimit(max_digits=default_digit_limit)
    if len(params) == 1:
        return TotalDigitsLimit(max_digits=params[0])
    if len(params) == 2:
        return TotalAndFractionalLimit(max_digits=params[0], max_decimal_places=params[1])
    raise MatcherConfigurationError(
        f"Expected 0 to 2 parameters, got {len(params)}: {list(params)}"
    )
