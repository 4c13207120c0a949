from decimal import Decimal

from decimal_matcher.logging.logger import Log
from decimal_matcher.matcher.errors import DecimalNumberErrors, ErrorDefinition
from decimal_matcher.matcher.limits import (
    DefaultLimit,
    DigitLimit,
    TotalAndFractionalLimit,
    limit_from_params,
)
from decimal_matcher.matcher.parsing import (
    Err,
    fractional_digit_count,
    parse_decimal,
    total_significant_digits,
)
from decimal_matcher.validation.result import ValidationResult


class DecimalNumberMatcher:
    """Validates that a value represents a decimal number or is absent.

    Decimal separator is always ".". The configured limit decides which
    digit-count rules apply:

    - ``DefaultLimit``: number of digits must not exceed 11.
    - ``TotalDigitsLimit``: number of digits must not exceed ``max_digits``.
    - ``TotalAndFractionalLimit``: number of digits must not exceed
      ``max_digits`` and number of decimal places must not exceed
      ``max_decimal_places``. Both rules are reported independently.
    """

    def __init__(self, limit: DigitLimit | None = None) -> None:
        self._limit: DigitLimit = limit if limit is not None else DefaultLimit()

    @classmethod
    def from_params(cls, *params: int) -> "DecimalNumberMatcher":
        """Build a matcher from 0 to 2 positional limits.

        Raises:
            MatcherConfigurationError: on more than 2 parameters or invalid values.
        """
        return cls(limit_from_params(*params))

    @property
    def limit(self) -> DigitLimit:
        return self._limit

    def match(self, value: object) -> ValidationResult:
        """Validate ``value`` and return the collected violations."""
        result = ValidationResult()
        if value is None:
            return result

        parsed = parse_decimal(value)
        if isinstance(parsed, Err):
            Log.debug("Value is not a decimal number", reason=parsed.error.reason)
            self._report(result, DecimalNumberErrors.NOT_VALID)
            return result

        self._validate_number(parsed.number, result)
        return result

    def _validate_number(self, number: Decimal, result: ValidationResult) -> None:
        if total_significant_digits(number) > self._limit.max_digits:
            self._report(result, DecimalNumberErrors.EXCEEDED_MAX_NUMBER_OF_DIGITS)
        if isinstance(self._limit, TotalAndFractionalLimit):
            if fractional_digit_count(number) > self._limit.max_decimal_places:
                self._report(result, DecimalNumberErrors.EXCEEDED_MAX_NUMBER_OF_DECIMAL_PLACES)

    @staticmethod
    def _report(result: ValidationResult, error: ErrorDefinition) -> None:
        Log.debug("Decimal number rejected", code=error.code)
        result.add_invalid_type_error(error.code, error.message)
