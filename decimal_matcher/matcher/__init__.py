from decimal_matcher.matcher.errors import DecimalNumberErrors
from decimal_matcher.matcher.exceptions import MatcherConfigurationError, MatcherError
from decimal_matcher.matcher.factory import DecimalMatcherFactory
from decimal_matcher.matcher.limits import (
    DefaultLimit,
    DigitLimit,
    TotalAndFractionalLimit,
    TotalDigitsLimit,
)
from decimal_matcher.matcher.matcher import DecimalNumberMatcher

__all__ = [
    "DecimalMatcherFactory",
    "DecimalNumberErrors",
    "DecimalNumberMatcher",
    "DefaultLimit",
    "DigitLimit",
    "MatcherConfigurationError",
    "MatcherError",
    "TotalAndFractionalLimit",
    "TotalDigitsLimit",
]
