from decimal_matcher.config.settings import Settings
from decimal_matcher.logging.logger import Log
from decimal_matcher.matcher.limits import limit_from_params
from decimal_matcher.matcher.matcher import DecimalNumberMatcher


class DecimalMatcherFactory:
    """Creates matchers using the configured default digit limit."""

    @classmethod
    def create(cls, settings: Settings, *params: int) -> DecimalNumberMatcher:
        """Create a matcher from 0 to 2 positional limits.

        With no parameters the digit limit comes from
        ``settings.default_digit_limit``.
        """
        Log.configure(settings.log_level)
        limit = limit_from_params(*params, default_digit_limit=settings.default_digit_limit)
        Log.debug("Decimal matcher created", limit=repr(limit))
        return DecimalNumberMatcher(limit)
