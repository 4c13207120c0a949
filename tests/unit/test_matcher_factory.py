"""Tests for DecimalMatcherFactory."""

import logging

import pytest

from decimal_matcher.config.settings import Settings
from decimal_matcher.logging.logger import Log
from decimal_matcher.matcher.errors import DecimalNumberErrors
from decimal_matcher.matcher.exceptions import MatcherConfigurationError
from decimal_matcher.matcher.factory import DecimalMatcherFactory
from decimal_matcher.matcher.limits import (
    DefaultLimit,
    TotalAndFractionalLimit,
    TotalDigitsLimit,
)
from decimal_matcher.matcher.matcher import DecimalNumberMatcher


class TestDecimalMatcherFactory:
    def test_creates_matcher(self) -> None:
        matcher = DecimalMatcherFactory.create(Settings())
        assert isinstance(matcher, DecimalNumberMatcher)

    def test_default_limit_from_settings(self) -> None:
        matcher = DecimalMatcherFactory.create(Settings(default_digit_limit=3))
        assert matcher.limit == DefaultLimit(max_digits=3)
        result = matcher.match("1234")
        assert result.codes == [DecimalNumberErrors.EXCEEDED_MAX_NUMBER_OF_DIGITS.code]

    def test_explicit_params_ignore_settings_default(self) -> None:
        settings = Settings(default_digit_limit=3)
        assert DecimalMatcherFactory.create(settings, 5).limit == TotalDigitsLimit(5)
        assert DecimalMatcherFactory.create(settings, 5, 2).limit == TotalAndFractionalLimit(5, 2)

    def test_too_many_params_raises(self) -> None:
        with pytest.raises(MatcherConfigurationError):
            DecimalMatcherFactory.create(Settings(), 1, 2, 3)

    def test_configures_log_level(self) -> None:
        logger = Log._logger
        level = logger.level
        try:
            DecimalMatcherFactory.create(Settings(log_level="warning"))
            assert logger.level == logging.WARNING
        finally:
            logger.setLevel(level)
