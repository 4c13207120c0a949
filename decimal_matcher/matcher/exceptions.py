class MatcherError(Exception):
    """Base exception for all matcher-related errors."""


class MatcherConfigurationError(MatcherError):
    """Raised when a matcher is constructed with an unusable digit limit."""
