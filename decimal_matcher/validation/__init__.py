from decimal_matcher.validation.result import ValidationError, ValidationResult

__all__ = ["ValidationError", "ValidationResult"]
