from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDefinition:
    """Code and message pair reported for one kind of violation."""

    code: str
    message: str


class DecimalNumberErrors:
    NOT_VALID = ErrorDefinition(
        code="doubleNumber.e001",
        message="The value is not a valid decimal number.",
    )
    EXCEEDED_MAX_NUMBER_OF_DIGITS = ErrorDefinition(
        code="doubleNumber.e002",
        message="The value exceeded maximum number of digits.",
    )
    EXCEEDED_MAX_NUMBER_OF_DECIMAL_PLACES = ErrorDefinition(
        code="doubleNumber.e003",
        message="The value exceeded maximum number of decimal places.",
    )
