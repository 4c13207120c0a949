from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationError:
    """Single violation reported by a matcher."""

    code: str
    message: str


@dataclass
class ValidationResult:
    """Ordered collection of violations for one validation pass."""

    errors: list[ValidationError] = field(default_factory=list)

    def add_invalid_type_error(self, code: str, message: str) -> None:
        self.errors.append(ValidationError(code=code, message=message))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def codes(self) -> list[str]:
        return [error.code for error in self.errors]
