from decimal_matcher.validation.result import ValidationError, ValidationResult


class TestValidationResult:
    def test_empty_is_valid(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert result.codes == []

    def test_errors_keep_insertion_order(self) -> None:
        result = ValidationResult()
        result.add_invalid_type_error("b.e002", "second")
        result.add_invalid_type_error("a.e001", "first")
        assert not result.is_valid
        assert result.codes == ["b.e002", "a.e001"]
        assert result.errors[1] == ValidationError(code="a.e001", message="first")
