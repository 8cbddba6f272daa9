"""Validation exceptions."""

from typing import Any

from fastapi import HTTPException, status


class RuleViolation(ValueError):
    """Raised by a validator when a value fails a condition.

    The message is a template with a ``{field}`` placeholder; the record walker
    substitutes the field name when rendering.
    """

    def __init__(self, template: str, **params: Any):
        super().__init__(template)
        self.template = template
        self.params = params

    def render(self, field_name: str) -> str:
        """Render the message for the given field."""
        return self.template.format(field=field_name, **self.params)


class RequiredViolation(RuleViolation):
    """Raised when a required value is missing."""

    def __init__(self):
        super().__init__("field [{field}] is required, but is missing")


class EmailViolation(RuleViolation):
    """Raised when a value is not an email address."""

    def __init__(self):
        super().__init__("field [{field}] should be a email")


class PasswordViolation(RuleViolation):
    """Raised when a value does not satisfy the password policy."""

    def __init__(self):
        super().__init__(
            "field [{field}] should be a valid password between 8 to 20 characters which contain at least "
            "one lowercase letter, one uppercase letter, one numeric digit, and one special character"
        )


class GenderViolation(RuleViolation):
    """Raised when a value is neither 'M' nor 'F'."""

    def __init__(self):
        super().__init__("field [{field}] only accepts 'M' or 'F'")


class DateViolation(RuleViolation):
    """Raised when a value is not in dd.mm.yyyy format."""

    def __init__(self):
        super().__init__("field [{field}] should be in the format [dd.mm.yyyy]")


class LengthViolation(RuleViolation):
    """Raised when a string is shorter or longer than its bound."""

    def __init__(self, bound: str, value: str, limit: int):
        comparison = "shorter" if bound == "min" else "higher"
        super().__init__(
            f"the field [{{field}}] value [{{value}}] has length {comparison} than required [{{limit}}]",
            value=value,
            limit=limit,
        )


class RangeViolation(RuleViolation):
    """Raised when an integer is below or above its bound."""

    def __init__(self, bound: str, value: int, limit: int):
        comparison = "shorter" if bound == "min" else "higher"
        super().__init__(
            f"the field [{{field}}] value [{{value}}] has range {comparison} than required [{{limit}}]",
            value=value,
            limit=limit,
        )


class MalformedRule(RuleViolation):
    """Raised when a bound operand is not an integer or the value has the wrong type."""

    def __init__(self):
        super().__init__("field [{field}] validations malformed")


class UnknownConditionError(ValueError):
    """Raised in strict mode when a field declares a condition outside the supported set."""

    def __init__(self, record_type: str, field_name: str, condition: str):
        super().__init__(f"Unknown condition '{condition}' on field {record_type}.{field_name}")
        self.record_type = record_type
        self.field_name = field_name
        self.condition = condition


class UnsupportedRecordError(TypeError):
    """Raised when the value passed for validation is not a pydantic model or dataclass instance."""

    def __init__(self, value: Any):
        type_name = value.__name__ if isinstance(value, type) else type(value).__name__
        super().__init__(f"Cannot validate {type_name}: expected a pydantic model or dataclass instance")


class BodyValidationException(HTTPException):
    """Raised when an incoming request body violates its field rules."""

    def __init__(self, errors: list[str]):
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail={"errors": errors})
        self.errors = errors
