"""Declarative field validation for request bodies.

Annotate fields with comma-separated conditions and call ``validate_body``:

    class SignupRequest(BaseModel):
        email: str = rules("required,email")
        password: str = rules("required,password")
        age: int = rules("min=18", default=0)

    validate_body(SignupRequest(email="nope"))
    # ['field [email] should be a email', 'field [password] is required, but is missing', ...]
"""

from bodycheck.features.validation.dependencies import validated_body
from bodycheck.features.validation.descriptors import FieldDescriptor, describe, rules
from bodycheck.features.validation.exceptions import (
    BodyValidationException,
    MalformedRule,
    RuleViolation,
    UnknownConditionError,
    UnsupportedRecordError,
)
from bodycheck.features.validation.service import validate_body
from bodycheck.features.validation.strategies import FieldKind, select_validator
from bodycheck.shared.validators.password import is_strong_password, validate_password_strength

__all__ = [
    "BodyValidationException",
    "FieldDescriptor",
    "FieldKind",
    "MalformedRule",
    "RuleViolation",
    "UnknownConditionError",
    "UnsupportedRecordError",
    "describe",
    "is_strong_password",
    "rules",
    "select_validator",
    "validate_body",
    "validate_password_strength",
]
