"""Type-keyed validator strategies and their dispatcher."""

from enum import StrEnum
from typing import Any, Protocol

from bodycheck.shared.validators.password import is_strong_password
from bodycheck.shared.validators.patterns import is_date, is_email

from .conditions import BoundKey, Condition, is_bound, parse_bound
from .exceptions import (
    DateViolation,
    EmailViolation,
    GenderViolation,
    LengthViolation,
    MalformedRule,
    PasswordViolation,
    RangeViolation,
    RequiredViolation,
)


class FieldKind(StrEnum):
    """Closed set of field kinds a validator can be selected for."""

    STRING = "string"
    INT = "int"
    DEFAULT = "default"


class Validator(Protocol):
    """Evaluate conditions against one value, raising on the first violation."""

    def validate(self, conditions: list[str], value: Any) -> None: ...


class DefaultValidator:
    """Presence-only rules for field types without dedicated rules."""

    def validate(self, conditions: list[str], value: Any) -> None:
        for condition in conditions:
            if condition == Condition.REQUIRED and value is None:
                raise RequiredViolation()


class StringValidator:
    """Rules for ``str`` fields.

    Content rules (email, password, gender, date, length bounds) only apply to
    non-empty values; use ``required`` to demand presence.
    """

    def validate(self, conditions: list[str], value: Any) -> None:
        for condition in conditions:
            match condition:
                case Condition.REQUIRED:
                    if value is None or value == "":
                        raise RequiredViolation()
                case Condition.EMAIL:
                    if value and not is_email(str(value)):
                        raise EmailViolation()
                case Condition.PASSWORD:
                    if value and not is_strong_password(str(value)):
                        raise PasswordViolation()
                case Condition.GENDER:
                    if value and str(value).upper() not in ("M", "F"):
                        raise GenderViolation()
                case Condition.DATE:
                    if value and not is_date(str(value)):
                        raise DateViolation()
                case _:
                    check_length(condition, value)


def check_length(condition: str, value: Any) -> None:
    """Check a ``min=N``/``max=N`` token against a string's length.

    Tokens without a bound are ignored. Empty strings always pass.

    Raises:
        MalformedRule: If the operand is not an integer or value is not a str
        LengthViolation: If the length is outside the bound

    """
    if not is_bound(condition):
        return

    bound = parse_bound(condition)
    if not isinstance(value, str):
        raise MalformedRule()
    if value == "":
        return

    if bound.key == BoundKey.MIN and len(value) < bound.limit:
        raise LengthViolation(bound.key, value, bound.limit)
    if bound.key == BoundKey.MAX and len(value) > bound.limit:
        raise LengthViolation(bound.key, value, bound.limit)


class NumberValidator:
    """Range rules for ``int`` fields. Other conditions are ignored."""

    def validate(self, conditions: list[str], value: Any) -> None:
        for condition in conditions:
            if not is_bound(condition):
                continue

            bound = parse_bound(condition)
            if not isinstance(value, int) or isinstance(value, bool):
                raise MalformedRule()

            if bound.key == BoundKey.MIN and value < bound.limit:
                raise RangeViolation(bound.key, value, bound.limit)
            if bound.key == BoundKey.MAX and value > bound.limit:
                raise RangeViolation(bound.key, value, bound.limit)


_VALIDATORS: dict[FieldKind, Validator] = {
    FieldKind.STRING: StringValidator(),
    FieldKind.INT: NumberValidator(),
    FieldKind.DEFAULT: DefaultValidator(),
}


def select_validator(kind: FieldKind | str) -> Validator:
    """Select the validator for a field kind.

    Accepts a FieldKind or its plain type name; ``"string"`` and ``"int"`` map
    to their dedicated validators and anything else to the presence-only one.
    """
    try:
        return _VALIDATORS[FieldKind(kind)]
    except ValueError:
        return _VALIDATORS[FieldKind.DEFAULT]
