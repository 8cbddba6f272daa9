"""Condition token parsing."""

import re
from dataclasses import dataclass
from enum import StrEnum

from .exceptions import MalformedRule

# Optional sign followed by ASCII digits.
_INTEGER_OPERAND = re.compile(r"[+-]?[0-9]+")


class Condition(StrEnum):
    """Bare condition keywords."""

    REQUIRED = "required"
    EMAIL = "email"
    PASSWORD = "password"
    GENDER = "gender"
    DATE = "date"


class BoundKey(StrEnum):
    """Keys of parameterized bound conditions."""

    MIN = "min"
    MAX = "max"


@dataclass(frozen=True)
class Bound:
    """A parsed ``min=N`` or ``max=N`` condition."""

    key: str
    limit: int


def split_conditions(annotation: str | None) -> list[str]:
    """Split a rule annotation into condition tokens.

    Tokens are stripped of surrounding whitespace and empty tokens dropped,
    so ``" required,"`` yields ``["required"]``.
    """
    if not annotation:
        return []
    return [token.strip() for token in annotation.split(",") if token.strip()]


def is_bound(condition: str) -> bool:
    """Check whether a token is a length/range bound."""
    return "min=" in condition or "max=" in condition


def parse_bound(condition: str) -> Bound:
    """Parse a bound token into its key and integer limit.

    Args:
        condition: Token containing ``min=`` or ``max=``

    Returns:
        Bound with the raw key (which may be neither ``min`` nor ``max``)

    Raises:
        MalformedRule: If the operand is not an integer

    """
    key, _, operand = condition.partition("=")
    if not _INTEGER_OPERAND.fullmatch(operand):
        raise MalformedRule()
    return Bound(key=key, limit=int(operand))


def is_known(condition: str) -> bool:
    """Check whether a token belongs to the supported condition set."""
    if condition in Condition:
        return True
    if is_bound(condition):
        key, _, _ = condition.partition("=")
        return key in BoundKey
    return False
