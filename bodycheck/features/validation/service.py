"""Record walker: validate every annotated field of a record."""

import dataclasses
import logging
from typing import Any

from pydantic import BaseModel

from bodycheck.config.settings import settings

from .descriptors import describe
from .exceptions import RuleViolation, UnsupportedRecordError
from .strategies import select_validator

logger = logging.getLogger(__name__)


def validate_body(record: Any, *, strict: bool | None = None) -> list[str]:
    """Validate a record against the rule annotations of its fields.

    Fields are visited in declaration order. Each field reports at most one
    violation (its first failing condition); every field is visited
    regardless of earlier failures.

    Args:
        record: A pydantic model or dataclass instance
        strict: Reject unknown condition tokens; defaults to settings.strict_rules

    Returns:
        Formatted error messages, empty when the record is valid

    Raises:
        UnsupportedRecordError: If record is not a pydantic model or dataclass instance
        UnknownConditionError: If strict and a field declares an unknown condition

    """
    if not isinstance(record, BaseModel) and not (
        dataclasses.is_dataclass(record) and not isinstance(record, type)
    ):
        raise UnsupportedRecordError(record)

    if strict is None:
        strict = settings.strict_rules

    errors: list[str] = []
    descriptors = describe(type(record), strict)

    for descriptor in descriptors:
        conditions = descriptor.conditions()
        if not conditions:
            continue

        validator = select_validator(descriptor.kind)
        try:
            validator.validate(conditions, descriptor.read(record))
        except RuleViolation as violation:
            errors.append(violation.render(descriptor.name))

    logger.debug(f"Validated {type(record).__name__}: {len(descriptors)} fields, {len(errors)} violations")
    return errors
