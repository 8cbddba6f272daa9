"""Field descriptors built once per record type.

A descriptor captures everything the record walker needs about one field:
its name, the validator kind derived from its declared type, the raw rule
annotation and how to read its value. Descriptors are built from pydantic
``model_fields`` or ``dataclasses.fields`` and cached per type.
"""

import builtins
import dataclasses
import logging
import re
import sys
import typing
from collections.abc import Callable
from functools import lru_cache
from operator import attrgetter
from typing import Annotated, Any

from pydantic import BaseModel, Field

from .conditions import is_known, split_conditions
from .exceptions import UnknownConditionError, UnsupportedRecordError
from .strategies import FieldKind

logger = logging.getLogger(__name__)

# Key holding the rule annotation in pydantic json_schema_extra / dataclass metadata
RULES_KEY = "validate"

# "Annotated[str, ...]" or "typing.Annotated[str, ...]" written as a string
_ANNOTATED_STRING = re.compile(r"(?:typing\.)?Annotated\[([^,\]]+),.*\]", re.DOTALL)


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """How to validate one field of a record type."""

    name: str
    kind: FieldKind
    rules: str | None
    accessor: Callable[[Any], Any]

    def conditions(self) -> list[str]:
        """Split the rule annotation into condition tokens."""
        return split_conditions(self.rules)

    def read(self, record: Any) -> Any:
        """Read this field's current value from a record."""
        return self.accessor(record)


def rules(annotation: str, default: Any = "", **kwargs: Any) -> Any:
    """Declare a pydantic field carrying a rule annotation.

    Usage:
        class SignupRequest(BaseModel):
            email: str = rules("required,email")
            age: int = rules("min=18", default=0)
    """
    return Field(default, json_schema_extra={RULES_KEY: annotation}, **kwargs)


def kind_of(annotation: Any) -> FieldKind:
    """Derive the validator kind from a declared type.

    Only exactly ``str`` and ``int`` (optionally wrapped in ``Annotated``) get
    dedicated rules; optional, subclassed and container types fall back to
    presence-only rules.
    """
    if typing.get_origin(annotation) is Annotated:
        annotation = typing.get_args(annotation)[0]
    if annotation is str:
        return FieldKind.STRING
    if annotation is int:
        return FieldKind.INT
    return FieldKind.DEFAULT


def _pydantic_rules(field_info: Any) -> str | None:
    extra = field_info.json_schema_extra
    if isinstance(extra, dict):
        value = extra.get(RULES_KEY)
        return value if isinstance(value, str) else None
    return None


def _describe_model(record_type: type[BaseModel]) -> list[FieldDescriptor]:
    return [
        FieldDescriptor(
            name=name,
            kind=kind_of(field_info.annotation),
            rules=_pydantic_rules(field_info),
            accessor=attrgetter(name),
        )
        for name, field_info in record_type.model_fields.items()
    ]


def _resolve_annotation(record_type: type, annotation: Any) -> Any:
    """Resolve a postponed (string) annotation by name, or return it unchanged.

    Only bare names are looked up, in the defining module and then builtins;
    ``Annotated[X, ...]`` is reduced to ``X`` first. Anything else stays a
    string and therefore describes a presence-only field.
    """
    if not isinstance(annotation, str):
        return annotation
    name = annotation.strip()
    match = _ANNOTATED_STRING.fullmatch(name)
    if match:
        name = match.group(1).strip()
    if not name.isidentifier():
        return annotation
    module = sys.modules.get(record_type.__module__)
    namespace = vars(module) if module is not None else {}
    if name in namespace:
        return namespace[name]
    return getattr(builtins, name, annotation)


def _describe_dataclass(record_type: type) -> list[FieldDescriptor]:
    try:
        hints = typing.get_type_hints(record_type, include_extras=True)
    except NameError:
        # Some annotation names a type the defining module cannot see at runtime.
        logger.debug(f"Resolving annotations of {record_type.__name__} field by field")
        hints = {}
    return [
        FieldDescriptor(
            name=field.name,
            kind=kind_of(hints.get(field.name) or _resolve_annotation(record_type, field.type)),
            rules=field.metadata.get(RULES_KEY),
            accessor=attrgetter(field.name),
        )
        for field in dataclasses.fields(record_type)
    ]


def _check_conditions(record_type: type, descriptors: list[FieldDescriptor], strict: bool) -> None:
    for descriptor in descriptors:
        for condition in descriptor.conditions():
            if is_known(condition):
                continue
            if strict:
                raise UnknownConditionError(record_type.__name__, descriptor.name, condition)
            logger.warning(
                f"Ignoring unknown condition '{condition}' on field {record_type.__name__}.{descriptor.name}"
            )


@lru_cache(maxsize=256)
def describe(record_type: type, strict: bool = False) -> tuple[FieldDescriptor, ...]:
    """Build the field descriptors of a record type.

    Args:
        record_type: A pydantic model class or a dataclass
        strict: Reject unknown condition tokens instead of logging them

    Returns:
        Descriptors in field declaration order

    Raises:
        UnsupportedRecordError: If record_type is neither a pydantic model nor a dataclass
        UnknownConditionError: If strict and a field declares an unknown condition

    """
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        descriptors = _describe_model(record_type)
    elif isinstance(record_type, type) and dataclasses.is_dataclass(record_type):
        descriptors = _describe_dataclass(record_type)
    else:
        raise UnsupportedRecordError(record_type)

    _check_conditions(record_type, descriptors, strict)
    logger.debug(f"Described {record_type.__name__}: {len(descriptors)} fields")
    return tuple(descriptors)
