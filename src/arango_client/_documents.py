"""Conversion between Python objects and JSON documents."""

import dataclasses
from collections.abc import Mapping
from datetime import date
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter

from ._markers import FieldMarker, field_markers

T = TypeVar("T")


def _is_mapped(value: Any) -> bool:
    if isinstance(value, BaseModel):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def to_document(obj: Any) -> dict[str, Any]:
    """Convert a dataclass, pydantic model or mapping into a document.

    ``IgnoreField`` fields never appear in the result. ``IgnoreNullValue``
    fields appear only when they hold a value.
    """
    if isinstance(obj, Mapping):
        return {str(key): _to_value(value) for key, value in obj.items()}
    if not _is_mapped(obj):
        raise TypeError(f"Cannot convert {type(obj).__name__} to a document")

    document = {}
    for name, markers in field_markers(type(obj)).items():
        if FieldMarker.IGNORE_FIELD in markers:
            continue
        value = getattr(obj, name)
        if value is None and FieldMarker.IGNORE_NULL_VALUE in markers:
            continue
        document[name] = _to_value(value)
    return document


def _to_value(value: Any) -> Any:
    if _is_mapped(value) or isinstance(value, Mapping):
        return to_document(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_value(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    return value


def to_object(cls: type[T], document: Mapping[str, Any]) -> T:
    """Build an instance of ``cls`` from a document.

    Ignored fields are never read from the document and keep their
    defaults, as do ``IgnoreNullValue`` fields whose document value is null.
    """
    values = {}
    for name, markers in field_markers(cls).items():
        if FieldMarker.IGNORE_FIELD in markers or name not in document:
            continue
        value = document[name]
        if value is None and FieldMarker.IGNORE_NULL_VALUE in markers:
            continue
        values[name] = value
    return TypeAdapter(cls).validate_python(values)
