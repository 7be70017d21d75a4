"""Field markers controlling object <-> document conversion.

Markers are attached through ``typing.Annotated`` metadata::

    @dataclass
    class User:
        name: str
        cache: Annotated[dict | None, IgnoreField] = None
        nickname: Annotated[str | None, IgnoreNullValue] = None

They carry no behaviour; ``to_document`` and ``to_object`` look them up in
the table returned by ``field_markers``.
"""

import dataclasses
from enum import Enum
from functools import lru_cache
from typing import get_type_hints

from pydantic import BaseModel


class FieldMarker(Enum):
    IGNORE_FIELD = "ignore_field"
    IGNORE_NULL_VALUE = "ignore_null_value"


# Skip the field in both directions.
IgnoreField = FieldMarker.IGNORE_FIELD
# Leave the field out of the document while its value is None.
IgnoreNullValue = FieldMarker.IGNORE_NULL_VALUE


def field_names(cls: type) -> list[str]:
    """Mapped fields of a dataclass or pydantic model, in declaration order."""
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return list(cls.model_fields)
    if dataclasses.is_dataclass(cls):
        return [f.name for f in dataclasses.fields(cls)]
    raise TypeError(f"{cls.__name__} is not a dataclass or pydantic model")


@lru_cache(maxsize=None)
def field_markers(cls: type) -> dict[str, frozenset[FieldMarker]]:
    """Markers declared on each field of ``cls``.

    Fields without markers map to an empty set.
    """
    return {
        name: frozenset(m for m in metadata if isinstance(m, FieldMarker))
        for name, metadata in _annotated_metadata(cls).items()
    }


def _annotated_metadata(cls: type) -> dict[str, tuple]:
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        # pydantic keeps metadata it does not understand on FieldInfo
        return {name: tuple(info.metadata) for name, info in cls.model_fields.items()}
    hints = get_type_hints(cls, include_extras=True)
    return {name: getattr(hints.get(name), "__metadata__", ()) for name in field_names(cls)}
