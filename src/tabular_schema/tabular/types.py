"""Column type unions.

A column accepts one or more primitive type names. The common case of a
single type encodes as a bare string (``"string"``), an enumeration encodes as
an array (``["number", "null"]``). Both forms decode to the same ColType.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, overload

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from tabular_schema.tabular.errors import ColTypeDecodeError


class ColType(Sequence[str]):
    """Ordered, immutable set of type names accepted by a column."""

    __slots__ = ("_types",)

    def __init__(self, types: str | Iterable[str] = ()):
        if isinstance(types, str):
            types = (types,)
        self._types: tuple[str, ...] = tuple(types)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[str]: ...

    def __getitem__(self, index: int | slice) -> str | Sequence[str]:
        return self._types[index]

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColType):
            return self._types == other._types
        if isinstance(other, (list, tuple)):
            return self._types == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._types)

    def __repr__(self) -> str:
        return f"ColType({list(self._types)!r})"

    def has_type(self, type_name: str) -> bool:
        """Check if the type name is one of the accepted types."""
        return type_name in self._types

    def encode(self) -> str | list[str] | None:
        """Encode to plain JSON data.

        Returns:
            The single type name when exactly one type is set, a list of names
            for an enumeration, and None for an empty union so callers can
            omit the value entirely.
        """
        if not self._types:
            return None
        if len(self._types) == 1:
            return self._types[0]
        return list(self._types)

    @classmethod
    def decode(cls, value: Any) -> ColType:
        """Decode plain JSON data into a ColType.

        Args:
            value: A type name string or a list of type name strings

        Returns:
            Normalized ColType

        Raises:
            ColTypeDecodeError: If value is any other shape
        """
        if isinstance(value, ColType):
            return value
        if isinstance(value, str):
            return cls((value,))
        if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
            return cls(value)
        raise ColTypeDecodeError()

    def to_json(self) -> str | None:
        """Serialize to a JSON document, None for an empty union."""
        encoded = self.encode()
        if encoded is None:
            return None
        return json.dumps(encoded, separators=(",", ":"))

    @classmethod
    def from_json(cls, data: str | bytes) -> ColType:
        """Parse a JSON document holding a string or an array of strings."""
        try:
            value = json.loads(data)
        except json.JSONDecodeError as e:
            raise ColTypeDecodeError() from e
        return cls.decode(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.decode,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda col_type: col_type.encode()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "anyOf": [
                {"type": "string"},
                {"type": "array", "items": {"type": "string"}},
            ]
        }
