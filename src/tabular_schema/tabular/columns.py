"""Column models for rectangular data.

A Column describes the values found at one index of every row. Columns is the
ordered set of them; order maps to physical cell position and is never
changed.

JSON form of a column is itself a schema fragment:

    {"title": "rating", "type": ["number", "null"], "min": 0, "max": 5}

``type`` is omitted when unset, ``description`` when empty, and validation
keywords are flattened back to top-level keys. Decoding folds every other key
into ``validation``, a keyword literally named "validation" included, so use
``Column.from_parts`` to build a column around a ready-made validation bag.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, Field, RootModel, model_serializer, model_validator

from tabular_schema.tabular.types import ColType
from tabular_schema.tabular.validator import validate_machine_titles

# Keys that map onto Column fields; anything else is a validation keyword
_FIELD_KEYS = frozenset({"title", "type", "description"})


class Column(BaseModel):
    """Values associated with an index of each row of data."""

    title: str = ""
    type: ColType | None = None
    description: str = ""
    validation: dict[str, Any] | None = None

    @model_validator(mode="before")
    @classmethod
    def _fold_validation_keywords(cls, data: Any) -> Any:
        """Collect non-field keys into the validation bag."""
        if not isinstance(data, Mapping):
            return data

        fields: dict[str, Any] = {}
        validation: dict[str, Any] = {}
        for key, value in data.items():
            if key in _FIELD_KEYS:
                fields[key] = value
            else:
                validation[key] = value

        if validation:
            fields["validation"] = validation
        return fields

    @classmethod
    def from_parts(
        cls,
        title: str,
        type: ColType | None = None,
        description: str = "",
        validation: dict[str, Any] | None = None,
    ) -> Column:
        """Build a column from values that are already split into fields.

        ``validation`` is stored as given and never folded.
        """
        return cls.model_construct(
            title=title, type=type, description=description, validation=validation
        )

    @model_serializer(mode="plain")
    def _serialize(self) -> dict[str, Any]:
        data: dict[str, Any] = {"title": self.title}
        if self.type:
            data["type"] = self.type.encode()
        if self.description:
            data["description"] = self.description
        if self.validation:
            for key, value in self.validation.items():
                data.setdefault(key, value)
        return data


class Columns(RootModel[list[Column]]):
    """An ordered list of column information."""

    root: list[Column] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Column]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Column:
        return self.root[index]

    def titles(self) -> list[str]:
        """Get just column titles, in column order."""
        return [col.title for col in self.root]

    def valid_machine_titles(self) -> None:
        """Confirm titles parse as identifiers and are unique.

        Raises:
            TitleValidationError: Listing every offending column
        """
        validate_machine_titles(self)

    def to_json_schema(self) -> dict[str, Any]:
        """Wrap the columns in an array-wrapper tabular schema."""
        return {
            "type": "array",
            "items": {
                "type": "array",
                "items": [col.model_dump() for col in self.root],
            },
        }
