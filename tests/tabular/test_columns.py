"""Tests for Column and Columns models."""

import pytest
from pydantic import ValidationError

from tabular_schema.tabular import ColType, Column, Columns, TitleValidationError


class TestColumnSerialization:
    """Tests for the flattened JSON form of a column."""

    def test_dump_minimal(self):
        """Test unset type and empty description are omitted."""
        assert Column(title="x").model_dump() == {"title": "x"}

    def test_dump_full(self):
        """Test validation keywords flatten after the known fields."""
        col = Column.from_parts(
            "rating", ColType(["number", "null"]), "0-5 rating", {"min": 0, "max": 5}
        )

        assert col.model_dump() == {
            "title": "rating",
            "type": ["number", "null"],
            "description": "0-5 rating",
            "min": 0,
            "max": 5,
        }

    def test_dump_single_type_as_string(self):
        """Test one type serializes as a bare string."""
        assert Column(title="a", type=ColType(["string"])).model_dump_json() == (
            '{"title":"a","type":"string"}'
        )

    def test_dump_empty_type_omitted(self):
        """Test an empty union is left out entirely."""
        assert Column(title="a", type=ColType()).model_dump() == {"title": "a"}

    def test_validation_cannot_shadow_fields(self):
        """Test validation keys never overwrite title, type or description."""
        col = Column.from_parts("a", ColType(["string"]), validation={"title": "other"})

        assert col.model_dump()["title"] == "a"


class TestColumnDecoding:
    """Tests for reading columns from JSON data."""

    def test_unknown_keys_become_validation(self):
        """Test flattened keywords fold back into validation."""
        col = Column.model_validate(
            {"title": "rating", "type": ["number", "null"], "min": 0, "max": 5}
        )

        assert col.title == "rating"
        assert col.type == ColType(["number", "null"])
        assert col.validation == {"min": 0, "max": 5}

    def test_from_parts_keeps_bag(self):
        """Test a ready-made validation bag is stored as given."""
        col = Column.from_parts("a", validation={"min": 1, "validation": {"x": 1}})

        assert col.validation == {"min": 1, "validation": {"x": 1}}
        assert col == Column.model_validate({"title": "a", "min": 1, "validation": {"x": 1}})

    def test_validation_key_is_a_keyword(self):
        """Test a key named validation is folded like any other keyword."""
        col = Column.model_validate({"title": "a", "validation": {"x": 1}})

        assert col.validation == {"validation": {"x": 1}}

    def test_null_validation_key_is_kept(self):
        """Test a null validation keyword is not dropped."""
        col = Column.model_validate({"title": "a", "validation": None})

        assert col.validation == {"validation": None}
        assert col.model_dump() == {"title": "a", "validation": None}

    def test_no_extra_keys_leaves_validation_unset(self):
        """Test validation stays None without keywords."""
        assert Column.model_validate({"title": "a", "type": "string"}).validation is None

    def test_invalid_type_rejected(self):
        """Test the type codec rejects other shapes."""
        with pytest.raises(ValidationError, match="invalid data for ColType"):
            Column.model_validate({"title": "a", "type": 5})

    def test_round_trip(self):
        """Test dump then validate gives an equal column."""
        col = Column.from_parts(
            "tags", ColType(["array"]), "labels", {"items": {"type": "string"}, "minItems": 1}
        )

        assert Column.model_validate(col.model_dump()) == col


class TestColumns:
    """Tests for the ordered column set."""

    def test_columns_json(self):
        """Test JSON text survives a decode/encode cycle unchanged."""
        val = '[{"title":"foo","type":["string","number"]},{"title":"bar","type":"string"}]'

        cols = Columns.model_validate_json(val)

        assert cols.model_dump_json() == val
        assert cols[0].type == ColType(["string", "number"])

    def test_titles(self):
        """Test titles come back in order, including odd ones."""
        cols = Columns(
            [
                Column(title="foo"),
                Column(title=""),
                Column(title="🔥"),
            ]
        )

        assert cols.titles() == ["foo", "", "🔥"]

    def test_sequence_access(self):
        """Test columns iterate and index in order."""
        cols = Columns([Column(title="a"), Column(title="b")])

        assert len(cols) == 2
        assert cols[1].title == "b"
        assert [col.title for col in cols] == ["a", "b"]

    def test_default_is_empty(self):
        """Test an empty column set."""
        assert len(Columns()) == 0
        assert Columns().model_dump() == []

    def test_duplicates_allowed(self):
        """Test the model itself never rejects duplicate titles."""
        cols = Columns([Column(title="a"), Column(title="a")])

        assert cols.titles() == ["a", "a"]

    def test_valid_machine_titles(self):
        """Test the validator is available as a method."""
        Columns([Column(title="foo")]).valid_machine_titles()

        with pytest.raises(TitleValidationError):
            Columns([Column(title="a"), Column(title="a")]).valid_machine_titles()

    def test_to_json_schema(self):
        """Test columns wrap into an array-wrapper schema."""
        cols = Columns([Column.from_parts("a", ColType(["string"]), validation={"min": 1})])

        assert cols.to_json_schema() == {
            "type": "array",
            "items": {
                "type": "array",
                "items": [{"title": "a", "type": "string", "min": 1}],
            },
        }

    def test_round_trip_with_validation_keyword(self):
        """Test keywords named validation survive a dump/validate cycle."""
        cols = Columns(
            [
                Column.from_parts("a", ColType(["string"]), validation={"validation": {"x": 1}}),
                Column.from_parts("b", ColType(["string"]), validation={"validation": None}),
            ]
        )

        assert Columns.model_validate(cols.model_dump()) == cols
        assert Columns.model_validate_json(cols.model_dump_json()) == cols
