"""Tests for column type unions."""

import pytest
from pydantic import TypeAdapter, ValidationError

from tabular_schema.tabular import ColType, ColTypeDecodeError


class TestColType:
    """Tests for the ColType value type."""

    def test_single_string_constructor(self):
        """Test a bare string is one type, not a sequence of characters."""
        assert list(ColType("string")) == ["string"]

    def test_sequence_behaviour(self):
        """Test ColType acts as an ordered sequence."""
        col_type = ColType(["number", "null"])

        assert len(col_type) == 2
        assert col_type[0] == "number"
        assert list(col_type) == ["number", "null"]
        assert "null" in col_type

    def test_has_type(self):
        """Test membership lookups."""
        col_type = ColType(["number", "null"])

        assert col_type.has_type("number")
        assert col_type.has_type("null")
        assert not col_type.has_type("string")

    def test_equality_and_hash(self):
        """Test equal unions compare and hash the same, order matters."""
        assert ColType(["a", "b"]) == ColType(["a", "b"])
        assert ColType(["a", "b"]) != ColType(["b", "a"])
        assert ColType(["a"]) == ["a"]
        assert hash(ColType(["a", "b"])) == hash(ColType(("a", "b")))

    def test_empty_is_falsy(self):
        """Test an empty union reads as unset."""
        assert not ColType()


class TestColTypeEncode:
    """Tests for encoding to JSON data."""

    def test_single_encodes_as_string(self):
        """Test one type encodes as a bare string, never a one-item array."""
        assert ColType(["string"]).encode() == "string"
        assert ColType(["string"]).to_json() == '"string"'

    def test_many_encode_as_array(self):
        """Test an enumeration encodes as an array."""
        assert ColType(["number", "null"]).encode() == ["number", "null"]
        assert ColType(["number", "null"]).to_json() == '["number","null"]'

    def test_empty_encodes_as_absent(self):
        """Test an empty union has no encoding."""
        assert ColType().encode() is None
        assert ColType().to_json() is None


class TestColTypeDecode:
    """Tests for decoding from JSON data."""

    def test_decode_string(self):
        """Test a bare string decodes to a single type."""
        assert ColType.decode("string") == ColType(["string"])

    def test_decode_array(self):
        """Test an array of strings decodes in order."""
        assert ColType.decode(["string", "number"]) == ColType(["string", "number"])

    @pytest.mark.parametrize("value", [5, None, True, {"type": "string"}, ["a", 1], [None]])
    def test_decode_invalid(self, value):
        """Test any other shape is rejected."""
        with pytest.raises(ColTypeDecodeError, match="invalid data for ColType"):
            ColType.decode(value)

    @pytest.mark.parametrize("text", ['"string"', '["number","null"]'])
    def test_json_round_trip(self, text):
        """Test encode(decode(x)) == x for both forms."""
        assert ColType.from_json(text).to_json() == text

    def test_from_json_invalid_document(self):
        """Test unparsable JSON is a decode error."""
        with pytest.raises(ColTypeDecodeError):
            ColType.from_json("[not json")

    def test_from_json_wrong_shape(self):
        """Test a JSON number is a decode error."""
        with pytest.raises(ColTypeDecodeError):
            ColType.from_json("12")


class TestColTypePydantic:
    """Tests for ColType as a pydantic field type."""

    def test_validate_and_dump(self):
        """Test pydantic uses the custom codec."""
        adapter = TypeAdapter(ColType)

        assert adapter.validate_python("string") == ColType(["string"])
        assert adapter.validate_json('["a","b"]') == ColType(["a", "b"])
        assert adapter.dump_python(ColType(["a"])) == "a"
        assert adapter.dump_json(ColType(["a", "b"])) == b'["a","b"]'

    def test_invalid_value_raises_validation_error(self):
        """Test codec errors surface as pydantic ValidationErrors."""
        adapter = TypeAdapter(ColType)

        with pytest.raises(ValidationError, match="invalid data for ColType"):
            adapter.validate_python(3)

    def test_json_schema(self):
        """Test the published JSON schema accepts both forms."""
        schema = TypeAdapter(ColType).json_schema()

        assert schema == {
            "anyOf": [
                {"type": "string"},
                {"type": "array", "items": {"type": "string"}},
            ]
        }
