"""
Tests para schema.py - Validación estructural del esquema.
"""

import json

import pytest

from formpreview.errors import SchemaError, SchemaParseError, SchemaStructureError
from formpreview.schema import parse_schema_text, schema_to_json, validate_schema


class TestValidateSchema:
    """Tests para validate_schema."""

    def test_valid_schema(self, schema_dict):
        """Test esquema completo."""
        schema = validate_schema(schema_dict)
        assert schema.form_title == "Test Form"
        assert schema.form_description == "Please fill out the form"
        assert len(schema.fields) == 2

    @pytest.mark.parametrize("key", ["formTitle", "formDescription", "fields"])
    def test_missing_key(self, schema_dict, key):
        """Test clave de primer nivel ausente."""
        del schema_dict[key]
        with pytest.raises(SchemaStructureError) as exc:
            validate_schema(schema_dict)
        assert key in exc.value.missing

    @pytest.mark.parametrize("fields", [{"id": "x"}, "name", 3, None])
    def test_fields_not_a_list(self, schema_dict, fields):
        """Test fields que no es una secuencia."""
        schema_dict["fields"] = fields
        with pytest.raises(SchemaStructureError):
            validate_schema(schema_dict)

    def test_title_wrong_type(self, schema_dict):
        """Test título que no es texto."""
        schema_dict["formTitle"] = 123
        with pytest.raises(SchemaStructureError):
            validate_schema(schema_dict)

    def test_empty_title_rejected(self, schema_dict):
        """Test título vacío se trata como ausente."""
        schema_dict["formTitle"] = ""
        with pytest.raises(SchemaStructureError):
            validate_schema(schema_dict)

    def test_snake_case_keys_rejected(self):
        """Test nombres de atributo Python no reemplazan las claves camelCase."""
        with pytest.raises(SchemaStructureError) as exc:
            validate_schema({"form_title": "T", "form_description": "D", "fields": []})
        assert set(exc.value.missing) == {"formTitle", "formDescription"}

    def test_not_an_object(self):
        """Test raíz que no es un objeto."""
        with pytest.raises(SchemaStructureError):
            validate_schema([1, 2, 3])

    def test_fields_not_deep_validated(self, schema_dict):
        """Test campos mal formados no invalidan el esquema."""
        schema_dict["fields"] = [{"id": "a"}, "basura", {"type": "text"}]
        schema = validate_schema(schema_dict)
        assert len(schema.fields) == 3

    def test_empty_fields_allowed(self, schema_dict):
        """Test lista de campos vacía es válida."""
        schema_dict["fields"] = []
        assert validate_schema(schema_dict).fields == []


class TestParseSchemaText:
    """Tests para parse_schema_text."""

    def test_valid_text(self, schema_dict):
        """Test texto JSON válido."""
        schema = parse_schema_text(json.dumps(schema_dict))
        assert schema.form_title == "Test Form"

    def test_malformed_json(self):
        """Test JSON mal formado."""
        with pytest.raises(SchemaParseError) as exc:
            parse_schema_text('{"formTitle": ')
        assert "JSON inválido" in str(exc.value)

    def test_structure_error_from_text(self):
        """Test JSON válido con estructura incorrecta."""
        with pytest.raises(SchemaStructureError):
            parse_schema_text('{"formTitle": "x"}')

    def test_error_hierarchy(self):
        """Test ambos errores son SchemaError y ValueError."""
        assert issubclass(SchemaParseError, SchemaError)
        assert issubclass(SchemaStructureError, SchemaError)
        assert issubclass(SchemaError, ValueError)


class TestSchemaToJson:
    """Tests para schema_to_json."""

    def test_uses_original_keys(self, schema):
        """Test serializa con las claves camelCase."""
        data = json.loads(schema_to_json(schema))
        assert data["formTitle"] == "Test Form"
        assert data["fields"][0]["id"] == "name"

    def test_pretty_printed(self, schema):
        """Test salida indentada."""
        assert '\n  "formTitle"' in schema_to_json(schema)
