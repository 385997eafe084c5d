"""Tests for JSONSchemaParser."""

import codecs
import json
import logging
from unittest import mock

import pytest

from schema_ddl.errors import InvalidInputError, ParsingError
from schema_ddl.parsers import JSONSchemaParser


@pytest.fixture
def parser():
    return JSONSchemaParser()


class TestJSONSchemaParser:
    def test_valid_schema(self, parser, person_json):
        model = parser.parse(person_json)
        assert model.name == "Person"
        assert model.fields == ("id", "firstName")

    def test_accepts_string_path(self, parser, person_json):
        assert parser.parse(str(person_json)).name == "Person"

    def test_uppercase_extension(self, parser, write_file):
        path = write_file("PERSON.JSON", '{"name": "P", "fields": ["a"]}')
        assert parser.parse(path).fields == ("a",)

    def test_file_does_not_exist(self, parser, tmp_path):
        with pytest.raises(ParsingError, match="could not be found"):
            parser.parse(tmp_path / "does_not_exist.json")

    def test_wrong_extension_is_not_opened(self, parser, write_file):
        path = write_file("schema.txt", '{"name": "Person", "fields": ["id"]}')
        with mock.patch("pathlib.Path.open") as opened:
            with pytest.raises(ParsingError, match="Invalid file format: schema.txt"):
                parser.parse(path)
        opened.assert_not_called()

    def test_none_path(self, parser):
        with pytest.raises(InvalidInputError):
            parser.parse(None)

    def test_malformed_json_keeps_cause(self, parser, write_file):
        path = write_file("bad.json", '{"name": "Person", "fields": [')
        with pytest.raises(ParsingError) as excinfo:
            parser.parse(path)
        assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    def test_empty_file(self, parser, write_file):
        with pytest.raises(ParsingError):
            parser.parse(write_file("empty.json", ""))

    def test_root_array_rejected(self, parser, write_file):
        path = write_file("list.json", '[{"name": "Person", "fields": ["id"]}]')
        with pytest.raises(ParsingError, match="root must be an object"):
            parser.parse(path)

    @pytest.mark.parametrize(
        "document",
        [
            {"fields": ["id"]},
            {"name": None, "fields": ["id"]},
            {"name": "Person"},
        ],
    )
    def test_missing_required_property(self, parser, write_file, document):
        path = write_file("schema.json", json.dumps(document))
        with pytest.raises(ParsingError, match="missing required property"):
            parser.parse(path)

    def test_fields_not_array(self, parser, write_file):
        path = write_file("schema.json", '{"name": "Person", "fields": "id"}')
        with pytest.raises(ParsingError, match="must be an array"):
            parser.parse(path)

    def test_blank_name_rejected(self, parser, write_file):
        path = write_file("schema.json", '{"name": "  ", "fields": ["id"]}')
        with pytest.raises(ParsingError, match="must not be empty"):
            parser.parse(path)

    def test_object_name_rejected(self, parser, write_file):
        path = write_file("schema.json", '{"name": {"x": 1}, "fields": ["id"]}')
        with pytest.raises(ParsingError, match="'name' must be a string"):
            parser.parse(path)

    def test_non_string_fields_are_stringified(self, parser, write_file):
        path = write_file(
            "schema.json", '{"name": "Mixed", "fields": ["id", 7, true, null, 1.5]}'
        )
        assert parser.parse(path).fields == ("id", "7", "true", "null", "1.5")

    def test_empty_fields_array_parses(self, parser, write_file):
        path = write_file("schema.json", '{"name": "Empty", "fields": []}')
        assert parser.parse(path).fields == ()

    def test_unicode_content(self, parser, write_file):
        path = write_file("schema.json", '{"name": "Café", "fields": ["prénom"]}')
        model = parser.parse(path)
        assert model.name == "Café"
        assert model.fields == ("prénom",)

    def test_utf8_bom_is_accepted(self, parser, tmp_path):
        path = tmp_path / "bom.json"
        path.write_bytes(codecs.BOM_UTF8 + b'{"name": "Person", "fields": ["id"]}')
        model = parser.parse(path)
        assert model.name == "Person"
        assert model.fields == ("id",)

    def test_sink_receives_diagnostics(self, parser, person_json, caplog):
        sink = logging.getLogger("test.json_parser.sink")
        with caplog.at_level(logging.DEBUG, logger="test.json_parser.sink"):
            parser.parse(person_json, sink=sink)
        assert any(r.name == "test.json_parser.sink" for r in caplog.records)
        assert not any(r.name.startswith("schema_ddl") for r in caplog.records)

    def test_sink_receives_errors(self, parser, write_file, caplog):
        path = write_file("broken.json", "{not json")
        sink = logging.getLogger("test.json_parser.sink")
        with caplog.at_level(logging.DEBUG, logger="test.json_parser.sink"):
            with pytest.raises(ParsingError):
                parser.parse(path, sink=sink)
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert errors and all(r.name == "test.json_parser.sink" for r in errors)
