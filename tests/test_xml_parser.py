"""Tests for XMLSchemaParser."""

import logging
import xml.etree.ElementTree as ET

import pytest

from schema_ddl.errors import ParsingError
from schema_ddl.parsers import XMLSchemaParser


@pytest.fixture
def parser():
    return XMLSchemaParser()


class TestXMLSchemaParser:
    def test_valid_schema(self, parser, person_xml):
        model = parser.parse(person_xml)
        assert model.name == "Person"
        assert model.fields == ("id", "firstName")

    def test_reads_actual_content(self, parser, write_file):
        path = write_file(
            "order.xml",
            '<schema name="Order"><fields><field>orderId</field>'
            "<field>total</field><field>status</field></fields></schema>",
        )
        model = parser.parse(path)
        assert model.name == "Order"
        assert model.fields == ("orderId", "total", "status")

    def test_field_text_is_trimmed(self, parser, write_file):
        path = write_file(
            "s.xml", '<schema name="T"><fields><field>\n  id  \n</field></fields></schema>'
        )
        assert parser.parse(path).fields == ("id",)

    def test_empty_field_element_gives_empty_name(self, parser, write_file):
        path = write_file("s.xml", '<schema name="T"><fields><field/></fields></schema>')
        assert parser.parse(path).fields == ("",)

    def test_comments_are_ignored(self, parser, write_file):
        path = write_file(
            "s.xml",
            '<schema name="T"><fields><!-- key --><field>id</field></fields></schema>',
        )
        assert parser.parse(path).fields == ("id",)

    def test_file_does_not_exist(self, parser, tmp_path):
        with pytest.raises(ParsingError, match="could not be found"):
            parser.parse(tmp_path / "missing.xml")

    def test_wrong_extension(self, parser, write_file):
        path = write_file("schema.txt", "not even xml")
        with pytest.raises(ParsingError, match="Invalid file format: schema.txt"):
            parser.parse(path)

    def test_malformed_xml_keeps_cause(self, parser, write_file):
        path = write_file("bad.xml", '<schema name="T"><fields>')
        with pytest.raises(ParsingError) as excinfo:
            parser.parse(path)
        assert isinstance(excinfo.value.__cause__, ET.ParseError)

    def test_wrong_root(self, parser, write_file):
        path = write_file("s.xml", '<table name="T"><fields/></table>')
        with pytest.raises(ParsingError, match="root element must be <schema>"):
            parser.parse(path)

    @pytest.mark.parametrize("root", ["<schema>", '<schema name="  ">'])
    def test_missing_name(self, parser, write_file, root):
        path = write_file("s.xml", f"{root}<fields><field>id</field></fields></schema>")
        with pytest.raises(ParsingError, match="'name' attribute"):
            parser.parse(path)

    def test_missing_fields_element(self, parser, write_file):
        path = write_file("s.xml", '<schema name="T"><field>id</field></schema>')
        with pytest.raises(ParsingError, match="must contain a <fields> element"):
            parser.parse(path)

    def test_unexpected_child_in_fields(self, parser, write_file):
        path = write_file(
            "s.xml", '<schema name="T"><fields><column>id</column></fields></schema>'
        )
        with pytest.raises(ParsingError, match="found <column>"):
            parser.parse(path)

    def test_mixed_content_field_uses_all_text(self, parser, write_file):
        path = write_file(
            "s.xml", '<schema name="T"><fields><field>first<b/>Name</field></fields></schema>'
        )
        assert parser.parse(path).fields == ("firstName",)

    def test_nested_element_text_is_included(self, parser, write_file):
        path = write_file(
            "s.xml",
            '<schema name="T"><fields><field> <i>user</i>Id </field></fields></schema>',
        )
        assert parser.parse(path).fields == ("userId",)

    def test_sink_receives_diagnostics(self, parser, person_xml, caplog):
        sink = logging.getLogger("test.xml_parser.sink")
        with caplog.at_level(logging.DEBUG, logger="test.xml_parser.sink"):
            parser.parse(person_xml, sink=sink)
        assert any(r.name == "test.xml_parser.sink" for r in caplog.records)
        assert not any(r.name.startswith("schema_ddl") for r in caplog.records)
