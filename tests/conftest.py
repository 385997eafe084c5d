"""Shared fixtures for schema-ddl tests."""

import json
from types import SimpleNamespace

import pytest

from schema_ddl.core.schema import SchemaModel


PERSON_XML = """<?xml version="1.0" encoding="UTF-8"?>
<schema name="Person">
    <fields>
        <field>id</field>
        <field>firstName</field>
    </fields>
</schema>
"""


@pytest.fixture
def write_file(tmp_path):
    """Return a helper that writes text content to a file under tmp_path."""

    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def person_json(write_file):
    return write_file(
        "person.json", json.dumps({"name": "Person", "fields": ["id", "firstName"]})
    )


@pytest.fixture
def person_xml(write_file):
    return write_file("person.xml", PERSON_XML)


@pytest.fixture
def person_schema():
    return SchemaModel("Person", ("id", "firstName"))


@pytest.fixture
def raw_schema():
    """Build an unchecked stand-in with name/fields, bypassing model invariants."""

    def _build(name, fields):
        return SimpleNamespace(name=name, fields=fields)

    return _build


class RecordingView:
    """SchemaView test double that records every call."""

    def __init__(self):
        self.successes = []
        self.errors = []
        self.summaries = []

    def report_success(self, message):
        self.successes.append(message)

    def report_error(self, message):
        self.errors.append(message)

    def report_summary(self, schema):
        self.summaries.append(schema)


@pytest.fixture
def recording_view():
    return RecordingView()
