"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed buildergen package.
"""

import json
from pathlib import Path

import pytest


def named_definition(name, fields, **extra):
    """Build a named-field definition dict from (identifier, type) pairs."""
    data = {
        "name": name,
        "body": {
            "kind": "named",
            "fields": [
                {"name": ident, "type": type_, "location": {"file": "src/lib.rs", "line": 3 + i, "column": 4}}
                for i, (ident, type_) in enumerate(fields)
            ],
        },
        "location": {"file": "src/lib.rs", "line": 2, "column": 0},
    }
    data.update(extra)
    return data


@pytest.fixture
def person_definition():
    """The {name: String, age: Integer} record."""
    return named_definition("Person", [("name", "String"), ("age", "Integer")])


@pytest.fixture
def empty_definition():
    return named_definition("Marker", [])


@pytest.fixture
def sum_type_definition():
    return {
        "name": "Shape",
        "body": {
            "kind": "variants",
            "variants": [{"name": "Circle"}, {"name": "Square"}],
        },
        "location": {"file": "src/shape.rs", "line": 10, "column": 0},
    }


@pytest.fixture
def positional_definition():
    return {
        "name": "Point",
        "body": {
            "kind": "positional",
            "fields": [{"type": "i32"}, {"type": "i32"}],
        },
        "location": {"file": "src/point.rs", "line": 1, "column": 0},
    }


@pytest.fixture
def unit_definition():
    return {
        "name": "Token",
        "body": {"kind": "unit"},
        "location": {"file": "src/token.rs", "line": 7, "column": 0},
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a dict to a JSON file under tmp_path and return its path."""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def exec_python():
    """Execute rendered Python with the given origin classes bound; return the namespace."""
    def _exec(source, *origins):
        namespace = {}
        for origin in origins:
            namespace[origin] = type(origin, (), {})
        exec(compile(source, "<generated>", "exec"), namespace)
        return namespace
    return _exec


@pytest.fixture
def make_definition():
    return named_definition
