"""Tests for the Rust renderer."""

from buildergen.kernel.assemble import expand
from buildergen.kernel.definition import TypeDefinition, parse_type_expr
from buildergen.kernel.ir import OptionalType
from buildergen.render.rust import render_rust, render_type


EXPECTED_PERSON = """\
pub struct PersonBuilder {
    name: std::option::Option<String>,
    age: std::option::Option<Integer>,
}

impl Person {
    pub fn builder() -> PersonBuilder {
        PersonBuilder {
            name: std::option::Option::None,
            age: std::option::Option::None,
        }
    }
}

impl PersonBuilder {
    pub fn name(&mut self, name: String) -> &mut Self {
        self.name = std::option::Option::Some(name);
        self
    }

    pub fn age(&mut self, age: Integer) -> &mut Self {
        self.age = std::option::Option::Some(age);
        self
    }
}
"""

EXPECTED_EMPTY = """\
pub struct MarkerBuilder {}

impl Marker {
    pub fn builder() -> MarkerBuilder {
        MarkerBuilder {}
    }
}

impl MarkerBuilder {}
"""


def test_render_person():
    """Test the end-to-end Rust expansion for {name: String, age: Integer}."""
    definition = TypeDefinition(
        name="Person",
        body={"kind": "named", "fields": [{"name": "name", "type": "String"}, {"name": "age", "type": "Integer"}]},
    )
    assert render_rust(expand(definition)) == EXPECTED_PERSON


def test_render_empty_record(empty_definition):
    assert render_rust(expand(TypeDefinition(**empty_definition))) == EXPECTED_EMPTY


def test_render_nested_types():
    assert render_type(parse_type_expr("HashMap<String, Vec<u8>>")) == "HashMap<String, Vec<u8>>"
    assert render_type(OptionalType(inner=parse_type_expr("Vec<u8>"))) == "std::option::Option<Vec<u8>>"


def test_render_is_deterministic(person_definition):
    definition = TypeDefinition(**person_definition)
    assert render_rust(expand(definition)) == render_rust(expand(definition))


def test_render_opaque_types_verbatim(make_definition):
    definition = TypeDefinition(**make_definition("Msg", [("text", "&'static str"), ("pair", "(i32, i32)"), ("buf", "[u8; 4]")]))
    rendered = render_rust(expand(definition))

    assert "    text: std::option::Option<&'static str>," in rendered
    assert "    pair: std::option::Option<(i32, i32)>," in rendered
    assert "pub fn buf(&mut self, buf: [u8; 4]) -> &mut Self {" in rendered


def test_render_dotted_path_as_rust_path():
    assert render_type(parse_type_expr("a.b.C")) == "a::b::C"
    assert render_type(parse_type_expr("std.vec.Vec<a.B>")) == "std::vec::Vec<a::B>"
