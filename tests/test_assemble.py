"""Tests for artifact assembly and determinism."""

import pytest

from buildergen.api import artifact_digest
from buildergen.contracts import GenerationOptions
from buildergen.kernel.assemble import assemble, builder_name_for, expand
from buildergen.kernel.definition import TypeDefinition
from buildergen.kernel.extract import InvalidShapeError, extract_schema
from buildergen.kernel.ir import GeneratedArtifact


def test_assemble_person(person_definition):
    artifact = assemble(extract_schema(TypeDefinition(**person_definition)))

    assert artifact.origin == "Person"
    assert artifact.builder.name == "PersonBuilder"
    assert [f.identifier for f in artifact.builder.fields] == ["name", "age"]
    assert artifact.origin_extension.target == "Person"
    assert [op.name for op in artifact.origin_extension.operations] == ["builder"]
    assert artifact.builder_extension.target == "PersonBuilder"
    assert [op.name for op in artifact.setters] == ["name", "age"]
    assert artifact.factory.returns.name == "PersonBuilder"
    assert artifact.artifact_version == "0.1"


def test_assemble_empty_record(empty_definition):
    """Test a zero-field record gets a builder with no fields and no setters."""
    artifact = expand(TypeDefinition(**empty_definition))

    assert artifact.builder.name == "MarkerBuilder"
    assert artifact.builder.fields == ()
    assert artifact.setters == ()
    assert artifact.factory.body[0].value.inits == ()


def test_options_rename_builder_and_factory(person_definition):
    options = GenerationOptions(builder_suffix="Draft", factory_name="draft")
    artifact = expand(TypeDefinition(**person_definition), options)

    assert artifact.builder.name == "PersonDraft"
    assert artifact.builder_extension.target == "PersonDraft"
    assert artifact.factory.name == "draft"
    assert artifact.factory.body[0].value.struct == "PersonDraft"


def test_builder_name_for_defaults():
    assert builder_name_for("Command") == "CommandBuilder"


def test_expand_propagates_shape_errors(sum_type_definition):
    with pytest.raises(InvalidShapeError):
        expand(TypeDefinition(**sum_type_definition))


def test_expansion_is_deterministic(person_definition):
    """Test identical input produces identical artifacts and digests."""
    first = expand(TypeDefinition(**person_definition))
    second = expand(TypeDefinition(**person_definition))

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()
    assert artifact_digest(first) == artifact_digest(second)
    assert artifact_digest(first).startswith("sha256:")


def test_field_order_changes_digest(make_definition):
    a = expand(TypeDefinition(**make_definition("P", [("x", "i32"), ("y", "i32")])))
    b = expand(TypeDefinition(**make_definition("P", [("y", "i32"), ("x", "i32")])))
    assert artifact_digest(a) != artifact_digest(b)


def test_artifact_round_trips_through_json(person_definition):
    artifact = expand(TypeDefinition(**person_definition))
    assert GeneratedArtifact.model_validate_json(artifact.model_dump_json()) == artifact
