"""Public API for buildergen.

High-level functions that return complete, structured results.
Hosts should use these functions instead of importing from the kernel.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from buildergen._internal.canonical_json import canonical_sha256
from buildergen._internal.contract import RENDER_TARGETS
from buildergen.codes import ShapeCode
from buildergen.contracts import Diagnostic, GenerationOptions
from buildergen.kernel.assemble import assemble
from buildergen.kernel.definition import SourceLocation, TypeDefinition
from buildergen.kernel.extract import InvalidShapeError, extract_schema
from buildergen.kernel.ir import GeneratedArtifact
from buildergen.kernel.schema import RecordSchema
from buildergen.render.python import render_python
from buildergen.render.rust import render_rust


logger = logging.getLogger(__name__)

DefinitionInput = Union[str, os.PathLike, Path, Dict, TypeDefinition]


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


class GenerationResult(BaseModel):
    """Outcome of one generation: either an artifact or a diagnostic, never both."""
    ok: bool
    artifact: Optional[GeneratedArtifact] = None
    diagnostic: Optional[Diagnostic] = None

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "GenerationResult":
        """Validate that ok=True carries only an artifact and ok=False only a diagnostic."""
        if self.ok and (self.artifact is None or self.diagnostic is not None):
            raise ValueError("A successful result must carry an artifact and no diagnostic")
        if not self.ok and (self.diagnostic is None or self.artifact is not None):
            raise ValueError("A failed result must carry a diagnostic and no artifact")
        return self


class ValidationResult(BaseModel):
    """Result of a validation/preflight check."""
    ok: bool  # True if no errors (warnings don't block)
    errors: List[Diagnostic]  # Blocking issues
    warnings: List[Diagnostic] = Field(default_factory=list)  # Non-blocking issues
    field_count: Optional[int] = None  # Set when a record schema was extracted


def _load_definition_from_path(path: Path) -> TypeDefinition:
    """Load a type definition from a JSON file."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return TypeDefinition(**data)


def _load_definition_from_dict(data: Dict) -> TypeDefinition:
    """Load a type definition from dict."""
    return TypeDefinition(**data)


def load_definition(definition: DefinitionInput) -> TypeDefinition:
    """
    Load a type definition from a model, a dict or a JSON file path.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the document is not a well-formed type definition
            (json.JSONDecodeError and pydantic.ValidationError are both ValueErrors)
    """
    if isinstance(definition, TypeDefinition):
        return definition
    if isinstance(definition, dict):
        return _load_definition_from_dict(definition)
    return _load_definition_from_path(_normalize_path(definition))


def _structure_diagnostic(definition: DefinitionInput, error: Exception) -> Diagnostic:
    """Diagnostic for input that could not be loaded as a definition at all."""
    file = None
    if not isinstance(definition, (dict, TypeDefinition)):
        file = str(_normalize_path(definition))
    return Diagnostic(
        code=ShapeCode.INVALID_STRUCTURE.value,
        message=f"Failed to parse type definition: {error}",
        location=SourceLocation(file=file),
    )


def extract(definition: DefinitionInput) -> RecordSchema:
    """
    Extract the record schema of a definition.

    Raises:
        InvalidShapeError: If the definition is not a named-field record
    """
    return extract_schema(load_definition(definition))


def generate(
    definition: DefinitionInput,
    options: Optional[GenerationOptions] = None,
) -> GenerationResult:
    """
    Generate the builder artifact for one type definition.

    Never raises for bad input: load failures and shape errors come back as
    GenerationResult(ok=False, diagnostic=...). Each call is independent and
    keeps no state.

    Args:
        definition: Type definition (model, dict or Path to JSON)
        options: Naming options (defaults: "<Name>Builder", factory "builder")

    Returns:
        GenerationResult with either the artifact or the diagnostic.
    """
    try:
        definition_obj = load_definition(definition)
    except (OSError, ValueError) as e:
        diagnostic = _structure_diagnostic(definition, e)
        logger.debug("definition could not be loaded: %s", diagnostic.message)
        return GenerationResult(ok=False, diagnostic=diagnostic)

    try:
        schema = extract_schema(definition_obj)
    except InvalidShapeError as e:
        logger.debug("rejected %s: %s", definition_obj.name, e.code.value)
        return GenerationResult(ok=False, diagnostic=e.to_diagnostic())

    return GenerationResult(ok=True, artifact=assemble(schema, options))


def validate(definition: DefinitionInput) -> ValidationResult:
    """
    Pure validation/preflight for a single definition.

    Performs the same checks generate() relies on, without producing output.
    A zero-field record is valid but reported as a warning, since its builder
    has no setters.
    """
    errors: List[Diagnostic] = []
    warnings: List[Diagnostic] = []

    try:
        definition_obj = load_definition(definition)
    except (OSError, ValueError) as e:
        errors.append(_structure_diagnostic(definition, e))
        return ValidationResult(ok=False, errors=errors, warnings=warnings)

    try:
        schema = extract_schema(definition_obj)
    except InvalidShapeError as e:
        errors.append(e.to_diagnostic())
        return ValidationResult(ok=False, errors=errors, warnings=warnings)

    if not schema.fields:
        warnings.append(Diagnostic(
            code=ShapeCode.EMPTY_RECORD.value,
            message=f"'{schema.type_name}' has no fields; its builder will have no setters",
            location=schema.location,
        ))

    return ValidationResult(ok=True, errors=errors, warnings=warnings, field_count=len(schema.fields))


def render(artifact: GeneratedArtifact, target: Literal["rust", "python"] = "rust") -> str:
    """Render an artifact as source text for one target syntax."""
    if target == "rust":
        return render_rust(artifact)
    if target == "python":
        return render_python(artifact)
    raise ValueError(f"Unknown render target '{target}'. Expected one of: {', '.join(RENDER_TARGETS)}")


def artifact_digest(artifact: GeneratedArtifact) -> str:
    """Content hash of an artifact ("sha256:<hex>"), stable across runs."""
    return canonical_sha256(artifact.model_dump(mode="json"))


def definition_json_schemas() -> Dict[str, dict]:
    """JSON Schemas for the input definition, the record schema and the artifact."""
    return {
        "type_definition": TypeDefinition.model_json_schema(),
        "record_schema": RecordSchema.model_json_schema(),
        "generated_artifact": GeneratedArtifact.model_json_schema(),
    }
