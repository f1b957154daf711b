"""Assembly of the builder declaration, factory and setters into one artifact."""

import logging
from typing import Optional

from buildergen.contracts import GenerationOptions

from .definition import TypeDefinition
from .extract import extract_schema
from .factory import synthesize_factory
from .ir import GeneratedArtifact, ImplBlock, StructDecl
from .schema import RecordSchema
from .setters import synthesize_setters
from .shape import synthesize_shape


logger = logging.getLogger(__name__)


def builder_name_for(type_name: str, options: Optional[GenerationOptions] = None) -> str:
    options = options or GenerationOptions()
    return f"{type_name}{options.builder_suffix}"


def assemble(schema: RecordSchema, options: Optional[GenerationOptions] = None) -> GeneratedArtifact:
    """
    Compose the generated pieces for a record schema.

    The artifact holds:
    - the builder declaration (one Optional<T> field per record field)
    - an extension of the origin type adding the factory
    - an extension of the builder type adding one setter per field

    Structural only: declared types are carried through unchecked.
    """
    options = options or GenerationOptions()
    builder_name = builder_name_for(schema.type_name, options)

    artifact = GeneratedArtifact(
        origin=schema.type_name,
        builder=StructDecl(name=builder_name, fields=synthesize_shape(schema)),
        origin_extension=ImplBlock(
            target=schema.type_name,
            operations=(synthesize_factory(schema, builder_name, options.factory_name),),
        ),
        builder_extension=ImplBlock(
            target=builder_name,
            operations=synthesize_setters(schema),
        ),
    )
    logger.debug(
        "assembled %s for %s: %d field(s), %d setter(s)",
        builder_name, schema.type_name, len(artifact.builder.fields), len(artifact.setters),
    )
    return artifact


def expand(definition: TypeDefinition, options: Optional[GenerationOptions] = None) -> GeneratedArtifact:
    """Extract and assemble in one step. InvalidShapeError propagates unchanged."""
    return assemble(extract_schema(definition), options)
