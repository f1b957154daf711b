"""Schema extraction: host type definition -> RecordSchema.

Only a struct with named fields can carry a builder. Everything else is a
structural defect of the input and fails with InvalidShapeError, anchored at
the source location the host should point its diagnostic at.
"""

import logging

from buildergen.codes import ShapeCode
from buildergen.contracts import Diagnostic

from .definition import SourceLocation, TypeDefinition
from .schema import FieldDescriptor, RecordSchema


logger = logging.getLogger(__name__)


class InvalidShapeError(ValueError):
    """Raised when a type definition is not a record with named fields."""

    def __init__(self, message: str, *, code: ShapeCode, location: SourceLocation):
        super().__init__(message)
        self.message = message
        self.code = code
        self.location = location

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(code=self.code.value, message=self.message, location=self.location)


def extract_schema(definition: TypeDefinition) -> RecordSchema:
    """
    Validate that a definition is a named-field record and normalize it.

    Args:
        definition: Structural description from the host toolchain

    Returns:
        RecordSchema with fields in declaration order

    Raises:
        InvalidShapeError: For sum types, positional fields, field-less
            (unit) types, generic definitions and duplicate field names
    """
    body = definition.body

    if body.kind == "variants":
        raise InvalidShapeError(
            "Must define on a Struct, not Enum",
            code=ShapeCode.SUM_TYPE,
            location=definition.location,
        )
    if body.kind == "positional":
        raise InvalidShapeError(
            f"Builder requires named fields, but '{definition.name}' declares positional fields",
            code=ShapeCode.POSITIONAL_FIELDS,
            location=definition.location,
        )
    if body.kind == "unit":
        raise InvalidShapeError(
            f"Builder requires a field list, but '{definition.name}' has none",
            code=ShapeCode.UNIT_TYPE,
            location=definition.location,
        )
    if definition.generics:
        raise InvalidShapeError(
            f"Builder does not support generic parameters on '{definition.name}': "
            f"{', '.join(definition.generics)}",
            code=ShapeCode.GENERIC_PARAMETERS,
            location=definition.location,
        )

    seen = set()
    descriptors = []
    for field in body.fields:
        if field.name in seen:
            raise InvalidShapeError(
                f"Field '{field.name}' is declared more than once in '{definition.name}'",
                code=ShapeCode.DUPLICATE_FIELD,
                location=field.location,
            )
        seen.add(field.name)
        descriptors.append(FieldDescriptor(
            identifier=field.name,
            declared_type=field.type,
            location=field.location,
        ))

    logger.debug("extracted record schema %s with %d field(s)", definition.name, len(descriptors))
    return RecordSchema(
        type_name=definition.name,
        fields=tuple(descriptors),
        location=definition.location,
    )
