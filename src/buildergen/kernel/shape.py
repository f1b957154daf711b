"""Builder shape: one optional-wrapped field per record field."""

from typing import Tuple

from .ir import FieldDecl, OptionalType
from .schema import RecordSchema


def synthesize_shape(schema: RecordSchema) -> Tuple[FieldDecl, ...]:
    """(id, T) -> (id, Optional<T>) for every field, in declaration order."""
    return tuple(
        FieldDecl(identifier=f.identifier, type=OptionalType(inner=f.declared_type))
        for f in schema.fields
    )
