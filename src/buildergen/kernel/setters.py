"""Setter synthesis: one chainable mutating operation per field.

A setter wraps its argument as present(value), overwrites the field
unconditionally and hands the receiver back for chaining.
"""

from typing import Tuple

from .ir import AssignField, Operation, Param, PresentValue, ReturnSelf, SelfRef
from .schema import FieldDescriptor, RecordSchema


def synthesize_setter(field: FieldDescriptor) -> Operation:
    return Operation(
        name=field.identifier,
        receiver="mut_self",
        params=(Param(identifier=field.identifier, type=field.declared_type),),
        returns=SelfRef(),
        body=(
            AssignField(field=field.identifier, value=PresentValue(param=field.identifier)),
            ReturnSelf(),
        ),
    )


def synthesize_setters(schema: RecordSchema) -> Tuple[Operation, ...]:
    return tuple(synthesize_setter(f) for f in schema.fields)
