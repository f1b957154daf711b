"""Factory synthesis: a no-argument operation returning an all-absent builder."""

from typing import Tuple

from buildergen._internal.contract import DEFAULT_FACTORY_NAME

from .definition import TypeRef
from .ir import AbsentValue, ConstructStruct, FieldInit, Operation, ReturnValue
from .schema import RecordSchema


def factory_init_clauses(schema: RecordSchema) -> Tuple[FieldInit, ...]:
    """One `<id>: absent` initializer per field."""
    return tuple(FieldInit(field=f.identifier, value=AbsentValue()) for f in schema.fields)


def synthesize_factory(
    schema: RecordSchema,
    builder_name: str,
    factory_name: str = DEFAULT_FACTORY_NAME,
) -> Operation:
    """Associated operation on the origin type: `factory_name() -> builder_name`."""
    return Operation(
        name=factory_name,
        receiver="none",
        params=(),
        returns=TypeRef(name=builder_name),
        body=(ReturnValue(value=ConstructStruct(struct=builder_name, inits=factory_init_clauses(schema))),),
    )
