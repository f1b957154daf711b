"""Structured intermediate for generated builder code.

Synthesis emits these models; the render package's renderers turn them into
target syntax. Nothing in here is target text.
"""

from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from buildergen._internal.contract import ARTIFACT_VERSION

from .definition import TypeRef


class OptionalType(BaseModel):
    """Two-variant wrapper: absent, or present(value of inner)."""
    kind: Literal["optional"] = "optional"
    inner: TypeRef

    model_config = ConfigDict(extra="forbid", frozen=True)


class SelfRef(BaseModel):
    """Reference to the receiver of an operation, used as a return type."""
    kind: Literal["self_ref"] = "self_ref"

    model_config = ConfigDict(extra="forbid", frozen=True)


class FieldDecl(BaseModel):
    identifier: str
    type: OptionalType

    model_config = ConfigDict(extra="forbid", frozen=True)


class StructDecl(BaseModel):
    name: str
    fields: Tuple[FieldDecl, ...] = ()

    model_config = ConfigDict(extra="forbid", frozen=True)


class Param(BaseModel):
    identifier: str
    type: TypeRef

    model_config = ConfigDict(extra="forbid", frozen=True)


class AbsentValue(BaseModel):
    kind: Literal["absent"] = "absent"

    model_config = ConfigDict(extra="forbid", frozen=True)


class PresentValue(BaseModel):
    """present(<param>): wraps the named parameter."""
    kind: Literal["present"] = "present"
    param: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class FieldInit(BaseModel):
    field: str
    value: AbsentValue = Field(default_factory=AbsentValue)

    model_config = ConfigDict(extra="forbid", frozen=True)


class ConstructStruct(BaseModel):
    kind: Literal["construct"] = "construct"
    struct: str
    inits: Tuple[FieldInit, ...] = ()

    model_config = ConfigDict(extra="forbid", frozen=True)


class AssignField(BaseModel):
    """self.<field> = <value>"""
    kind: Literal["assign"] = "assign"
    field: str
    value: PresentValue

    model_config = ConfigDict(extra="forbid", frozen=True)


class ReturnSelf(BaseModel):
    kind: Literal["return_self"] = "return_self"

    model_config = ConfigDict(extra="forbid", frozen=True)


class ReturnValue(BaseModel):
    kind: Literal["return"] = "return"
    value: ConstructStruct

    model_config = ConfigDict(extra="forbid", frozen=True)


Statement = Annotated[
    Union[AssignField, ReturnSelf, ReturnValue],
    Field(discriminator="kind"),
]


class Operation(BaseModel):
    """An operation added to a type.

    receiver "none" is an associated (static) operation; "mut_self" mutates
    the receiver in place.
    """
    name: str
    receiver: Literal["none", "mut_self"]
    params: Tuple[Param, ...] = ()
    returns: Union[SelfRef, TypeRef]
    body: Tuple[Statement, ...]

    model_config = ConfigDict(extra="forbid", frozen=True)


class ImplBlock(BaseModel):
    """Operations added to an existing type."""
    target: str
    operations: Tuple[Operation, ...] = ()

    model_config = ConfigDict(extra="forbid", frozen=True)


class GeneratedArtifact(BaseModel):
    """Everything generated for one origin type."""
    artifact_version: str = ARTIFACT_VERSION
    origin: str
    builder: StructDecl
    origin_extension: ImplBlock
    builder_extension: ImplBlock

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def factory(self) -> Operation:
        return self.origin_extension.operations[0]

    @property
    def setters(self) -> Tuple[Operation, ...]:
        return self.builder_extension.operations
