"""Render a GeneratedArtifact as Rust source."""

from __future__ import annotations

from typing import List, Union

from buildergen.kernel.definition import TypeRef, is_type_path
from buildergen.kernel.ir import (
    AbsentValue,
    AssignField,
    ConstructStruct,
    GeneratedArtifact,
    ImplBlock,
    Operation,
    OptionalType,
    PresentValue,
    ReturnSelf,
    ReturnValue,
    SelfRef,
    StructDecl,
)

OPTION_PATH = "std::option::Option"
INDENT = "    "


def render_rust(artifact: GeneratedArtifact) -> str:
    """Builder struct, `impl Origin { builder }` and `impl Builder { setters }`."""
    parts = [
        _render_struct(artifact.builder),
        _render_impl(artifact.origin_extension),
        _render_impl(artifact.builder_extension),
    ]
    return "\n\n".join(parts) + "\n"


def render_type(type_: Union[TypeRef, OptionalType]) -> str:
    if isinstance(type_, OptionalType):
        return f"{OPTION_PATH}<{render_type(type_.inner)}>"
    name = type_.name.replace(".", "::") if is_type_path(type_.name) else type_.name
    if not type_.args:
        return name
    return f"{name}<{', '.join(render_type(a) for a in type_.args)}>"


def _render_struct(decl: StructDecl) -> str:
    if not decl.fields:
        return f"pub struct {decl.name} {{}}"
    lines = [f"pub struct {decl.name} {{"]
    for field in decl.fields:
        lines.append(f"{INDENT}{field.identifier}: {render_type(field.type)},")
    lines.append("}")
    return "\n".join(lines)


def _render_impl(block: ImplBlock) -> str:
    if not block.operations:
        return f"impl {block.target} {{}}"
    bodies = [_indent(_render_operation(op), 1) for op in block.operations]
    return f"impl {block.target} {{\n" + "\n\n".join(bodies) + "\n}"


def _render_operation(op: Operation) -> str:
    params: List[str] = []
    if op.receiver == "mut_self":
        params.append("&mut self")
    params.extend(f"{p.identifier}: {render_type(p.type)}" for p in op.params)

    if isinstance(op.returns, SelfRef):
        returns = "&mut Self"
    else:
        returns = render_type(op.returns)

    lines = [f"pub fn {op.name}({', '.join(params)}) -> {returns} {{"]
    for stmt in op.body:
        lines.append(_indent(_render_statement(stmt), 1))
    lines.append("}")
    return "\n".join(lines)


def _render_statement(stmt) -> str:
    if isinstance(stmt, AssignField):
        return f"self.{stmt.field} = {_render_value(stmt.value)};"
    if isinstance(stmt, ReturnSelf):
        return "self"
    if isinstance(stmt, ReturnValue):
        return _render_construct(stmt.value)
    raise TypeError(f"Unsupported statement: {type(stmt).__name__}")


def _render_construct(expr: ConstructStruct) -> str:
    if not expr.inits:
        return f"{expr.struct} {{}}"
    lines = [f"{expr.struct} {{"]
    for init in expr.inits:
        lines.append(f"{INDENT}{init.field}: {_render_value(init.value)},")
    lines.append("}")
    return "\n".join(lines)


def _render_value(value: Union[AbsentValue, PresentValue]) -> str:
    if isinstance(value, AbsentValue):
        return f"{OPTION_PATH}::None"
    return f"{OPTION_PATH}::Some({value.param})"


def _indent(text: str, level: int) -> str:
    prefix = INDENT * level
    return "\n".join(prefix + line if line else line for line in text.split("\n"))
