"""Render a GeneratedArtifact as Python source.

Python keeps methods and instance attributes in one namespace, so the
builder stores field `x` in the slot `_x` and exposes the setter as `x`.
The factory is attached to the origin class, which must already be bound
in the namespace the generated code runs in. Setters take their argument as
`value` and the runtime container is imported under a private alias, so no
field name can shadow either.
"""

from __future__ import annotations

import keyword
from typing import Dict, List, Union

from buildergen.kernel.definition import TypeRef, is_type_path
from buildergen.kernel.ir import (
    AbsentValue,
    AssignField,
    ConstructStruct,
    GeneratedArtifact,
    Operation,
    OptionalType,
    PresentValue,
    ReturnSelf,
    ReturnValue,
    SelfRef,
)

INDENT = "    "
HEADER = (
    "# Generated by buildergen. Do not edit.\n"
    "from __future__ import annotations\n"
    "\n"
    "from buildergen import optional as _buildergen_optional"
)
RUNTIME_ALIAS = "_buildergen_optional"
SETTER_PARAM = "value"
RESERVED_IDENTIFIERS = frozenset({"self", RUNTIME_ALIAS})


class RenderError(ValueError):
    """Raised when an artifact cannot be expressed in the target syntax."""


def state_attribute(identifier: str) -> str:
    """Slot name holding the state of field `identifier`."""
    return f"_{identifier}"


def render_python(artifact: GeneratedArtifact) -> str:
    for name in _identifiers(artifact):
        _check_identifier(name)
    fields = {f.identifier for f in artifact.builder.fields}
    for identifier in sorted(fields):
        if identifier.startswith("__"):
            raise RenderError(f"Field '{identifier}' would be name-mangled or clash with builder internals")
        if state_attribute(identifier) in fields:
            raise RenderError(
                f"Field '{state_attribute(identifier)}' collides with the state slot of field '{identifier}'"
            )

    sections = [
        HEADER,
        _render_builder_class(artifact),
        _render_factory(artifact),
    ]
    return "\n\n\n".join(sections) + "\n"


def render_type(type_: Union[TypeRef, OptionalType, SelfRef]) -> str:
    if isinstance(type_, OptionalType):
        return f"{RUNTIME_ALIAS}.Maybe[{render_type(type_.inner)}]"
    if isinstance(type_, SelfRef):
        raise RenderError("Receiver references are rendered by the owning class")
    if not is_type_path(type_.name):
        # opaque host syntax, kept as a string annotation
        return repr(str(type_))
    name = type_.name.replace("::", ".")
    if not type_.args:
        return name
    return f"{name}[{', '.join(render_type(a) for a in type_.args)}]"


def _identifiers(artifact: GeneratedArtifact) -> List[str]:
    names = [artifact.origin, artifact.builder.name, artifact.factory.name]
    names.extend(f.identifier for f in artifact.builder.fields)
    return names


def _check_identifier(name: str) -> None:
    if keyword.iskeyword(name) or name in RESERVED_IDENTIFIERS:
        raise RenderError(f"'{name}' cannot be used as a Python identifier")


def _render_builder_class(artifact: GeneratedArtifact) -> str:
    builder = artifact.builder
    slots = tuple(state_attribute(f.identifier) for f in builder.fields)
    lines = [f"class {builder.name}:", f"{INDENT}__slots__ = {slots!r}", ""]

    params = "".join(f", {f.identifier}: {render_type(f.type)}" for f in builder.fields)
    lines.append(f"{INDENT}def __init__(self{params}) -> None:")
    if builder.fields:
        for f in builder.fields:
            lines.append(f"{INDENT * 2}self.{state_attribute(f.identifier)} = {f.identifier}")
    else:
        lines.append(f"{INDENT * 2}pass")

    lines.append("")
    lines.append(f"{INDENT}def __repr__(self) -> str:")
    if builder.fields:
        shown = ", ".join(f"{f.identifier}={{self.{state_attribute(f.identifier)}!r}}" for f in builder.fields)
        lines.append(f'{INDENT * 2}return f"{builder.name}({shown})"')
    else:
        lines.append(f'{INDENT * 2}return "{builder.name}()"')

    for op in artifact.setters:
        lines.append("")
        lines.extend(_indent_lines(_render_method(op, builder.name), 1))
    return "\n".join(lines)


def _local_names(op: Operation) -> Dict[str, str]:
    if len(op.params) == 1:
        return {op.params[0].identifier: SETTER_PARAM}
    return {p.identifier: f"{SETTER_PARAM}{i}" for i, p in enumerate(op.params)}


def _render_method(op: Operation, owner: str) -> List[str]:
    names = _local_names(op)
    params = "".join(f", {names[p.identifier]}: {render_type(p.type)}" for p in op.params)
    returns = owner if isinstance(op.returns, SelfRef) else render_type(op.returns)
    lines = [f"def {op.name}(self{params}) -> {returns}:"]
    lines.extend(INDENT + _render_statement(stmt, names) for stmt in op.body)
    return lines


def _render_factory(artifact: GeneratedArtifact) -> str:
    op = artifact.factory
    function_name = f"_{artifact.origin}_{op.name}"
    names = _local_names(op)
    params = ", ".join(f"{names[p.identifier]}: {render_type(p.type)}" for p in op.params)
    lines = [f"def {function_name}({params}) -> {render_type(op.returns)}:"]
    lines.extend(INDENT + _render_statement(stmt, names) for stmt in op.body)
    lines.append("")
    lines.append("")
    lines.append(f"{artifact.origin_extension.target}.{op.name} = staticmethod({function_name})")
    return "\n".join(lines)


def _render_statement(stmt, names: Dict[str, str]) -> str:
    if isinstance(stmt, AssignField):
        return f"self.{state_attribute(stmt.field)} = {_render_value(stmt.value, names)}"
    if isinstance(stmt, ReturnSelf):
        return "return self"
    if isinstance(stmt, ReturnValue):
        return f"return {_render_construct(stmt.value, names)}"
    raise TypeError(f"Unsupported statement: {type(stmt).__name__}")


def _render_construct(expr: ConstructStruct, names: Dict[str, str]) -> str:
    args = ", ".join(f"{init.field}={_render_value(init.value, names)}" for init in expr.inits)
    return f"{expr.struct}({args})"


def _render_value(value: Union[AbsentValue, PresentValue], names: Dict[str, str]) -> str:
    if isinstance(value, AbsentValue):
        return f"{RUNTIME_ALIAS}.ABSENT"
    return f"{RUNTIME_ALIAS}.Present({names[value.param]})"


def _indent_lines(lines: List[str], level: int) -> List[str]:
    prefix = INDENT * level
    return [prefix + line if line else line for line in lines]
