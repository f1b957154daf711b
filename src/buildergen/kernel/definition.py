"""Pydantic models for the structural type definition handed over by a host toolchain.

A TypeDefinition is what a front end knows about a declared type before any
builder logic runs: its name, generic parameters, source location and body.
The body is one of four forms:

- named:      struct with braces-and-identifiers fields (the only builder origin)
- positional: struct with unnamed, position-addressed fields
- unit:       marker type with no field list at all
- variants:   sum type
"""

import re
from typing import Annotated, Any, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


IDENTIFIER_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"

_TYPE_TOKEN_RE = re.compile(
    r"\s*(?:(?P<name>[A-Za-z_][A-Za-z0-9_]*(?:(?:::|\.)[A-Za-z_][A-Za-z0-9_]*)*)|(?P<punct>[<>\[\],]))"
)
_CLOSING = {"<": ">", "[": "]"}
_PUNCTUATION = {"<", ">", "[", "]", ","}
_TYPE_PATH_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(?:(?:::|\.)[A-Za-z_][A-Za-z0-9_]*)*$")


class SourceLocation(BaseModel):
    """Position of a definition (or one of its parts) in host source."""
    file: Optional[str] = None
    line: int = Field(1, ge=1)
    column: int = Field(0, ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def __str__(self) -> str:
        return f"{self.file or '<input>'}:{self.line}:{self.column}"


class TypeRef(BaseModel):
    """A declared type, kept structural and opaque: name plus type arguments.

    Input may be given as text ("Vec<String>", "dict[str, int]") or as
    {"name": ..., "args": [...]}. Text outside the path-and-arguments grammar
    ("&'static str", "(i32, i32)") is kept verbatim as the name.
    """
    name: str
    args: Tuple["TypeRef", ...] = ()

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def accept_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            try:
                return _parse_type_text(data)
            except ValueError:
                if not data.strip():
                    raise
                return {"name": data.strip()}
        return data

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}<{', '.join(str(a) for a in self.args)}>"


def parse_type_expr(text: str) -> TypeRef:
    """Parse textual type syntax into a TypeRef.

    Supports dotted or `::` paths and `<...>` / `[...]` argument lists.

    Raises:
        ValueError: If the text is not a well-formed type expression
    """
    return TypeRef.model_validate(_parse_type_text(text))


def is_type_path(name: str) -> bool:
    """True for a plain `::` or `.` separated path, false for opaque type text."""
    return _TYPE_PATH_RE.match(name) is not None


def _tokenize_type(text: str) -> List[str]:
    tokens: List[str] = []
    pos = 0
    while pos < len(text):
        if text[pos:].strip() == "":
            break
        match = _TYPE_TOKEN_RE.match(text, pos)
        if match is None:
            raise ValueError(f"Unexpected character {text[pos:].strip()[0]!r} in type expression {text!r}")
        tokens.append(match.group("name") or match.group("punct"))
        pos = match.end()
    return tokens


def _parse_type_text(text: str) -> dict:
    tokens = _tokenize_type(text)
    if not tokens:
        raise ValueError("Type expression must not be empty")
    pos, parsed = _parse_type_tokens(tokens, 0, text)
    if pos != len(tokens):
        raise ValueError(f"Trailing tokens in type expression {text!r}")
    return parsed


def _parse_type_tokens(tokens: List[str], pos: int, text: str) -> Tuple[int, dict]:
    if pos >= len(tokens) or tokens[pos] in _PUNCTUATION:
        raise ValueError(f"Expected a type name in {text!r}")
    name = tokens[pos]
    pos += 1
    args: List[dict] = []
    if pos < len(tokens) and tokens[pos] in _CLOSING:
        closing = _CLOSING[tokens[pos]]
        pos += 1
        while True:
            pos, arg = _parse_type_tokens(tokens, pos, text)
            args.append(arg)
            if pos < len(tokens) and tokens[pos] == ",":
                pos += 1
                continue
            if pos < len(tokens) and tokens[pos] == closing:
                pos += 1
                break
            raise ValueError(f"Unbalanced type arguments in {text!r}")
    return pos, {"name": name, "args": args}


class NamedField(BaseModel):
    """A field declared with an identifier."""
    name: str = Field(..., pattern=IDENTIFIER_PATTERN)
    type: TypeRef
    location: SourceLocation = Field(default_factory=SourceLocation)

    model_config = ConfigDict(extra="forbid")


class PositionalField(BaseModel):
    """A field addressed by position only."""
    type: TypeRef
    location: SourceLocation = Field(default_factory=SourceLocation)

    model_config = ConfigDict(extra="forbid")


class VariantDef(BaseModel):
    """One alternative of a sum type. Its payload is irrelevant here."""
    name: str = Field(..., pattern=IDENTIFIER_PATTERN)
    location: SourceLocation = Field(default_factory=SourceLocation)

    model_config = ConfigDict(extra="forbid")


class NamedBody(BaseModel):
    kind: Literal["named"]
    fields: List[NamedField] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class PositionalBody(BaseModel):
    kind: Literal["positional"]
    fields: List[PositionalField] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class UnitBody(BaseModel):
    kind: Literal["unit"]

    model_config = ConfigDict(extra="forbid")


class VariantsBody(BaseModel):
    kind: Literal["variants"]
    variants: List[VariantDef] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


DefinitionBody = Annotated[
    Union[NamedBody, PositionalBody, UnitBody, VariantsBody],
    Field(discriminator="kind"),
]


class TypeDefinition(BaseModel):
    """A type definition as described by the host toolchain."""
    name: str = Field(..., pattern=IDENTIFIER_PATTERN)
    generics: List[str] = Field(default_factory=list)
    body: DefinitionBody
    location: SourceLocation = Field(default_factory=SourceLocation)

    model_config = ConfigDict(extra="forbid")
