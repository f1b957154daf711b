"""Public diagnostic and option models for buildergen."""

from pydantic import BaseModel, ConfigDict, Field

from buildergen._internal.contract import DEFAULT_BUILDER_SUFFIX, DEFAULT_FACTORY_NAME
from buildergen.kernel.definition import IDENTIFIER_PATTERN, SourceLocation


class Diagnostic(BaseModel):
    """A compile-time diagnostic for the host toolchain to present."""
    code: str  # ShapeCode value, e.g. "SUM_TYPE"
    message: str
    location: SourceLocation

    model_config = ConfigDict(extra="forbid", frozen=True)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message} (at {self.location})"


class GenerationOptions(BaseModel):
    """Naming options for generated code."""
    builder_suffix: str = Field(DEFAULT_BUILDER_SUFFIX, pattern=r"^[A-Za-z0-9_]+$")
    factory_name: str = Field(DEFAULT_FACTORY_NAME, pattern=IDENTIFIER_PATTERN)

    model_config = ConfigDict(extra="forbid", frozen=True)
