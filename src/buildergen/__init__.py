"""buildergen: builder synthesis for named-field record types."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("buildergen")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from buildergen.api import generate, validate, GenerationResult, ValidationResult
from buildergen.contracts import Diagnostic, GenerationOptions
from buildergen.codes import ShapeCode
from buildergen.kernel.extract import InvalidShapeError

__all__ = [
    "__version__",
    "generate",
    "validate",
    "GenerationResult",
    "ValidationResult",
    "Diagnostic",
    "GenerationOptions",
    "ShapeCode",
    "InvalidShapeError",
]
