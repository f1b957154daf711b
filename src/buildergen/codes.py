"""Diagnostic code constants for buildergen.

These constants prevent stringly-typed diagnostic codes and ensure
host tooling can match on a stable value instead of a message.
"""

from enum import Enum


class ShapeCode(str, Enum):
    """Diagnostic codes for definitions that cannot carry a builder."""

    # Errors (blocking)
    INVALID_STRUCTURE = "INVALID_STRUCTURE"
    SUM_TYPE = "SUM_TYPE"
    POSITIONAL_FIELDS = "POSITIONAL_FIELDS"
    UNIT_TYPE = "UNIT_TYPE"
    GENERIC_PARAMETERS = "GENERIC_PARAMETERS"
    DUPLICATE_FIELD = "DUPLICATE_FIELD"

    # Warnings (non-blocking)
    EMPTY_RECORD = "EMPTY_RECORD"
