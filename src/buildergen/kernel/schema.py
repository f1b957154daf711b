"""Pydantic models for the normalized record schema."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .definition import IDENTIFIER_PATTERN, SourceLocation, TypeRef


class FieldDescriptor(BaseModel):
    """A named, typed field of a record."""
    identifier: str = Field(..., pattern=IDENTIFIER_PATTERN)
    declared_type: TypeRef
    location: SourceLocation = Field(default_factory=SourceLocation)

    model_config = ConfigDict(extra="forbid", frozen=True)


class RecordSchema(BaseModel):
    """A record type: name plus ordered fields with unique identifiers.

    Host-independent; extraction produces it, synthesis only reads it.
    Zero fields is a valid schema.
    """
    type_name: str = Field(..., pattern=IDENTIFIER_PATTERN)
    fields: Tuple[FieldDescriptor, ...] = ()
    location: SourceLocation = Field(default_factory=SourceLocation)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator('fields')
    @classmethod
    def validate_unique_identifiers(cls, v: Tuple[FieldDescriptor, ...]) -> Tuple[FieldDescriptor, ...]:
        """Reject schemas declaring the same identifier twice. Order is kept as given."""
        seen = set()
        duplicates = set()
        for field in v:
            if field.identifier in seen:
                duplicates.add(field.identifier)
            seen.add(field.identifier)

        if duplicates:
            raise ValueError(f"Duplicate field identifiers not allowed: {sorted(duplicates)}")
        return v

    def identifiers(self) -> Tuple[str, ...]:
        """Field identifiers in declaration order."""
        return tuple(f.identifier for f in self.fields)

    def get_field(self, identifier: str) -> FieldDescriptor | None:
        """Get field descriptor by identifier."""
        for f in self.fields:
            if f.identifier == identifier:
                return f
        return None
