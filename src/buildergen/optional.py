"""Runtime optional container used by generated Python builders.

A field is either ABSENT (never assigned) or Present(value). Present(None),
Present(0) and Present("") are all assigned values, distinct from ABSENT.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union


T = TypeVar("T")


class Absent:
    """The unset state. There is exactly one instance, ABSENT."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_present(self) -> bool:
        return False

    def unwrap_or(self, default: Any) -> Any:
        return default

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (Absent, ())


ABSENT = Absent()


@dataclass(frozen=True)
class Present(Generic[T]):
    """The set state, holding the assigned value as-is."""
    value: T

    @property
    def is_present(self) -> bool:
        return True

    def unwrap_or(self, default: Any) -> T:
        return self.value


Maybe = Union[Absent, Present[T]]
