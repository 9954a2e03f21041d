"""Result type used by accessors whose collaborators may come back empty."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class LookupStatus(str, Enum):
    """Outcome of a lookup.

    ``DEFAULT`` means the configuration had no entry and a documented default
    applies. ``NOT_PROVIDED`` means there was nothing to look up (no agent, a
    local origin). ``NOT_FOUND`` means an identifier was provided but the
    collaborator had no match for it.
    """

    FOUND = "found"
    DEFAULT = "default"
    NOT_PROVIDED = "not_provided"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Value of a lookup together with how it was obtained."""

    status: LookupStatus
    value: T | None = None

    @classmethod
    def found(cls, value: T) -> "Lookup[T]":
        return cls(LookupStatus.FOUND, value)

    @classmethod
    def default(cls, value: T | None = None) -> "Lookup[T]":
        return cls(LookupStatus.DEFAULT, value)

    @classmethod
    def not_provided(cls) -> "Lookup[T]":
        return cls(LookupStatus.NOT_PROVIDED)

    @classmethod
    def not_found(cls) -> "Lookup[T]":
        return cls(LookupStatus.NOT_FOUND)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND

    def map(self, func: Callable[[T], U]) -> "Lookup[U]":
        """Apply ``func`` to a found value; other outcomes pass through."""

        if self.status is LookupStatus.FOUND:
            return Lookup(LookupStatus.FOUND, func(self.value))  # type: ignore[arg-type]
        return Lookup(self.status, None)  # type: ignore[arg-type]


__all__ = ["Lookup", "LookupStatus"]
