"""Optional scalar domain model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class OptionalScalar(Generic[T]):
    """A scalar the feed may omit.

    ``present`` is False when the wire text was empty; ``value`` is then None
    and carries no meaning. When ``present`` is True, ``value`` was parsed from
    non-empty wire text.
    """

    present: bool = False
    value: T | None = None

    @classmethod
    def absent(cls) -> OptionalScalar[T]:
        return cls(present=False, value=None)

    @classmethod
    def of(cls, value: T) -> OptionalScalar[T]:
        return cls(present=True, value=value)

    def value_or(self, default: T) -> T:
        """Return the value when present, otherwise ``default``."""
        if self.present:
            return self.value  # type: ignore[return-value]
        return default
