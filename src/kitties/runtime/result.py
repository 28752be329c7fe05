"""Call results returned to the dispatcher.

Usage:
    result = module.create("alice")
    if result.ok:
        kitty_id, kitty = result.value
    else:
        print(result.error)  # ErrorKind
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from kitties.core.errors import ErrorKind, KittiesError

T = TypeVar("T")


def _error_types() -> dict[ErrorKind, type[KittiesError]]:
    """Map each ErrorKind to the shallowest KittiesError subclass declaring it."""
    types: dict[ErrorKind, type[KittiesError]] = {}
    pending = list(KittiesError.__subclasses__())
    while pending:
        cls = pending.pop(0)
        types.setdefault(cls.kind, cls)
        pending.extend(cls.__subclasses__())
    return types


@dataclass(frozen=True, slots=True)
class CallResult(Generic[T]):
    """Success with a value, or failure with exactly one ErrorKind."""

    value: T | None = None
    error: ErrorKind | None = None
    message: str = ""

    @classmethod
    def success(cls, value: T) -> CallResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str = "") -> CallResult[Any]:
        return cls(error=error, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the error this result carries.

        Raises:
            KittiesError: Subclass matching the failure's ErrorKind.
        """
        if self.error is not None:
            raise _error_types()[self.error](self.message)
        return self.value  # type: ignore[return-value]
