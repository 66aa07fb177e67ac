"""Tagged result type for operations that may legitimately yield nothing.

A singular matrix has no inverse and a graph with odd-degree vertices has
no Eulerian circuit. Neither is a caller mistake, so instead of raising,
such operations return an ``Outcome`` tagged with its status.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from scicalc.core.errors import NoResultError, UnsupportedError

T = TypeVar("T")


class Status(Enum):
    """Outcome status tag."""

    OK = "ok"
    NO_RESULT = "no_result"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Success payload or a named reason why there is none.

    Usage::

        out = inverse(A)
        if out.is_ok:
            A_inv = out.value
        else:
            print(out.reason)
    """

    status: Status
    value: T | None = None
    reason: str = ""

    @classmethod
    def ok(cls, value: T) -> Outcome[T]:
        return cls(Status.OK, value=value)

    @classmethod
    def no_result(cls, reason: str) -> Outcome[Any]:
        return cls(Status.NO_RESULT, reason=reason)

    @classmethod
    def unsupported(cls, reason: str) -> Outcome[Any]:
        return cls(Status.UNSUPPORTED, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.status is Status.OK

    def unwrap(self) -> T:
        """Return the payload, raising if there is none."""
        if self.status is Status.NO_RESULT:
            raise NoResultError(self.reason)
        if self.status is Status.UNSUPPORTED:
            raise UnsupportedError(self.reason)
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return self.value if self.is_ok else default  # type: ignore[return-value]
