"""Domain models for intcalc.

All models are **frozen** dataclasses or enums — immutable value objects
with no behaviour beyond data access.  They carry zero I/O, zero
dependencies on external packages, and must remain pure across the
entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Final, Literal


# ---------------------------------------------------------------------------
# Integer width
# ---------------------------------------------------------------------------

INT64_MIN: Final[int] = -(2**63)
"""Smallest signed 64-bit value."""

INT64_MAX: Final[int] = 2**63 - 1
"""Largest signed 64-bit value."""

UINT64_MAX: Final[int] = 2**64 - 1
"""Largest unsigned 64-bit value."""


class NumericKind(enum.Enum):
    """Width and signedness of a successful result value."""

    INT64 = "i64"
    UINT64 = "u64"

    @property
    def min_value(self) -> int:
        return INT64_MIN if self is NumericKind.INT64 else 0

    @property
    def max_value(self) -> int:
        return INT64_MAX if self is NumericKind.INT64 else UINT64_MAX

    def contains(self, value: int) -> bool:
        """Return ``True`` when *value* is representable in this kind."""
        return self.min_value <= value <= self.max_value


# ---------------------------------------------------------------------------
# Operations and errors
# ---------------------------------------------------------------------------

class Operation(enum.Enum):
    """Closed set of calculator operations.

    The enum value is the name accepted on the command line.  ``NONE``
    means "nothing selected yet" and is never dispatched.
    """

    NONE = "none"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    POW = "pow"
    FACT = "fact"

    @property
    def needs_b(self) -> bool:
        """Whether the operation takes a second operand."""
        return self in _BINARY_OPERATIONS

    @classmethod
    def selectable(cls) -> tuple[Operation, ...]:
        """All operations a user may request, in help-text order."""
        return tuple(op for op in cls if op is not cls.NONE)


_BINARY_OPERATIONS: Final[frozenset[Operation]] = frozenset(
    {Operation.ADD, Operation.SUB, Operation.MUL, Operation.DIV, Operation.POW}
)


class ErrorKind(enum.Enum):
    """Why an operation produced no value.

    The engine only ever returns ``DIVISION_BY_ZERO`` and ``OVERFLOW``.
    ``DOMAIN_ERROR`` is reserved for callers that report a rejected
    operand as a result; the bundled CLI raises
    :class:`~intcalc.exceptions.DomainError` instead.
    """

    DIVISION_BY_ZERO = "division by zero"
    OVERFLOW = "overflow"
    DOMAIN_ERROR = "domain error"


# ---------------------------------------------------------------------------
# Tagged result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Ok:
    """Successful outcome carrying a representable value."""

    value: int
    """Exact result, guaranteed to lie within the bounds of :attr:`kind`."""

    kind: NumericKind = NumericKind.INT64
    """Signedness tag callers use to pick a rendering."""

    @property
    def is_ok(self) -> Literal[True]:
        return True

    def __post_init__(self) -> None:
        if not self.kind.contains(self.value):
            raise ValueError(
                f"{self.value} is not representable as {self.kind.value}"
            )


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome.  Carries an error kind and no value."""

    error: ErrorKind

    @property
    def is_ok(self) -> Literal[False]:
        return False


Result = Ok | Err
"""Either :class:`Ok` or :class:`Err`, never both."""


# ---------------------------------------------------------------------------
# Validated request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CalcRequest:
    """A single calculation handed from the CLI layer to the core.

    ``b`` is present if and only if :attr:`Operation.needs_b` is true.
    """

    operation: Operation
    a: int
    b: int | None = None
