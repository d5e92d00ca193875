"""Custom exception hierarchy for intcalc.

All exceptions that cross layer boundaries must inherit from
:class:`IntCalcError`.  Arithmetic failures (division by zero, overflow)
are **not** exceptions — the engine returns them inside an
:class:`~intcalc.core.models.Err` result.  The classes below cover the
conditions detected *around* the engine.

Hierarchy
---------
IntCalcError
├── UsageError
├── DomainError
└── OperandRangeError
"""

from __future__ import annotations


class IntCalcError(Exception):
    """Base exception for all intcalc errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(IntCalcError):
    """Raised for bad, missing, or contradictory command-line flags."""


# --- Arithmetic preconditions ----------------------------------------------

class DomainError(IntCalcError):
    """Raised when an operand lies outside an operation's valid domain.

    Negative exponents for ``pow`` and negative arguments for ``fact``
    are rejected before the engine is invoked.
    """


class OperandRangeError(IntCalcError):
    """Raised when an engine function receives an operand wider than 64 bits.

    This signals a programming error in the caller: the CLI layer only
    ever builds requests whose operands fit the declared width.
    """
