"""Checked 64-bit integer arithmetic.

Every function in this module is a **pure** transformation — no I/O,
no logging, no shared state, fully deterministic, and safe to call from
any number of threads.

Division by zero and overflow are *returned* as :class:`Err` values,
never raised.  Python integers never wrap, so each operation computes
the exact value and compares it against the 64-bit bounds before
anything is returned.

Preconditions
-------------
* ``a``/``b``/``base`` are signed 64-bit values.
* ``exponent`` (``pow``) and ``n`` (``fact``) are unsigned 64-bit
  values; rejecting negative inputs is the caller's job.

Violating a precondition raises
:class:`~intcalc.exceptions.OperandRangeError`.
"""

from __future__ import annotations

from intcalc.core.models import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    Err,
    ErrorKind,
    NumericKind,
    Ok,
    Result,
)
from intcalc.exceptions import OperandRangeError

__all__: list[str] = ["add", "div", "fact", "mul", "pow", "sub"]


# ---------------------------------------------------------------------------
# Operand guards
# ---------------------------------------------------------------------------

def _require_int64(name: str, value: int) -> None:
    if not INT64_MIN <= value <= INT64_MAX:
        raise OperandRangeError(f"{name}={value} does not fit in a signed 64-bit integer")


def _require_uint64(name: str, value: int) -> None:
    if not 0 <= value <= UINT64_MAX:
        raise OperandRangeError(f"{name}={value} does not fit in an unsigned 64-bit integer")


def _checked(value: int, kind: NumericKind = NumericKind.INT64) -> Result:
    """Wrap an exact value, or report overflow if *kind* cannot hold it."""
    if not kind.contains(value):
        return Err(ErrorKind.OVERFLOW)
    return Ok(value, kind)


# ---------------------------------------------------------------------------
# Binary operations
# ---------------------------------------------------------------------------

def add(a: int, b: int) -> Result:
    """Return ``a + b`` or ``Err(OVERFLOW)``."""
    _require_int64("a", a)
    _require_int64("b", b)
    return _checked(a + b)


def sub(a: int, b: int) -> Result:
    """Return ``a - b`` or ``Err(OVERFLOW)``."""
    _require_int64("a", a)
    _require_int64("b", b)
    return _checked(a - b)


def mul(a: int, b: int) -> Result:
    """Return ``a * b`` or ``Err(OVERFLOW)``."""
    _require_int64("a", a)
    _require_int64("b", b)
    return _checked(a * b)


def div(a: int, b: int) -> Result:
    """Return ``a / b`` truncated toward zero.

    ``Err(DIVISION_BY_ZERO)`` when *b* is zero, ``Err(OVERFLOW)`` for
    ``INT64_MIN / -1``.
    """
    _require_int64("a", a)
    _require_int64("b", b)
    if b == 0:
        return Err(ErrorKind.DIVISION_BY_ZERO)
    if a == INT64_MIN and b == -1:
        return Err(ErrorKind.OVERFLOW)

    # // floors toward negative infinity; the quotient must truncate toward zero.
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return Ok(quotient)


# ---------------------------------------------------------------------------
# Iterated operations
# ---------------------------------------------------------------------------

def pow(base: int, exponent: int) -> Result:  # noqa: A001
    """Return ``base ** exponent`` or ``Err(OVERFLOW)``.

    ``pow(x, 0)`` is 1 for every *x*, including zero.  Overflow is
    reported at the first multiplication that leaves the signed range.
    """
    _require_int64("base", base)
    _require_uint64("exponent", exponent)

    if exponent == 0:
        return Ok(1)
    if base in (0, 1):
        return Ok(base)
    if base == -1:
        return Ok(-1 if exponent % 2 else 1)

    # |base| >= 2 overflows within 64 steps, so the loop is bounded.
    acc = 1
    for _ in range(exponent):
        step = mul(acc, base)
        if isinstance(step, Err):
            return step
        acc = step.value
    return Ok(acc)


def fact(n: int) -> Result:
    """Return ``n!`` as an unsigned 64-bit value or ``Err(OVERFLOW)``.

    ``fact(20)`` is the largest representable factorial.
    """
    _require_uint64("n", n)

    acc = 1
    for factor in range(2, n + 1):
        acc *= factor
        if acc > UINT64_MAX:
            return Err(ErrorKind.OVERFLOW)
    return Ok(acc, NumericKind.UINT64)
