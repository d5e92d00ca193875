"""Command-line value parsing and request building.

Turns raw flag strings into a validated
:class:`~intcalc.core.models.CalcRequest`.  Every function here is a
pure transform that raises :class:`~intcalc.exceptions.UsageError` on
bad input; nothing is printed.

Domain checks (negative exponent, negative factorial argument) are not
done here — they belong to
:class:`~intcalc.core.evaluator.CalculatorService` and map to a math
error rather than a usage error.
"""

from __future__ import annotations

import re

from intcalc.core.models import INT64_MAX, INT64_MIN, CalcRequest, Operation
from intcalc.exceptions import UsageError

USAGE_LINE = "intcalc -o <op> -a <int> [-b <int>]"

_INTEGER = re.compile(r"\s*(?P<sign>[+-]?)(?P<digits>[0-9]+)")

_INT64_MAX_DIGITS = len(str(INT64_MAX))


# ---------------------------------------------------------------------------
# Scalar parsers
# ---------------------------------------------------------------------------

def parse_int64(text: str, *, flag: str) -> int:
    """Parse a base-10 signed 64-bit integer.

    Accepts leading whitespace, an optional sign, and any number of
    leading zeros.  Trailing characters (whitespace included),
    underscores, other bases, and values outside the signed 64-bit
    range are rejected.
    """
    match = _INTEGER.fullmatch(text)
    if match is None:
        raise UsageError(
            f"invalid integer for {flag}: '{text}'",
            hint="Use base-10 digits with an optional leading sign.",
        )

    digits = match.group("digits").lstrip("0") or "0"
    out_of_range = UsageError(
        f"invalid integer for {flag}: '{text}'",
        hint=f"Values must lie between {INT64_MIN} and {INT64_MAX}.",
    )
    # Bounded before int() so huge inputs never reach the str->int limit.
    if len(digits) > _INT64_MAX_DIGITS:
        raise out_of_range
    value = int(match.group("sign") + digits)
    if not INT64_MIN <= value <= INT64_MAX:
        raise out_of_range
    return value


def parse_operation(name: str) -> Operation:
    """Map a command-line operation name to :class:`Operation`."""
    for op in Operation.selectable():
        if op.value == name:
            return op
    choices = ", ".join(op.value for op in Operation.selectable())
    raise UsageError(f"unknown operation '{name}'", hint=f"Choose one of: {choices}.")


# ---------------------------------------------------------------------------
# Request assembly
# ---------------------------------------------------------------------------

def build_request(
    op_text: str | None,
    a_text: str | None,
    b_text: str | None,
) -> CalcRequest:
    """Validate the raw flag values and build a :class:`CalcRequest`.

    Values are parsed in flag order (``-o``, ``-a``, ``-b``) so the
    first malformed flag is the one reported.

    Raises
    ------
    UsageError
        For an unknown operation, a malformed integer, a missing
        ``-o``/``-a``, a missing ``-b`` on a binary operation, or a
        ``-b`` supplied to ``fact``.
    """
    operation = parse_operation(op_text) if op_text is not None else None
    a = parse_int64(a_text, flag="-a") if a_text is not None else None
    b = parse_int64(b_text, flag="-b") if b_text is not None else None

    if operation is None or a is None:
        raise UsageError("missing -o or -a", hint=f"Usage: {USAGE_LINE}")
    if not operation.needs_b and b is not None:
        raise UsageError("useless -b for this op", hint=f"Usage: {USAGE_LINE}")
    if operation.needs_b and b is None:
        raise UsageError("missing -b for this op", hint=f"Usage: {USAGE_LINE}")

    return CalcRequest(operation=operation, a=a, b=b)
