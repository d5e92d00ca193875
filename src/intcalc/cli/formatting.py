"""Result rendering for the CLI layer.

Pure transforms from a core :data:`~intcalc.core.models.Result` to
display text and an exit code.  No I/O happens here; :mod:`intcalc.cli.app`
decides which stream the text goes to.
"""

from __future__ import annotations

from intcalc.cli import exit_codes
from intcalc.core.models import Err, Ok, Operation, Result


def format_value(result: Ok) -> str:
    """Render a success value as a plain decimal integer.

    Both signed and unsigned kinds render the same way because the
    stored value is already the exact mathematical integer.
    """
    return str(result.value)


def format_error(operation: Operation, result: Err) -> str:
    """Render an error as ``"<op>: <reason>"``, e.g. ``"div: division by zero"``."""
    return f"{operation.value}: {result.error.value}"


def format_result(operation: Operation, result: Result) -> str:
    """Render *result* as the text the user sees (without newline)."""
    if isinstance(result, Ok):
        return format_value(result)
    if isinstance(result, Err):
        return format_error(operation, result)
    raise TypeError(f"not a Result: {result!r}")


def exit_code_for(result: Result) -> int:
    """Map a result to its process exit code."""
    return exit_codes.SUCCESS if result.is_ok else exit_codes.MATH_ERROR
