"""CLI application entry point for intcalc.

This module is the **sole error boundary** for the entire application.
It catches :class:`~intcalc.exceptions.IntCalcError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No arithmetic lives here — all work is delegated to the core layer.
* Result values go to stdout; every diagnostic goes to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from intcalc.cli import exit_codes
from intcalc.cli.console import console, escape_markup, out
from intcalc.cli.formatting import exit_code_for, format_result
from intcalc.cli.logging_setup import configure_logging
from intcalc.cli.parsing import USAGE_LINE, build_request
from intcalc.core.evaluator import CalculatorService
from intcalc.core.models import Operation
from intcalc.exceptions import DomainError, IntCalcError, UsageError
from intcalc.version import __version__

logger = logging.getLogger(__name__)

_OPERATION_HELP: dict[Operation, str] = {
    Operation.ADD: "a + b",
    Operation.SUB: "a - b",
    Operation.MUL: "a * b",
    Operation.DIV: "a / b   (checks division by 0, truncates toward zero)",
    Operation.POW: "a ^ b   (b must be >= 0)",
    Operation.FACT: "a!      (a must be >= 0)",
}


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser that reports problems as :class:`UsageError`.

    argparse exits with status 2 on its own, which would collide with
    :data:`exit_codes.MATH_ERROR`.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint=f"Usage: {USAGE_LINE}")


def _build_epilog() -> str:
    lines = ["operations:"]
    lines.extend(
        f"  {op.value:<5} {_OPERATION_HELP[op]}" for op in Operation.selectable()
    )
    lines += [
        "",
        "examples:",
        "  intcalc -o add  -a 2  -b 3",
        "  intcalc -o fact -a 5",
        "",
        "exit codes: 0 success, 1 usage error, 2 math error",
    ]
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = _UsageErrorParser(
        prog="intcalc",
        usage=USAGE_LINE,
        description="Checked 64-bit integer calculator.",
        epilog=_build_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-o", "--op", dest="op", metavar="OP", help="operation name")
    parser.add_argument("-a", "--a", dest="a", metavar="INT", help="first integer")
    parser.add_argument(
        "-b",
        "--b",
        dest="b",
        metavar="INT",
        help="second integer (required for add/sub/mul/div/pow)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log request handling to stderr",
    )
    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the intcalc CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code for a completed calculation.

    Raises
    ------
    UsageError
        For bad or missing flags.
    DomainError
        For a negative exponent or factorial argument.
    """
    parser = _build_parser()
    args_list = sys.argv[1:] if argv is None else argv

    if not args_list:
        console.print("[bold red]Error:[/bold red] missing -o or -a")
        parser.print_help(sys.stderr)
        return exit_codes.USAGE_ERROR

    args = parser.parse_args(args_list)
    configure_logging(verbose=args.verbose)

    request = build_request(args.op, args.a, args.b)
    logger.debug("parsed request %r", request)

    result = CalculatorService().evaluate(request)
    text = format_result(request.operation, result)

    if result.is_ok:
        out.print(text)
    else:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(text)}")
    return exit_code_for(result)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def exit_code_for_error(exc: IntCalcError) -> int:
    """Map a known exception to its process exit code."""
    if isinstance(exc, UsageError):
        return exit_codes.USAGE_ERROR
    if isinstance(exc, DomainError):
        return exit_codes.MATH_ERROR
    return exit_codes.UNEXPECTED_ERROR


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except IntCalcError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_code_for_error(exc))
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
