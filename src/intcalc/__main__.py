"""Allow ``python -m intcalc`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m intcalc`` behaves identically to the ``intcalc``
console script.
"""

from __future__ import annotations

from intcalc.cli.app import cli

if __name__ == "__main__":
    cli()
