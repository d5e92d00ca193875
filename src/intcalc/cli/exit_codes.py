"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — a value was printed (or help/version was shown)."""

USAGE_ERROR: int = 1
"""Bad, missing, or contradictory flags.  A UsageError was displayed."""

MATH_ERROR: int = 2
"""Division by zero, overflow, or a domain error was reported."""

UNEXPECTED_ERROR: int = 70
"""An unhandled exception escaped all known error boundaries (EX_SOFTWARE)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
