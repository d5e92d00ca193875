"""Logging configuration for the CLI layer.

Library modules only ever call ``logging.getLogger(__name__)``; handler
installation happens exactly once, here, driven by ``--verbose``.

Rich's :class:`~rich.logging.RichHandler` is used when available.  The
import is lazy, mirroring :mod:`intcalc.cli.console`, so a missing Rich
install degrades to a plain stderr handler instead of failing.
"""

from __future__ import annotations

import logging
import sys

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    """Return a RichHandler on stderr, or a StreamHandler fallback."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        return handler

    from intcalc.cli.console import get_rich_console

    return RichHandler(
        console=get_rich_console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(*, verbose: bool = False) -> None:
    """Install a single handler on the ``intcalc`` logger.

    Parameters
    ----------
    verbose:
        ``True`` selects DEBUG, otherwise WARNING.

    Calling this more than once replaces the previously installed
    handler rather than stacking duplicates.
    """
    root = logging.getLogger("intcalc")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(_build_handler())
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
