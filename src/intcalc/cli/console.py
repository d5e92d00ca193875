"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and plain
calculations remain functional even when Rich is not installed.

Two proxies are exported:

* :data:`console` — stderr, Rich markup enabled (errors, hints).
* :data:`out` — stdout, no markup and no highlighting (result values).
"""

from __future__ import annotations

import re
import sys
from typing import Any, TextIO

_MARKUP_TAG = re.compile(r"(?<!\\)\[/?[a-z ]+\]")


def load_rich_console_class() -> type[Any] | None:
	"""Return ``rich.console.Console`` or ``None`` when Rich is missing."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console


def get_rich_console(*, stderr: bool = True) -> Any | None:
	"""Create a Rich console instance targeting stderr (default) or stdout."""
	console_class = load_rich_console_class()
	if console_class is None:
		return None
	return console_class(stderr=stderr, highlight=False)


def escape_markup(text: str) -> str:
	"""Escape *text* so Rich prints square brackets literally."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text.replace("[", "\\[")
	return escape(text)


def strip_markup(text: str) -> str:
	"""Remove simple Rich markup tags such as ``[bold red]`` from *text*."""
	return _MARKUP_TAG.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool, markup: bool) -> None:
		self._stderr = stderr
		self._markup = markup

	def _stream(self) -> TextIO:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain ``print``."""
		rich_console = get_rich_console(stderr=self._stderr)
		if rich_console is None:
			text = " ".join(str(obj) for obj in objects)
			if self._markup:
				text = strip_markup(text)
			print(text, file=self._stream())
			return
		rich_console.print(*objects, markup=self._markup, soft_wrap=True)


console = _ConsoleProxy(stderr=True, markup=True)
out = _ConsoleProxy(stderr=False, markup=False)
