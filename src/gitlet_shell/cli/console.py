"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so that the shell keeps working, in plain text, even when
Rich is not installed.

Two channels exist: :data:`console` (stdout) carries everything the
user asked for, :data:`err_console` (stderr) carries diagnostics.
"""

from __future__ import annotations

import sys
from typing import Any

from gitlet_shell.exceptions import EnvironmentError

_PLAIN_KWARGS = frozenset({"end", "sep"})


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def print(self, *objects: object, **kwargs: Any) -> None:
		"""Render with Rich when available, else plain ``print``.

		Keyword arguments are passed to Rich unchanged; the plain
		fallback keeps only those ``print`` itself understands.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			plain = {key: value for key, value in kwargs.items() if key in _PLAIN_KWARGS}
			print(*objects, file=sys.stderr if self._stderr else sys.stdout, **plain)
			return
		rich_console.print(*objects, **kwargs)

	def text(self, message: str, *, end: str = "\n") -> None:
		"""Print *message* verbatim: no markup, emoji codes, highlighting or wrapping."""
		self.print(
			message,
			end=end,
			markup=False,
			highlight=False,
			emoji=False,
			soft_wrap=True,
		)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
