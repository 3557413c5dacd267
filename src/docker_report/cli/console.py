"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``) and the report itself keep working when
Rich is not installed.

Two proxies are exposed: :data:`out` writes the report to stdout and
:data:`console` writes diagnostics to stderr.
"""

from __future__ import annotations

import sys
from typing import Any

from docker_report.exceptions import DependencyMissingError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``DependencyMissingError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise DependencyMissingError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	# Report text is printed verbatim: no highlighting, no emoji codes,
	# no wrapping of lines wider than the terminal.
	return console_class(stderr=stderr, highlight=False, emoji=False, soft_wrap=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with plain-print fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, style: str | None = None) -> None:
		"""Render with Rich when available, else plain ``print``.

		Text is never interpreted as Rich markup, so values such as
		``[::]:80->80/tcp`` are printed verbatim.  *style* applies to
		the whole line and is ignored by the fallback.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except DependencyMissingError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, style=style, markup=False)


console = _ConsoleProxy(stderr=True)
out = _ConsoleProxy(stderr=False)
