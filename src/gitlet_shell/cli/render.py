"""Write a classifier :class:`~gitlet_shell.core.models.Verdict` to the terminal."""

from __future__ import annotations

from gitlet_shell.cli import exit_codes
from gitlet_shell.cli.console import console, err_console
from gitlet_shell.core.models import Verdict


def render_verdict(verdict: Verdict) -> int:
    """Print *verdict* and return the exit status it implies.

    Messages go to stdout one per line; the diagnostic, if any, goes to
    stderr unchanged.
    """
    for message in verdict.messages:
        console.text(message)
    if verdict.diagnostic:
        err_console.text(verdict.diagnostic.rstrip("\n"))
    return exit_codes.GENERAL_ERROR if verdict.failed else exit_codes.SUCCESS
