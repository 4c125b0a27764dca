"""Allow ``python -m gitlet_shell`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m gitlet_shell`` behaves identically to the ``gitlet``
console script.
"""

from __future__ import annotations

from gitlet_shell.cli.app import cli

if __name__ == "__main__":
    cli()
