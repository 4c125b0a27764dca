"""CLI application entry point and mode selection for gitlet-shell.

This module owns the process: it parses the shell's own options, loads
the engine, fixes the :class:`~gitlet_shell.core.models.ExecutionMode`
for the run and translates the result into an OS exit code.

Architecture notes
------------------
* No business logic lives here — routing and policy are delegated to
  the core layer, engine loading to the infrastructure layer.
* Command outcomes are classified, never raised, so only failures that
  happen *before* dispatch (e.g. an unusable engine target) or Ctrl+C
  reach :func:`cli`.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
import traceback

from gitlet_shell.cli import exit_codes
from gitlet_shell.cli.console import err_console
from gitlet_shell.cli.render import render_verdict
from gitlet_shell.cli.session import InteractiveSession, LineReader
from gitlet_shell.core.classifier import classify
from gitlet_shell.core.dispatcher import Dispatcher
from gitlet_shell.core.models import ExecutionMode
from gitlet_shell.core.registry import build_registry
from gitlet_shell.exceptions import GitletError
from gitlet_shell.infra.engine_loader import ENGINE_ENV_VAR, load_engine, resolve_target
from gitlet_shell.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Shell options are only recognised before the command name;
    everything from the command name on is passed to the engine
    verbatim, ``--`` included:

    * ``gitlet``                        — interactive session
    * ``gitlet <command> [operands]``   — run one command and exit
    * ``gitlet --engine mod:factory ...``
    * ``gitlet --version``
    """
    parser = argparse.ArgumentParser(
        prog="gitlet",
        description="Command shell for the Gitlet version-control system.",
        epilog="Run without a command to start an interactive session.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--engine",
        metavar="MODULE:FACTORY",
        default=None,
        help=f"Version-control engine to drive (default: ${ENGINE_ENV_VAR}).",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Start an interactive session.",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command name followed by its operands.",
    )
    return parser


# ---------------------------------------------------------------------------
# Mode runners
# ---------------------------------------------------------------------------

def _run_batch(dispatcher: Dispatcher, command: list[str]) -> int:
    """Dispatch a single command under the batch policy."""
    mode = ExecutionMode.BATCH
    outcome = dispatcher.dispatch(command, mode)
    return render_verdict(classify(outcome, mode))


def _run_interactive(dispatcher: Dispatcher, read_line: LineReader | None) -> int:
    """Run a ``gitlet>`` session until quit or end of input."""
    session = InteractiveSession(dispatcher, read_line=read_line or input)
    return session.run()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, read_line: LineReader | None = None) -> int:
    """Run the gitlet CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    read_line:
        Line source for interactive mode.  ``None`` means :func:`input`.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    EngineLoadError
        If the configured engine cannot be loaded or lacks a command.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    command: list[str] = list(args.command)

    if args.interactive and command:
        parser.error("--interactive does not take a command")

    engine = load_engine(resolve_target(args.engine))
    dispatcher = Dispatcher(build_registry(engine))

    if args.interactive or not command:
        return _run_interactive(dispatcher, read_line)
    return _run_batch(dispatcher, command)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.  Failures seen
    here happened outside any dispatch, so they go to stderr.
    """
    try:
        code = main()
        sys.exit(code)
    except GitletError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.text(f"Unexpected error: {exc}")
        err_console.text(traceback.format_exc().rstrip("\n"))
        sys.exit(exit_codes.GENERAL_ERROR)
