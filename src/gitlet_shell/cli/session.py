"""Interactive session — the ``gitlet>`` read–dispatch loop.

A two-state machine (:class:`SessionState`).  Each call to
:meth:`InteractiveSession.step` consumes exactly one line:

* end of input, ``quit`` or ``exit`` → goodbye, ``TERMINATED``;
* a blank line → nothing, keep prompting;
* ``help`` → the command catalog and a separator line;
* anything else → tokenize, dispatch, classify, separator line.

Every outcome is classified under :attr:`ExecutionMode.INTERACTIVE`, and
the session keeps prompting only while the verdict says ``keep_running``.
"""

from __future__ import annotations

import enum
from collections.abc import Callable

from gitlet_shell.cli import exit_codes
from gitlet_shell.cli.console import console
from gitlet_shell.cli.help_text import print_help
from gitlet_shell.cli.render import render_verdict
from gitlet_shell.core.classifier import classify
from gitlet_shell.core.dispatcher import Dispatcher
from gitlet_shell.core.models import ExecutionMode, Verdict
from gitlet_shell.core.tokenizer import tokenize

PROMPT = "gitlet> "
GOODBYE = "Goodbye!"
QUIT_WORDS: frozenset[str] = frozenset({"quit", "exit"})
HELP_WORD = "help"

_RULE = "=" * 40
BANNER: tuple[str, ...] = (
    _RULE,
    "Gitlet Interactive Mode",
    _RULE,
    "Type 'help' for available commands",
    "Type 'quit' or 'exit' to exit",
    "",
)

LineReader = Callable[[str], str]
"""``input``-compatible callable: shows a prompt, returns one line,
raises :class:`EOFError` when no more input is available."""


class SessionState(enum.Enum):
    PROMPTING = "prompting"
    TERMINATED = "terminated"


class InteractiveSession:
    """Drive a :class:`Dispatcher` from lines typed at a prompt.

    Parameters
    ----------
    dispatcher:
        Routes tokenized lines to engine operations.
    read_line:
        Source of input lines.  Defaults to :func:`input`; tests pass a
        scripted reader instead.
    """

    mode: ExecutionMode = ExecutionMode.INTERACTIVE

    def __init__(self, dispatcher: Dispatcher, *, read_line: LineReader = input) -> None:
        self._dispatcher = dispatcher
        self._read_line = read_line
        self._state = SessionState.PROMPTING

    @property
    def state(self) -> SessionState:
        return self._state

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Print the banner and loop until the session terminates."""
        for line in BANNER:
            console.text(line)
        while self._state is SessionState.PROMPTING:
            self.step()
        return exit_codes.SUCCESS

    def step(self) -> SessionState:
        """Read and handle one line; return the resulting state."""
        if self._state is SessionState.TERMINATED:
            return self._state

        try:
            raw = self._read_line(PROMPT)
        except EOFError:
            # The prompt line was never terminated.
            console.text("")
            return self._terminate()

        line = raw.strip()
        if not line:
            return self._state

        word = line.lower()
        if word in QUIT_WORDS:
            return self._terminate()
        if word == HELP_WORD:
            print_help()
            console.text("")
            return self._state

        verdict = self._execute(line)
        console.text("")
        if verdict is not None and not verdict.keep_running:
            return self._terminate()
        return self._state

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _execute(self, line: str) -> Verdict | None:
        """Dispatch one tokenized line; ``None`` when it holds no tokens."""
        args = tokenize(line)
        if not args:
            return None
        outcome = self._dispatcher.dispatch(args, self.mode)
        verdict = classify(outcome, self.mode)
        render_verdict(verdict)
        return verdict

    def _terminate(self) -> SessionState:
        console.text(GOODBYE)
        self._state = SessionState.TERMINATED
        return self._state
