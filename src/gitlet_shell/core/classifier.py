"""Outcome classifier — the execution-mode policy.

A pure function of ``(Outcome, ExecutionMode)``.  It decides what the
user sees and whether the run goes on; it never prints and never exits.
Rendering a :class:`Verdict` is the CLI layer's job.
"""

from __future__ import annotations

from gitlet_shell.core.models import (
    DomainError,
    EarlyExit,
    ExecutionMode,
    Outcome,
    Success,
    UnexpectedError,
    Verdict,
)

GENERIC_ERROR = "An error occurred."
UNEXPECTED_PREFIX = "Unexpected error: "


def classify(outcome: Outcome, mode: ExecutionMode) -> Verdict:
    """Translate one dispatch *outcome* under *mode* into a :class:`Verdict`.

    Batch mode serves exactly one command, so ``keep_running`` is always
    false there; interactive mode always keeps running.  Only domain and
    unexpected errors mark the verdict as failed.
    """
    keep_running = mode is ExecutionMode.INTERACTIVE

    if isinstance(outcome, (Success, EarlyExit)):
        return Verdict(keep_running=keep_running)

    if isinstance(outcome, DomainError):
        messages = [outcome.message or GENERIC_ERROR]
        if outcome.hint and mode is ExecutionMode.INTERACTIVE:
            messages.append(outcome.hint)
        return Verdict(
            messages=tuple(messages),
            failed=True,
            keep_running=keep_running,
        )

    if isinstance(outcome, UnexpectedError):
        return Verdict(
            messages=(UNEXPECTED_PREFIX + outcome.message,),
            diagnostic=outcome.detail,
            failed=True,
            keep_running=keep_running,
        )

    raise TypeError(f"Not a dispatch outcome: {outcome!r}")
