"""Domain models for gitlet-shell.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and must remain pure
across the entire lifecycle of a dispatch.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

ArgumentVector = tuple[str, ...]
"""One parsed invocation; element 0 is the command name."""


# ---------------------------------------------------------------------------
# Execution mode
# ---------------------------------------------------------------------------

class ExecutionMode(enum.Enum):
    """Failure-handling policy for a whole run.

    Fixed once at process entry and passed explicitly to the dispatcher,
    the classifier and every engine operation.
    """

    BATCH = "batch"
    """A single command from the process argument list."""

    INTERACTIVE = "interactive"
    """A read–dispatch loop over lines typed at the prompt."""


# ---------------------------------------------------------------------------
# Dispatch outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Success:
    """The operation completed normally."""


@dataclass(frozen=True, slots=True)
class DomainError:
    """An expected, user-facing failure."""

    message: str
    """Human-readable message.  May be empty; the classifier substitutes."""

    hint: str | None = None
    """Optional guidance, shown in interactive mode only."""


@dataclass(frozen=True, slots=True)
class UnexpectedError:
    """A fault the operation did not anticipate."""

    message: str
    """Short description, shown after ``Unexpected error:``."""

    detail: str
    """Diagnostic trace routed to the secondary channel."""


@dataclass(frozen=True, slots=True)
class EarlyExit:
    """The operation stopped itself after reporting its own outcome."""

    message: str | None = None


Outcome = Union[Success, DomainError, UnexpectedError, EarlyExit]


# ---------------------------------------------------------------------------
# Classification result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Verdict:
    """What the shell must show and do after one dispatch."""

    messages: tuple[str, ...] = ()
    """Lines for the primary (stdout) channel, in order."""

    diagnostic: str | None = None
    """Text for the secondary (stderr) channel, or ``None``."""

    failed: bool = False
    """Whether the outcome counts as a failure for the exit status."""

    keep_running: bool = False
    """Whether an interactive loop should keep prompting."""


# ---------------------------------------------------------------------------
# Command catalog entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Static description of one registered command."""

    name: str
    """Exact, case-sensitive command name typed by the user."""

    usage: str
    """Operand synopsis shown in help (e.g. ``add <file>``)."""

    summary: str
    """One-line description shown in help."""

    category: str
    """Help section heading the command is listed under."""

    method: str
    """Attribute name of the engine operation implementing the command."""
