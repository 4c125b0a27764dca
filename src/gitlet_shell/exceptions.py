"""Custom exception hierarchy for gitlet-shell.

Every expected, user-facing failure raised by an engine operation must
be a :class:`GitletError`.  The dispatcher converts it into a domain
outcome; anything else an operation raises is treated as unexpected.

Hierarchy
---------
GitletError
├── UsageError
├── RepositoryError
├── EngineLoadError
├── EngineNotConfiguredError
└── EnvironmentError

ExitRequested is deliberately *not* a :class:`GitletError`: it is a
control signal, not a failure.
"""

from __future__ import annotations


class GitletError(Exception):
    """Base exception for all known gitlet failures.

    The message is printed verbatim to the user.  An empty message is
    replaced with a generic placeholder at classification time.
    """

    def __init__(self, message: str = "", *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


# --- Raised by engine operations -------------------------------------------

class UsageError(GitletError):
    """Raised when a command is given the wrong operands."""


class RepositoryError(GitletError):
    """Raised when the working directory holds no usable repository."""


# --- Engine wiring ---------------------------------------------------------

class EngineLoadError(GitletError):
    """Raised when the configured engine target cannot be loaded or bound."""


class EngineNotConfiguredError(GitletError):
    """Raised by every operation when no engine has been configured."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(GitletError):
    """Raised when an optional runtime dependency is not available."""


# --- Control flow ----------------------------------------------------------

class ExitRequested(Exception):
    """Signal that an operation already reported its own termination.

    Raising this stops the current command without any further output
    from the shell.  In interactive mode the session keeps running.
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "")
        self.message: str | None = message
