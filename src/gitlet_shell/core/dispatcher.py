"""Dispatcher — resolve a command name and run its handler exactly once.

This is the single catch boundary for everything an operation raises.
Exceptions never escape :meth:`Dispatcher.dispatch`; they are turned
into :data:`~gitlet_shell.core.models.Outcome` values instead.
``KeyboardInterrupt`` and ``SystemExit`` are not ``Exception`` subclasses
and are left to the process-level boundary.
"""

from __future__ import annotations

import traceback
from collections.abc import Sequence

from gitlet_shell.core.models import (
    ArgumentVector,
    DomainError,
    EarlyExit,
    ExecutionMode,
    Outcome,
    Success,
    UnexpectedError,
)
from gitlet_shell.core.registry import OperationRegistry
from gitlet_shell.exceptions import ExitRequested, GitletError

NO_COMMAND = "Please enter a command."
UNKNOWN_COMMAND = "No command with that name exists."
UNKNOWN_COMMAND_HINT = "Type 'help' for available commands."


class Dispatcher:
    """Route argument vectors through an :class:`OperationRegistry`.

    Parameters
    ----------
    registry:
        The process-wide, read-only command table.
    """

    def __init__(self, registry: OperationRegistry) -> None:
        self._registry: OperationRegistry = registry

    @property
    def registry(self) -> OperationRegistry:
        return self._registry

    def dispatch(self, argv: Sequence[str], mode: ExecutionMode) -> Outcome:
        """Run the handler named by ``argv[0]`` and report how it ended.

        Returns
        -------
        Outcome
            * :class:`Success` when the handler returns normally.
            * :class:`DomainError` for an empty vector, an unknown name,
              or a :class:`GitletError` raised by the handler.
            * :class:`EarlyExit` when the handler raises
              :class:`ExitRequested`.
            * :class:`UnexpectedError` for any other exception.
        """
        args: ArgumentVector = tuple(argv)
        if not args:
            return DomainError(NO_COMMAND)

        handler = self._registry.lookup(args[0])
        if handler is None:
            return DomainError(UNKNOWN_COMMAND, hint=UNKNOWN_COMMAND_HINT)

        try:
            handler(args, mode)
        except ExitRequested as exc:
            return EarlyExit(exc.message)
        except GitletError as exc:
            return DomainError(exc.message, hint=exc.hint)
        except Exception as exc:  # noqa: BLE001
            return UnexpectedError(
                message=str(exc),
                detail="".join(traceback.format_exception(exc)),
            )
        return Success()
