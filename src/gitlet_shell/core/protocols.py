"""Protocols (interfaces) consumed by the core layer.

These define the contracts a version-control engine must satisfy to be
driven by the shell.  Core code depends ONLY on these protocols — never
on a concrete engine — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from gitlet_shell.core.models import ArgumentVector, ExecutionMode


class Operation(Protocol):
    """A single registered command handler.

    The handler receives the full argument vector (its own name at
    index 0) and the run's execution mode.  It signals its result by
    returning normally or by raising:

    * :class:`~gitlet_shell.exceptions.GitletError` for a known,
      user-facing failure;
    * :class:`~gitlet_shell.exceptions.ExitRequested` after it has
      already reported why it stopped;
    * anything else for an unanticipated fault.
    """

    def __call__(self, args: ArgumentVector, mode: ExecutionMode) -> None:
        ...  # pragma: no cover


class VersionControlEngine(Protocol):
    """Contract for the engine behind the eighteen catalog commands.

    Any object that implements these methods with the :class:`Operation`
    signature satisfies this protocol structurally (no explicit
    inheritance required).  Operand checking is the engine's job.
    """

    def init(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def add(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def commit(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def rm(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def log(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def global_log(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def find(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def checkout(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def status(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def branch(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def rm_branch(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def reset(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def merge(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def add_remote(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def rm_remote(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def fetch(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def push(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
    def pull(self, args: ArgumentVector, mode: ExecutionMode) -> None: ...
