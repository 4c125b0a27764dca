"""Core layer — tokenizing, routing and outcome policy.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from gitlet_shell.core.classifier import classify
from gitlet_shell.core.dispatcher import Dispatcher
from gitlet_shell.core.models import (
    ArgumentVector,
    CommandSpec,
    DomainError,
    EarlyExit,
    ExecutionMode,
    Outcome,
    Success,
    UnexpectedError,
    Verdict,
)
from gitlet_shell.core.protocols import Operation, VersionControlEngine
from gitlet_shell.core.registry import OperationRegistry, build_registry
from gitlet_shell.core.tokenizer import tokenize

__all__: list[str] = [
    "ArgumentVector",
    "CommandSpec",
    "Dispatcher",
    "DomainError",
    "EarlyExit",
    "ExecutionMode",
    "Operation",
    "OperationRegistry",
    "Outcome",
    "Success",
    "UnexpectedError",
    "VersionControlEngine",
    "Verdict",
    "build_registry",
    "classify",
    "tokenize",
]
