"""Shared pytest fixtures and configuration for the gitlet-shell test suite.

Guidelines
----------
* No real version-control engine: operations are recorded, not run.
* No terminal interaction: interactive input comes from scripted readers.
* Tests must not depend on OS state (``GITLET_ENGINE`` is cleared).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import pytest

from gitlet_shell.core.catalog import COMMANDS
from gitlet_shell.core.dispatcher import Dispatcher
from gitlet_shell.core.models import ExecutionMode
from gitlet_shell.core.registry import build_registry
from gitlet_shell.infra.engine_loader import ENGINE_ENV_VAR


class RecordingEngine:
    """Engine double that records every call.

    Assign an exception to ``failures[method]`` to make that operation
    raise it instead of completing.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[str, ...], ExecutionMode]] = []
        self.failures: dict[str, BaseException] = {}

    def _record(self, method: str, args: Sequence[str], mode: ExecutionMode) -> None:
        self.calls.append((method, tuple(args), mode))
        failure = self.failures.get(method)
        if failure is not None:
            raise failure


def _make_operation(method: str):
    def operation(self: RecordingEngine, args: Sequence[str], mode: ExecutionMode) -> None:
        self._record(method, args, mode)

    operation.__name__ = method
    return operation


for _spec in COMMANDS:
    setattr(RecordingEngine, _spec.method, _make_operation(_spec.method))


class ScriptedReader:
    """``input``-compatible reader fed from a fixed list of lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


@pytest.fixture(autouse=True)
def _no_engine_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENGINE_ENV_VAR, raising=False)


@pytest.fixture
def engine() -> RecordingEngine:
    return RecordingEngine()


@pytest.fixture
def dispatcher(engine: RecordingEngine) -> Dispatcher:
    return Dispatcher(build_registry(engine))


@pytest.fixture
def make_reader() -> type[ScriptedReader]:
    return ScriptedReader
