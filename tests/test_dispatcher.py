"""Tests for command dispatch (core/dispatcher.py).

Coverage:
* Unknown, empty and wrong-case command names.
* Every catalog command reaches its engine operation.
* Exception → outcome conversion at the dispatch boundary.
"""

from __future__ import annotations

import pytest

from gitlet_shell.core.catalog import COMMANDS
from gitlet_shell.core.dispatcher import (
    NO_COMMAND,
    UNKNOWN_COMMAND,
    UNKNOWN_COMMAND_HINT,
    Dispatcher,
)
from gitlet_shell.core.models import (
    DomainError,
    EarlyExit,
    ExecutionMode,
    Success,
    UnexpectedError,
)
from gitlet_shell.core.registry import OperationRegistry
from gitlet_shell.exceptions import ExitRequested, GitletError, RepositoryError, UsageError

BOTH_MODES = pytest.mark.parametrize("mode", list(ExecutionMode))


# ---------------------------------------------------------------------------
# Name resolution
# ---------------------------------------------------------------------------

class TestResolution:
    @BOTH_MODES
    def test_unknown_command(self, dispatcher: Dispatcher, mode: ExecutionMode) -> None:
        outcome = dispatcher.dispatch(["bogus"], mode)
        assert outcome == DomainError(UNKNOWN_COMMAND, hint=UNKNOWN_COMMAND_HINT)
        assert outcome.message == "No command with that name exists."

    @BOTH_MODES
    def test_wrong_case_is_unknown(
        self, dispatcher: Dispatcher, engine: object, mode: ExecutionMode,
    ) -> None:
        outcome = dispatcher.dispatch(["INIT"], mode)
        assert isinstance(outcome, DomainError)
        assert outcome.message == UNKNOWN_COMMAND
        assert engine.calls == []  # type: ignore[attr-defined]

    def test_empty_vector(self, dispatcher: Dispatcher) -> None:
        outcome = dispatcher.dispatch([], ExecutionMode.BATCH)
        assert outcome == DomainError(NO_COMMAND)
        assert outcome.message == "Please enter a command."

    @pytest.mark.parametrize("spec", COMMANDS, ids=lambda spec: spec.name)
    def test_every_command_reaches_its_operation(
        self, dispatcher: Dispatcher, engine: object, spec: object,
    ) -> None:
        outcome = dispatcher.dispatch([spec.name], ExecutionMode.BATCH)  # type: ignore[attr-defined]
        assert outcome == Success()
        assert engine.calls == [  # type: ignore[attr-defined]
            (spec.method, (spec.name,), ExecutionMode.BATCH),  # type: ignore[attr-defined]
        ]

    def test_full_vector_and_mode_are_forwarded(
        self, dispatcher: Dispatcher, engine: object,
    ) -> None:
        dispatcher.dispatch(["checkout", "abc123", "--", "wug.txt"], ExecutionMode.INTERACTIVE)
        assert engine.calls == [  # type: ignore[attr-defined]
            ("checkout", ("checkout", "abc123", "--", "wug.txt"), ExecutionMode.INTERACTIVE),
        ]

    def test_single_attempt(self, dispatcher: Dispatcher, engine: object) -> None:
        engine.failures["push"] = RuntimeError("network down")  # type: ignore[attr-defined]
        dispatcher.dispatch(["push", "origin", "master"], ExecutionMode.BATCH)
        assert len(engine.calls) == 1  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# Exception → outcome
# ---------------------------------------------------------------------------

class TestOutcomes:
    def test_domain_error(self, dispatcher: Dispatcher, engine: object) -> None:
        engine.failures["add"] = RepositoryError(  # type: ignore[attr-defined]
            "Not in an initialized Gitlet directory.",
        )
        outcome = dispatcher.dispatch(["add", "a.txt"], ExecutionMode.BATCH)
        assert outcome == DomainError("Not in an initialized Gitlet directory.")

    def test_domain_error_keeps_hint(self, dispatcher: Dispatcher, engine: object) -> None:
        engine.failures["commit"] = UsageError(  # type: ignore[attr-defined]
            "Incorrect operands.", hint='commit "<message>"',
        )
        outcome = dispatcher.dispatch(["commit"], ExecutionMode.INTERACTIVE)
        assert outcome == DomainError("Incorrect operands.", hint='commit "<message>"')

    def test_domain_error_without_message(self, dispatcher: Dispatcher, engine: object) -> None:
        engine.failures["log"] = GitletError()  # type: ignore[attr-defined]
        assert dispatcher.dispatch(["log"], ExecutionMode.BATCH) == DomainError("")

    def test_exit_requested(self, dispatcher: Dispatcher, engine: object) -> None:
        engine.failures["rm"] = ExitRequested("No reason to remove the file.")  # type: ignore[attr-defined]
        outcome = dispatcher.dispatch(["rm", "a.txt"], ExecutionMode.INTERACTIVE)
        assert outcome == EarlyExit("No reason to remove the file.")

    def test_exit_requested_without_message(
        self, dispatcher: Dispatcher, engine: object,
    ) -> None:
        engine.failures["status"] = ExitRequested()  # type: ignore[attr-defined]
        assert dispatcher.dispatch(["status"], ExecutionMode.BATCH) == EarlyExit(None)

    def test_unexpected_error_carries_traceback(
        self, dispatcher: Dispatcher, engine: object,
    ) -> None:
        engine.failures["merge"] = KeyError("HEAD")  # type: ignore[attr-defined]
        outcome = dispatcher.dispatch(["merge", "dev"], ExecutionMode.BATCH)
        assert isinstance(outcome, UnexpectedError)
        assert outcome.message == "'HEAD'"
        assert "Traceback" in outcome.detail
        assert "KeyError" in outcome.detail

    def test_keyboard_interrupt_is_not_caught(
        self, dispatcher: Dispatcher, engine: object,
    ) -> None:
        engine.failures["fetch"] = KeyboardInterrupt()  # type: ignore[attr-defined]
        with pytest.raises(KeyboardInterrupt):
            dispatcher.dispatch(["fetch", "origin", "master"], ExecutionMode.INTERACTIVE)

    def test_plain_callables_work_as_operations(self) -> None:
        seen: list[tuple[str, ...]] = []
        registry = OperationRegistry({"init": lambda args, mode: seen.append(tuple(args))})
        assert Dispatcher(registry).dispatch(("init",), ExecutionMode.BATCH) == Success()
        assert seen == [("init",)]

    def test_handler_receives_an_argument_vector_tuple(self) -> None:
        seen: list[object] = []
        registry = OperationRegistry({"add": lambda args, mode: seen.append(args)})
        Dispatcher(registry).dispatch(["add", "a.txt"], ExecutionMode.INTERACTIVE)
        assert seen == [("add", "a.txt")]
        assert isinstance(seen[0], tuple)
