"""Operation registry — the fixed command-name → handler table.

Built once at startup from the catalog and an engine; read-only for
the rest of the process.  Lookup is a single mapping access, exact and
case-sensitive.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from gitlet_shell.core.catalog import COMMANDS
from gitlet_shell.core.models import CommandSpec
from gitlet_shell.core.protocols import Operation, VersionControlEngine
from gitlet_shell.exceptions import EngineLoadError


class OperationRegistry:
    """Immutable mapping from command name to :class:`Operation`.

    Parameters
    ----------
    operations:
        Name → handler pairs.  The mapping is copied, so later changes
        to the argument do not leak into the registry.
    """

    __slots__ = ("_operations",)

    def __init__(self, operations: Mapping[str, Operation]) -> None:
        self._operations: Mapping[str, Operation] = MappingProxyType(dict(operations))

    def lookup(self, name: str) -> Operation | None:
        """Return the handler registered under *name*, or ``None``."""
        return self._operations.get(name)

    def names(self) -> tuple[str, ...]:
        """Return all registered names in registration order."""
        return tuple(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def __repr__(self) -> str:
        return f"OperationRegistry({list(self._operations)!r})"


def _bind(engine: VersionControlEngine, spec: CommandSpec) -> Operation:
    """Fetch the engine method for *spec* or raise :class:`EngineLoadError`."""
    handler = getattr(engine, spec.method, None)
    if handler is None or not callable(handler):
        raise EngineLoadError(
            f"Engine {type(engine).__name__} does not implement '{spec.name}'.",
            hint=f"Expected a callable attribute named '{spec.method}'.",
        )
    return handler


def build_registry(engine: VersionControlEngine) -> OperationRegistry:
    """Bind every catalog command to the matching *engine* operation.

    Raises
    ------
    EngineLoadError
        If *engine* is missing any of the catalog operations.
    """
    return OperationRegistry({spec.name: _bind(engine, spec) for spec in COMMANDS})
