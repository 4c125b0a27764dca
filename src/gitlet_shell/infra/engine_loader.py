"""Infrastructure: locating and instantiating the version-control engine.

The engine lives outside this package.  It is named by a
``"package.module:factory"`` target, given on the command line or in
the ``GITLET_ENGINE`` environment variable, and imported lazily.

Rules
-----
* Import failures and bad targets surface as :class:`EngineLoadError`.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import importlib
import os
from collections.abc import Callable
from typing import Any, NoReturn

from gitlet_shell.core.catalog import COMMANDS
from gitlet_shell.core.models import ArgumentVector, ExecutionMode
from gitlet_shell.core.protocols import VersionControlEngine
from gitlet_shell.exceptions import EngineLoadError, EngineNotConfiguredError

ENGINE_ENV_VAR = "GITLET_ENGINE"
"""Environment variable consulted when ``--engine`` is not given."""

_TARGET_HINT = "Use the form 'package.module:factory'."


# ---------------------------------------------------------------------------
# Placeholder engine
# ---------------------------------------------------------------------------

class UnconfiguredEngine:
    """Engine stand-in used when no target is configured.

    Every catalog operation exists, so the registry builds normally and
    unknown-command handling is unaffected, but each one fails with an
    :class:`EngineNotConfiguredError`.
    """

    _methods: frozenset[str] = frozenset(spec.method for spec in COMMANDS)

    def __getattr__(self, name: str) -> Callable[[ArgumentVector, ExecutionMode], None]:
        if name not in self._methods:
            raise AttributeError(name)
        return self._refuse

    @staticmethod
    def _refuse(args: ArgumentVector, mode: ExecutionMode) -> NoReturn:
        raise EngineNotConfiguredError(
            "No version-control engine is configured.",
            hint=f"Set {ENGINE_ENV_VAR}=package.module:factory or pass --engine.",
        )


# ---------------------------------------------------------------------------
# Target resolution
# ---------------------------------------------------------------------------

def resolve_target(explicit: str | None) -> str | None:
    """Return the engine target from *explicit* or the environment."""
    if explicit:
        return explicit
    from_env = os.environ.get(ENGINE_ENV_VAR, "").strip()
    return from_env or None


def _split_target(target: str) -> tuple[str, str]:
    module_name, sep, attr = target.strip().partition(":")
    if not sep or not module_name or not attr:
        raise EngineLoadError(f"Invalid engine target: {target!r}", hint=_TARGET_HINT)
    return module_name, attr


def load_engine(target: str | None) -> VersionControlEngine:
    """Import and instantiate the engine named by *target*.

    ``None`` yields an :class:`UnconfiguredEngine`.  The attribute after
    the colon may be dotted (``module:Outer.factory``) and must be a
    callable taking no arguments; a class works.

    Raises
    ------
    EngineLoadError
        If the target is malformed, the module cannot be imported, the
        attribute is missing or not callable, or the factory fails.
    """
    if target is None:
        return UnconfiguredEngine()

    module_name, attr = _split_target(target)
    try:
        obj: Any = importlib.import_module(module_name)
    except Exception as exc:
        raise EngineLoadError(
            f"Cannot import engine module '{module_name}': {exc}",
            hint=_TARGET_HINT,
        ) from exc

    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise EngineLoadError(
                f"Engine module '{module_name}' has no attribute '{attr}'.",
                hint=_TARGET_HINT,
            ) from exc

    if not callable(obj):
        raise EngineLoadError(f"Engine factory '{target}' is not callable.")

    try:
        return obj()
    except Exception as exc:
        raise EngineLoadError(f"Engine factory '{target}' failed: {exc}") from exc
