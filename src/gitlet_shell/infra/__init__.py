"""Infrastructure layer — external system integration.

This layer locates and instantiates the version-control engine, which
lives outside this package.  Import and construction failures are
caught here and re-raised as :class:`~gitlet_shell.exceptions.GitletError`
subclasses.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from gitlet_shell.infra.engine_loader import (
    ENGINE_ENV_VAR,
    UnconfiguredEngine,
    load_engine,
    resolve_target,
)

__all__: list[str] = [
    "ENGINE_ENV_VAR",
    "UnconfiguredEngine",
    "load_engine",
    "resolve_target",
]
