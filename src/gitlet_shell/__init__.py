"""gitlet-shell — command router and interactive shell for Gitlet.

Turns a process argument list or a typed line into a dispatch against a
pluggable version-control engine, under a batch or interactive policy.
"""

from gitlet_shell.version import __version__

__all__: list[str] = ["__version__"]
