"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed, stopped early, or session ended."""

GENERAL_ERROR: int = 1
"""A domain or unexpected error ended a batch command."""

USAGE_ERROR: int = 2
"""The shell's own options were invalid (argparse convention)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
