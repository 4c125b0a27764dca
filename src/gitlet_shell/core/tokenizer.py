"""Quote-aware splitting of a typed command line.

Unlike :func:`shlex.split`, an unterminated quote is not an error: the
open span simply ends with the line.  There are no escape sequences.
"""

from __future__ import annotations

QUOTES: frozenset[str] = frozenset({'"', "'"})


def tokenize(line: str) -> list[str]:
    """Split *line* into argument tokens.

    * Whitespace outside quotes separates tokens; runs of it collapse.
    * ``"`` or ``'`` opens a span closed only by the same character.
      Everything inside, whitespace included, is copied verbatim; the
      delimiters themselves are dropped.
    * A span still open at end of line is closed implicitly.
    * Empty tokens are never emitted.

    Example: ``commit "my message"`` → ``["commit", "my message"]``.
    """
    tokens: list[str] = []
    current: list[str] = []
    closing: str | None = None

    for char in line:
        if closing is None and char in QUOTES:
            closing = char
        elif char == closing:
            closing = None
        elif closing is None and char.isspace():
            if current:
                tokens.append("".join(current))
                current.clear()
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens
