"""Line scanner that tracks which scopes are active in a tagged file.

A line whose first non-whitespace character is ``@`` declares the scopes
for every following line, up to the next declaration:

    title = "App"        # global, before any declaration
    @dev @test  trailing words are ignored
    debug = true         # active scopes: dev, test

Each declaration replaces the active scopes; it never adds to them.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from quill.core.scope.errors import InvalidScopeNameError
from quill.core.scope.validator import is_valid_scope_name
from quill.models.scope import GLOBAL_SCOPE_NAME

DECLARATION_MARKER = "@"

# Unicode White_Space; excludes the \x1c-\x1f separators str.isspace() accepts.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_WHITESPACE_RUN_RE = re.compile(f"[{WHITESPACE}]+")


@dataclass(frozen=True)
class ScannedLine:
    """One classified line of the source text."""

    number: int
    text: str
    terminator: str
    declared: tuple[str, ...] | None = None
    column: int | None = None

    @property
    def is_declaration(self) -> bool:
        return self.declared is not None


class ScopeTracker:
    """Holds the active scope set while a file is scanned."""

    def __init__(self) -> None:
        self.active: list[str] = [GLOBAL_SCOPE_NAME]

    def declare(self, scopes: list[str] | tuple[str, ...]) -> None:
        if not scopes:
            raise ValueError("A declaration must name at least one scope")
        self.active = list(scopes)

    def includes(self, target: str) -> bool:
        """Return True if content under the active scopes belongs to *target*."""
        return (
            target in self.active
            or GLOBAL_SCOPE_NAME in self.active
            or target == GLOBAL_SCOPE_NAME
        )


def iter_lines(text: str) -> Iterator[tuple[str, str]]:
    """Yield ``(content, terminator)`` pairs for each line of *text*.

    Lines end at ``\\n``; a ``\\r`` right before it belongs to the terminator.
    The last line has an empty terminator when the text does not end with
    a newline. Empty text yields nothing.
    """
    start = 0
    length = len(text)
    while start < length:
        end = text.find("\n", start)
        if end == -1:
            yield text[start:], ""
            return
        content = text[start:end]
        if content.endswith("\r"):
            yield content[:-1], "\r\n"
        else:
            yield content, "\n"
        start = end + 1


def parse_declaration(line: str, line_number: int) -> list[str] | None:
    """Parse the scope names declared on *line*.

    Returns None when the line is not a declaration. Raises
    InvalidScopeNameError on the first malformed ``@`` token.
    """
    trimmed = line.lstrip(WHITESPACE)
    if not trimmed.startswith(DECLARATION_MARKER):
        return None

    scopes: list[str] = []
    for token in _WHITESPACE_RUN_RE.split(trimmed):
        if not token.startswith(DECLARATION_MARKER):
            continue
        name = token[len(DECLARATION_MARKER):]
        if not is_valid_scope_name(name):
            raise InvalidScopeNameError(name, line_number, marker_column(line))
        scopes.append(name)

    return scopes or None


def marker_column(line: str) -> int:
    """1-indexed column of the first ``@`` on the raw line."""
    return line.find(DECLARATION_MARKER) + 1


def scan(text: str) -> Iterator[ScannedLine]:
    """Classify every line of *text* as a declaration or content."""
    for number, (content, terminator) in enumerate(iter_lines(text), start=1):
        declared = parse_declaration(content, number)
        if declared is None:
            yield ScannedLine(number=number, text=content, terminator=terminator)
        else:
            yield ScannedLine(
                number=number,
                text=content,
                terminator=terminator,
                declared=tuple(declared),
                column=marker_column(content),
            )
