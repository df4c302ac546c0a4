"""Errors raised while extracting scopes."""

from __future__ import annotations

from typing import Any

_ALLOWED_CHARACTERS = (
    "Scope names may only contain ASCII letters, ASCII digits, underscores, and dashes."
)


class QuillError(ValueError):
    """Base class for scope extraction failures."""

    def __init__(self, scope: str, message: str) -> None:
        super().__init__(message)
        self.scope = scope
        self.message = message

    def as_dict(self) -> dict[str, Any]:
        return {"error": type(self).__name__, "scope": self.scope, "message": self.message}


class InvalidScopeNameError(QuillError):
    """Raised when a declaration line in the source names an invalid scope."""

    def __init__(self, scope: str, line: int, column: int) -> None:
        super().__init__(
            scope,
            f"Invalid scope name '{scope}' at line {line}, column {column}. {_ALLOWED_CHARACTERS}",
        )
        self.line = line
        self.column = column

    def as_dict(self) -> dict[str, Any]:
        payload = super().as_dict()
        payload["line"] = self.line
        payload["column"] = self.column
        return payload


class InvalidScopeArgumentError(QuillError):
    """Raised when the requested target scope has an invalid name."""

    def __init__(self, scope: str) -> None:
        super().__init__(scope, f"Invalid scope name '{scope}'. {_ALLOWED_CHARACTERS}")
