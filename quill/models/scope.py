"""Scope-related data models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

GLOBAL_SCOPE_NAME = "global"


class ScopeKind(StrEnum):
    """Kinds of scopes a file can be extracted for."""

    GLOBAL = "global"
    DEFINED = "defined"


class Scope(BaseModel):
    """A scope to extract from a tagged file.

    The global scope holds every line that precedes the first declaration
    (and lines under ``@global``); it is included in every extraction.
    Defined scopes are named by the user with ``@name`` markers.
    """

    model_config = ConfigDict(frozen=True)

    kind: ScopeKind = ScopeKind.DEFINED
    value: str | None = None

    @classmethod
    def global_scope(cls) -> Scope:
        return cls(kind=ScopeKind.GLOBAL)

    @classmethod
    def defined(cls, name: str) -> Scope:
        """Build a user-defined scope. The name is validated on extraction."""
        return cls(kind=ScopeKind.DEFINED, value=name)

    @classmethod
    def coerce(cls, value: Scope | str | None) -> Scope:
        """Turn a caller-supplied value into a Scope.

        ``None`` means the global scope; any string becomes a defined scope.
        """
        if value is None:
            return cls.global_scope()
        if isinstance(value, Scope):
            return value
        return cls.defined(value)

    @property
    def name(self) -> str:
        """Display name of the scope (``"global"`` for the global scope)."""
        if self.kind == ScopeKind.GLOBAL:
            return GLOBAL_SCOPE_NAME
        return self.value or ""

    @property
    def is_global(self) -> bool:
        return self.name == GLOBAL_SCOPE_NAME

    def __str__(self) -> str:
        return self.name


class ScopeDeclaration(BaseModel):
    """A declaration line found while scanning a file."""

    line: int  # 1-indexed
    column: int  # 1-indexed position of the first '@' on the raw line
    scopes: list[str] = Field(default_factory=list)

    def declares(self, name: str) -> bool:
        return name in self.scopes
