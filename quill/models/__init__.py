"""Pydantic data models for Quill."""

from quill.models.scope import (
    GLOBAL_SCOPE_NAME,
    Scope,
    ScopeDeclaration,
    ScopeKind,
)

__all__ = [
    "GLOBAL_SCOPE_NAME",
    "Scope",
    "ScopeDeclaration",
    "ScopeKind",
]
