"""Scope engine for extracting tagged regions of a file."""

from quill.core.scope.errors import (
    InvalidScopeArgumentError,
    InvalidScopeNameError,
    QuillError,
)
from quill.core.scope.extract import extract_scope, list_scopes
from quill.core.scope.scanner import ScopeTracker, scan
from quill.core.scope.validator import is_valid_scope_name

__all__ = [
    "InvalidScopeArgumentError",
    "InvalidScopeNameError",
    "QuillError",
    "ScopeTracker",
    "extract_scope",
    "is_valid_scope_name",
    "list_scopes",
    "scan",
]
