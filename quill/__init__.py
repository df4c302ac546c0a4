"""Quill: extract tagged scopes from configuration text.

Scopes are declared in a file with ``@name`` markers. Everything before the
first marker belongs to the ``global`` scope, which is included in every
extraction. Extraction blanks out lines of other scopes while keeping line
numbers stable, so downstream parsers report positions against the
original file.
"""

from quill.core.scope import (
    InvalidScopeArgumentError,
    InvalidScopeNameError,
    QuillError,
    extract_scope,
    is_valid_scope_name,
    list_scopes,
)
from quill.models.scope import GLOBAL_SCOPE_NAME, Scope, ScopeDeclaration, ScopeKind

__version__ = "0.1.0"

__all__ = [
    "GLOBAL_SCOPE_NAME",
    "InvalidScopeArgumentError",
    "InvalidScopeNameError",
    "QuillError",
    "Scope",
    "ScopeDeclaration",
    "ScopeKind",
    "__version__",
    "extract_scope",
    "is_valid_scope_name",
    "list_scopes",
]
