"""Scope extraction over tagged configuration text."""

from __future__ import annotations

import logging

from quill.core.scope.errors import InvalidScopeArgumentError
from quill.core.scope.scanner import ScopeTracker, scan
from quill.core.scope.validator import is_valid_scope_name
from quill.models.scope import Scope, ScopeDeclaration

logger = logging.getLogger(__name__)


def extract_scope(source: str, scope: Scope | str | None = None) -> str:
    """Extract *scope* from the tagged *source* text.

    Declaration lines are blanked, and so is every content line that
    belongs neither to the target scope nor to the global scope. The
    result has exactly as many lines as the source, each with its original
    terminator, so line numbers reported against the result match the
    source file.

    Args:
        source: Tagged text, e.g. a TOML file with ``@scope`` markers
        scope: Target scope; None or ``"global"`` selects the global scope

    Returns:
        The extracted text

    Raises:
        InvalidScopeArgumentError: If the target scope name is invalid
        InvalidScopeNameError: If the source declares an invalid scope name

    Example:
        >>> extract_scope("a = 1\\n@dev\\nb = 2\\n@prod\\nc = 3\\n", "dev")
        'a = 1\\n\\nb = 2\\n\\n\\n'
    """
    target = Scope.coerce(scope)
    if not target.is_global and not is_valid_scope_name(target.name):
        raise InvalidScopeArgumentError(target.name)

    tracker = ScopeTracker()
    parts: list[str] = []
    kept = 0
    total = 0

    for line in scan(source):
        total += 1
        if line.declared:
            tracker.declare(line.declared)
            parts.append(line.terminator)
            continue

        if tracker.includes(target.name):
            parts.append(line.text)
            kept += 1
        parts.append(line.terminator)

    logger.debug("Extracted scope %s: kept %s of %s lines", target.name, kept, total)
    return "".join(parts)


def list_scopes(source: str) -> list[ScopeDeclaration]:
    """Return every scope declaration in *source*, in document order.

    Raises:
        InvalidScopeNameError: If the source declares an invalid scope name
    """
    return [
        ScopeDeclaration(line=line.number, column=line.column or 1, scopes=list(line.declared))
        for line in scan(source)
        if line.declared
    ]
