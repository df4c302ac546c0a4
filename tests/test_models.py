"""Tests for scope models and error rendering."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from quill import (
    GLOBAL_SCOPE_NAME,
    InvalidScopeArgumentError,
    InvalidScopeNameError,
    QuillError,
    Scope,
    ScopeDeclaration,
    ScopeKind,
)


class TestScope:
    def test_global_name(self):
        scope = Scope.global_scope()
        assert scope.kind == ScopeKind.GLOBAL
        assert scope.name == GLOBAL_SCOPE_NAME
        assert str(scope) == "global"
        assert scope.is_global

    def test_defined_name(self):
        scope = Scope.defined("dev")
        assert scope.kind == ScopeKind.DEFINED
        assert scope.name == "dev"
        assert str(scope) == "dev"
        assert not scope.is_global

    def test_coerce(self):
        assert Scope.coerce(None) == Scope.global_scope()
        assert Scope.coerce("prod") == Scope.defined("prod")
        existing = Scope.defined("test")
        assert Scope.coerce(existing) is existing

    def test_defined_global_counts_as_global(self):
        assert Scope.defined("global").is_global

    def test_frozen(self):
        scope = Scope.defined("dev")
        with pytest.raises(ValidationError):
            scope.value = "prod"


def test_declaration_dump():
    declaration = ScopeDeclaration(line=3, column=2, scopes=["dev", "test"])
    assert declaration.model_dump() == {"line": 3, "column": 2, "scopes": ["dev", "test"]}


class TestErrors:
    def test_invalid_scope_name_message(self):
        err = InvalidScopeNameError("bad!", 4, 3)
        assert str(err) == (
            "Invalid scope name 'bad!' at line 4, column 3. Scope names may only contain "
            "ASCII letters, ASCII digits, underscores, and dashes."
        )
        assert err.as_dict() == {
            "error": "InvalidScopeNameError",
            "scope": "bad!",
            "message": str(err),
            "line": 4,
            "column": 3,
        }

    def test_invalid_scope_argument_message(self):
        err = InvalidScopeArgumentError("my scope")
        assert str(err) == (
            "Invalid scope name 'my scope'. Scope names may only contain "
            "ASCII letters, ASCII digits, underscores, and dashes."
        )
        assert "line" not in err.as_dict()

    def test_hierarchy(self):
        assert issubclass(InvalidScopeNameError, QuillError)
        assert issubclass(InvalidScopeArgumentError, QuillError)
        assert issubclass(QuillError, ValueError)
