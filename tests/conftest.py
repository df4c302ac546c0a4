"""Shared test fixtures for the Quill test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

WORKED_EXAMPLE = (
    "\n"
    'title = "App"\n'
    "\n"
    "@dev\n"
    "debug = true\n"
    "\n"
    "@prod\n"
    "optimized = true\n"
    "\n"
    "@dev @test\n"
    "extra_checks = true\n"
    "\n"
    "@global\n"
    "do_tests = true"
)


@pytest.fixture
def worked_example() -> str:
    """Tagged TOML with global, dev, prod, and dev+test sections (no trailing newline)."""
    return WORKED_EXAMPLE


@pytest.fixture
def tagged_file(tmp_path: Path) -> Path:
    """Write the worked example with a trailing newline and return its path."""
    path = tmp_path / "app.toml"
    path.write_text(WORKED_EXAMPLE + "\n", encoding="utf-8")
    return path
