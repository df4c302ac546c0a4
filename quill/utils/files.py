"""Filesystem helpers for reading sources and writing extracted output."""

from __future__ import annotations

import os
from pathlib import Path

import click

STDIN_PATH = "-"


def read_source(path: str, encoding: str = "utf-8") -> str:
    """Read a source file, or stdin when *path* is ``-``.

    Newlines are left untouched so CRLF sources extract to CRLF output.
    """
    if path == STDIN_PATH:
        return click.get_binary_stream("stdin").read().decode(encoding)
    with open(path, encoding=encoding, newline="") as handle:
        return handle.read()


def atomic_write_text(path: Path, data: str, encoding: str = "utf-8") -> None:
    """Atomically write text data to a file with fsync."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")

    with open(tmp_path, "w", encoding=encoding, newline="") as handle:
        handle.write(data)
        handle.flush()
        os.fsync(handle.fileno())

    os.replace(tmp_path, path)
    _fsync_directory(path.parent)


def _fsync_directory(path: Path) -> None:
    """Best-effort fsync on a directory after atomic replace."""
    try:
        fd = os.open(path, os.O_DIRECTORY)
    except OSError:
        return
    try:
        os.fsync(fd)
    finally:
        os.close(fd)
