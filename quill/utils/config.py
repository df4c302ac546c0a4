"""CLI configuration loading."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from quill.models.scope import GLOBAL_SCOPE_NAME

DEFAULT_CONFIG_PATH = Path("quill.yaml")


class QuillConfig(BaseModel):
    """Defaults applied by the CLI when options are not given."""

    model_config = ConfigDict(extra="forbid")

    scope: str = GLOBAL_SCOPE_NAME
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as err:
            raise ValueError(f"unknown encoding: {value}") from err
        return value


def load_config(path: str | Path | None = None) -> QuillConfig:
    """Load CLI defaults from a YAML file.

    Without an explicit *path*, ``quill.yaml`` in the working directory is
    read when present; otherwise built-in defaults apply.

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If the file is not a valid config mapping
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return QuillConfig()
        resolved = DEFAULT_CONFIG_PATH
    else:
        resolved = Path(path)
        if not resolved.exists():
            raise FileNotFoundError(f"Config file not found: {resolved}")

    payload = yaml.safe_load(resolved.read_text(encoding="utf-8")) or {}
    return parse_config_dict(payload, source=resolved)


def parse_config_dict(data: Any, *, source: Path | None = None) -> QuillConfig:
    """Validate a config mapping."""
    where = f" in {source}" if source else ""
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML mapping{where}")
    try:
        return QuillConfig.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ValueError(f"Invalid config{where}: {problems}") from exc
