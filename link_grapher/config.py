# === FILE: link_grapher/config.py ===
"""
Loading and validation of the LinkGrapher crawl configuration.
The schema is described and checked with Pydantic; files may be YAML or JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CrawlerConfig(BaseModel):
    """Configuration of a single crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_host: str = Field(..., min_length=1, description="Host to crawl, without scheme (e.g. example.com).")
    concurrency: int = Field(100, ge=1, description="Number of concurrent fetch workers.")
    timeout: float = Field(10.0, gt=0, description="Timeout for a single page fetch (seconds).")
    user_agent: str = Field("LinkGrapher/0.1", min_length=1, description="User-Agent header.")
    progress_interval: float = Field(1.0, gt=0, description="Seconds between queue-length log lines.")

    @field_validator("base_host")
    def _bare_host(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("base_host must not be empty")
        if "://" in v or "/" in v:
            raise ValueError(f"base_host must be a bare host such as example.com, got {v!r}")
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Build a validated CrawlerConfig from an optional YAML/JSON file.

    Keyword ``overrides`` (usually from the command line) win over file values.
    A path that does not point at a file raises FileNotFoundError.
    """
    data: dict[str, Any] = {}
    if path is not None:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

        suffix = path_obj.suffix.lower()
        if suffix in (".yaml", ".yml"):
            data = _read_yaml(path_obj)
        elif suffix == ".json":
            data = _read_json(path_obj)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    data.update(overrides)
    return CrawlerConfig(**data)


__all__ = ["CrawlerConfig", "load_config"]
