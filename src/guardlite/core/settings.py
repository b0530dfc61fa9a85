"""Application settings loader."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from guardlite.utils.env import get_bool_env


class AppSettings(BaseModel):
    """Front end settings; the code engine itself takes no configuration."""

    title: str = "Steam Guard Lite"
    tick_interval_ms: int = Field(default=100, ge=10)
    log_level: str = "INFO"
    rich_logs: bool = True

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def from_file(cls, path: Optional[Path]) -> "AppSettings":
        data = {}
        if path is not None and path.exists():
            try:
                data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Invalid settings file {path}: expected a mapping")
        if os.getenv("GUARDLITE_RICH_LOGS") is not None:
            data["rich_logs"] = get_bool_env("GUARDLITE_RICH_LOGS", default=True)
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid settings: {exc}") from exc
