"""Data models shared across the guardlite engine and its front ends."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FailureKind(str, Enum):
    """Why a credential file could not be turned into a secret."""

    EMPTY_INPUT = "empty_input"
    PARSE_ERROR = "parse_error"
    SHAPE_ERROR = "shape_error"
    MISSING_SECRET = "missing_secret"
    INVALID_SECRET_ENCODING = "invalid_secret_encoding"


class ExtractionSuccess(BaseModel):
    """Secret (still base64 text) and optional account label found in a file."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    secret: str = Field(repr=False)
    label: Optional[str] = None


class ExtractionFailure(BaseModel):
    """Failed extraction; ``reason`` is meant to be shown to the user verbatim."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    kind: FailureKind
    reason: str


ExtractionResult = Union[ExtractionSuccess, ExtractionFailure]


class RefreshProgress(BaseModel):
    """Position inside the current 30 second window."""

    model_config = ConfigDict(frozen=True)

    elapsed_ms: int = Field(ge=0, lt=30000)
    percent: float = Field(ge=0.0, lt=100.0)
    remaining_seconds: int = Field(ge=1, le=30)


class GuardSnapshot(BaseModel):
    """What a front end should display after one tick."""

    code: str
    label: Optional[str] = None
    progress_percent: float = 0.0
    remaining_seconds: int = 30
    slice_changed: bool = False
    loaded: bool = False
