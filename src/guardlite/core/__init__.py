"""Pure code engine: credential extraction and Steam Guard code generation."""

from .guard import (
    STEAM_ALPHABET,
    decode_secret,
    generate_code,
    is_base64,
    refresh_progress,
    seconds_remaining,
    time_slice,
)
from .mafile import extract
from .models import (
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    FailureKind,
    GuardSnapshot,
    RefreshProgress,
)

__all__ = [
    "STEAM_ALPHABET",
    "decode_secret",
    "generate_code",
    "is_base64",
    "refresh_progress",
    "seconds_remaining",
    "time_slice",
    "extract",
    "ExtractionFailure",
    "ExtractionResult",
    "ExtractionSuccess",
    "FailureKind",
    "GuardSnapshot",
    "RefreshProgress",
]
