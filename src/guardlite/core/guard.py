"""Steam Guard style one-time code generation.

Codes are HOTP values (RFC 4226) over a 30 second time counter, rendered as
five base-26 symbols instead of decimal digits. The output has to match every
other client byte for byte, so nothing here is configurable.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import math
import re
import struct

from guardlite.core.models import RefreshProgress

STEAM_ALPHABET = "23456789BCDFGHJKMNPQRTVWXY"
CODE_LENGTH = 5
PERIOD_SECONDS = 30
PERIOD_MS = PERIOD_SECONDS * 1000

_WHITESPACE = re.compile(r"[ \t\r\n]+")
_BASE64 = re.compile(r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?")


def decode_secret(secret_b64: str) -> bytes:
    """Decode a base64 shared secret, ignoring embedded whitespace.

    Raises ``binascii.Error`` for characters outside the base64 alphabet or
    bad padding.
    """
    compact = _WHITESPACE.sub("", secret_b64)
    if not _BASE64.fullmatch(compact):
        raise binascii.Error("Invalid base64 length or padding")
    return base64.b64decode(compact, validate=True)


def is_base64(text: str) -> bool:
    try:
        decode_secret(text)
    except (binascii.Error, ValueError):
        return False
    return True


def time_slice(unix_seconds: int) -> int:
    return unix_seconds // PERIOD_SECONDS


def generate_code(secret_b64: str, unix_seconds: int) -> str:
    """Return the 5 character code for ``secret_b64`` at ``unix_seconds``."""
    if unix_seconds < 0:
        raise ValueError(f"unix_seconds must be non-negative, got {unix_seconds}")

    counter = struct.pack(">Q", time_slice(int(unix_seconds)))
    digest = hmac.new(decode_secret(secret_b64), counter, hashlib.sha1).digest()

    offset = digest[-1] & 0x0F
    code_point = struct.unpack(">I", digest[offset:offset + 4])[0] & 0x7FFFFFFF

    # least significant base-26 digit first, not reversed
    chars = []
    for _ in range(CODE_LENGTH):
        code_point, index = divmod(code_point, len(STEAM_ALPHABET))
        chars.append(STEAM_ALPHABET[index])
    return "".join(chars)


def seconds_remaining(unix_seconds: int) -> int:
    """Seconds until the next code, 30 at the first second of a window down to 1."""
    return PERIOD_SECONDS - unix_seconds % PERIOD_SECONDS


def refresh_progress(unix_millis: int) -> RefreshProgress:
    """Continuous progress through the current window for a progress bar."""
    elapsed = unix_millis % PERIOD_MS
    return RefreshProgress(
        elapsed_ms=elapsed,
        percent=elapsed / PERIOD_MS * 100.0,
        remaining_seconds=math.ceil((PERIOD_MS - elapsed) / 1000),
    )
