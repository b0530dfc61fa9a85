"""Pull a shared secret and account name out of a maFile-like JSON document.

Exports from different authenticator tools disagree on field casing and some
wrap the payload in a ``content`` field, either as an object or as a JSON
encoded string. Lookups therefore walk the object's fields in document order
and compare names case-insensitively; parsing keeps every field (duplicates
included) instead of building a ``dict``.
"""

from __future__ import annotations

import enum
import json
from typing import Any, List, Optional, Sequence, Tuple

from guardlite.core.guard import is_base64
from guardlite.core.models import (
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    FailureKind,
)
from guardlite.utils.logging import get_logger


logger = get_logger(__name__)

SECRET_FIELDS = ("shared_secret", "SharedSecret", "sharedSecret")
LABEL_FIELDS = ("account_name", "AccountName", "accountName")


class JsonObject:
    """A JSON object as an ordered sequence of ``(name, value)`` pairs."""

    __slots__ = ("fields",)

    def __init__(self, fields: Sequence[Tuple[str, Any]]) -> None:
        self.fields: List[Tuple[str, Any]] = list(fields)

    def find(self, name: str) -> Tuple[bool, Any]:
        """First field whose name matches ``name`` ignoring case."""
        for key, value in self.fields:
            if _same_name(key, name):
                return True, value
        return False, None

    def to_python(self) -> dict:
        return {key: _to_python(value) for key, value in self.fields}


class ContentKind(enum.Enum):
    ABSENT = "absent"
    STRING = "string"
    OBJECT = "object"
    OTHER = "other"


class _ParseError(Exception):
    pass


def _same_name(left: str, right: str) -> bool:
    # per-character comparison so a single char never matches a two char expansion
    if len(left) != len(right):
        return False
    return all(a == b or a.upper() == b.upper() for a, b in zip(left, right))


def _to_python(value: Any) -> Any:
    if isinstance(value, JsonObject):
        return value.to_python()
    if isinstance(value, list):
        return [_to_python(item) for item in value]
    return value


def _reject_constant(name: str) -> Any:
    raise _ParseError(f"{name} is not valid JSON")


def _parse(text: str) -> Any:
    try:
        return json.loads(text, object_pairs_hook=JsonObject, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise _ParseError(str(exc)) from exc
    except RecursionError as exc:
        raise _ParseError("document is nested too deeply") from exc


def _classify_content(root: Any) -> Tuple[ContentKind, Any]:
    if not isinstance(root, JsonObject):
        return ContentKind.ABSENT, None
    found, value = root.find("content")
    if not found:
        return ContentKind.ABSENT, None
    if isinstance(value, str):
        return ContentKind.STRING, value
    if isinstance(value, JsonObject):
        return ContentKind.OBJECT, value
    return ContentKind.OTHER, value


def _field_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(_to_python(value), ensure_ascii=False, separators=(",", ":"))


def _get_text(obj: JsonObject, names: Sequence[str]) -> Optional[str]:
    # alternatives are tried in order; a null value falls through to the next one
    for name in names:
        found, value = obj.find(name)
        if found:
            text = _field_text(value)
            if text is not None:
                return text
    return None


def _failure(kind: FailureKind, reason: str) -> ExtractionFailure:
    logger.debug("maFile rejected (%s): %s", kind.value, reason)
    return ExtractionFailure(kind=kind, reason=reason)


def _extract_account(root: Any) -> ExtractionResult:
    if not isinstance(root, JsonObject):
        return _failure(FailureKind.SHAPE_ERROR, "expected an object.")

    secret = _get_text(root, SECRET_FIELDS)
    if secret is None or not secret.strip():
        return _failure(FailureKind.MISSING_SECRET, "field 'shared_secret' was not found.")

    secret = secret.strip()
    if not is_base64(secret):
        return _failure(FailureKind.INVALID_SECRET_ENCODING, "'shared_secret' does not look like base64.")

    label = _get_text(root, LABEL_FIELDS)
    if label is not None:
        label = label.strip()
    return ExtractionSuccess(secret=secret, label=label)


def extract(raw_text: str) -> ExtractionResult:
    """Extract the shared secret and optional account name from ``raw_text``.

    Never raises for bad input: every problem comes back as an
    :class:`ExtractionFailure` whose ``reason`` can be shown as-is.
    """
    if not raw_text or not raw_text.strip():
        return _failure(FailureKind.EMPTY_INPUT, "file is empty.")

    try:
        root = _parse(raw_text)
        kind, content = _classify_content(root)
        if kind is ContentKind.STRING:
            if content.lstrip().startswith("{"):
                root = _parse(content)
        elif kind is ContentKind.OBJECT:
            root = content
    except _ParseError as exc:
        return _failure(FailureKind.PARSE_ERROR, f"invalid JSON: {exc}")

    try:
        return _extract_account(root)
    except RecursionError:
        # a non-string label can be too deep to serialize back to text
        return _failure(FailureKind.PARSE_ERROR, "invalid JSON: document is nested too deeply")
