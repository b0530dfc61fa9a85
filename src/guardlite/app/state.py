"""Presentation state for a guard code display, polled by the UI loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from guardlite.core.guard import PERIOD_SECONDS, generate_code, refresh_progress, time_slice
from guardlite.core.models import ExtractionResult, ExtractionSuccess, GuardSnapshot

PLACEHOLDER_CODE = "-----"


@dataclass
class _Account:
    secret: str
    label: Optional[str] = None


class GuardState:
    """Tracks the loaded account, the current code and a temporary title message."""

    def __init__(self, base_title: str = "Steam Guard Lite") -> None:
        self.base_title = base_title
        self._account: Optional[_Account] = None
        self._slice = -1
        self._code = PLACEHOLDER_CODE
        self._flash_text: Optional[str] = None
        self._flash_until = 0.0

    @property
    def loaded(self) -> bool:
        return self._account is not None

    @property
    def code(self) -> str:
        return self._code

    @property
    def label(self) -> Optional[str]:
        return self._account.label if self._account else None

    def load(self, result: ExtractionResult) -> None:
        if not isinstance(result, ExtractionSuccess):
            raise ValueError(result.reason)
        self._account = _Account(secret=result.secret, label=result.label)
        self._slice = -1

    def unload(self) -> None:
        self._account = None
        self._slice = -1
        self._code = PLACEHOLDER_CODE

    def refresh_now(self, unix_millis: int) -> GuardSnapshot:
        """Regenerate the code immediately and report the real progress."""
        if self._account is None:
            return self._empty_snapshot()
        unix = unix_millis // 1000
        self._slice = time_slice(unix)
        self._code = generate_code(self._account.secret, unix)
        progress = refresh_progress(unix_millis)
        return GuardSnapshot(
            code=self._code,
            label=self._account.label,
            progress_percent=progress.percent,
            remaining_seconds=progress.remaining_seconds,
            loaded=True,
        )

    def tick(self, unix_millis: int) -> GuardSnapshot:
        if self._account is None:
            return self._empty_snapshot()

        unix = unix_millis // 1000
        current = time_slice(unix)
        if current != self._slice:
            # progress drops to 0 for this tick so the reset is visible
            self._slice = current
            self._code = generate_code(self._account.secret, unix)
            return GuardSnapshot(
                code=self._code,
                label=self._account.label,
                progress_percent=0.0,
                remaining_seconds=PERIOD_SECONDS,
                slice_changed=True,
                loaded=True,
            )

        progress = refresh_progress(unix_millis)
        return GuardSnapshot(
            code=self._code,
            label=self._account.label,
            progress_percent=progress.percent,
            remaining_seconds=progress.remaining_seconds,
            loaded=True,
        )

    def flash(self, message: str, seconds: float, now: float) -> None:
        self._flash_text = message
        self._flash_until = now + seconds

    def title(self, now: float) -> str:
        if self._flash_text is not None and now <= self._flash_until:
            return self._flash_text
        self._flash_text = None
        return self.base_title

    def _empty_snapshot(self) -> GuardSnapshot:
        return GuardSnapshot(code=PLACEHOLDER_CODE, label=None, progress_percent=0.0, remaining_seconds=PERIOD_SECONDS)
