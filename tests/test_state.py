from __future__ import annotations

import pytest

from guardlite.app.state import PLACEHOLDER_CODE, GuardState
from guardlite.core.models import ExtractionFailure, ExtractionSuccess, FailureKind

ZERO_SECRET = "AAAAAAAAAAAAAAAAAAAAAAAAAAA="


def _loaded_state(label: str | None = "alice") -> GuardState:
    state = GuardState()
    state.load(ExtractionSuccess(secret=ZERO_SECRET, label=label))
    return state


def test_tick_without_account():
    state = GuardState()
    snapshot = state.tick(12_345)
    assert not snapshot.loaded
    assert snapshot.code == PLACEHOLDER_CODE
    assert snapshot.progress_percent == 0.0


def test_load_rejects_failure():
    state = GuardState()
    with pytest.raises(ValueError, match="file is empty."):
        state.load(ExtractionFailure(kind=FailureKind.EMPTY_INPUT, reason="file is empty."))
    assert not state.loaded


def test_first_tick_after_load_resets_progress():
    state = _loaded_state()
    snapshot = state.tick(5_000)
    assert snapshot.slice_changed
    assert snapshot.code == "RYH4D"
    assert snapshot.label == "alice"
    assert snapshot.progress_percent == 0.0
    assert snapshot.remaining_seconds == 30


def test_tick_within_window_reports_progress():
    state = _loaded_state()
    state.tick(5_000)
    snapshot = state.tick(15_000)
    assert not snapshot.slice_changed
    assert snapshot.code == "RYH4D"
    assert snapshot.progress_percent == pytest.approx(50.0)
    assert snapshot.remaining_seconds == 15


def test_new_window_regenerates_code():
    state = _loaded_state()
    state.tick(29_900)
    snapshot = state.tick(30_000)
    assert snapshot.slice_changed
    assert snapshot.code == "DR2DK"
    assert snapshot.progress_percent == 0.0
    next_snapshot = state.tick(30_100)
    assert not next_snapshot.slice_changed
    assert next_snapshot.progress_percent > 0.0


def test_refresh_now_reports_real_progress():
    state = _loaded_state(label=None)
    snapshot = state.refresh_now(15_000)
    assert snapshot.code == "RYH4D"
    assert snapshot.label is None
    assert snapshot.progress_percent == pytest.approx(50.0)
    assert not state.tick(16_000).slice_changed


def test_reload_forces_regeneration():
    state = _loaded_state()
    state.tick(1_000)
    state.load(ExtractionSuccess(secret=ZERO_SECRET, label="bob"))
    snapshot = state.tick(2_000)
    assert snapshot.slice_changed
    assert snapshot.label == "bob"


def test_unload():
    state = _loaded_state()
    state.tick(1_000)
    state.unload()
    assert state.code == PLACEHOLDER_CODE
    assert not state.tick(2_000).loaded


def test_flash_title_expires():
    state = GuardState(base_title="Guard")
    assert state.title(0.0) == "Guard"
    state.flash("Copied", 1.5, now=100.0)
    assert state.title(100.5) == "Copied"
    assert state.title(101.5) == "Copied"
    assert state.title(101.6) == "Guard"
    assert state.title(100.5) == "Guard"
