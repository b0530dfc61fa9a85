from __future__ import annotations

import pytest

from guardlite.core.settings import AppSettings


def test_defaults_without_file(monkeypatch):
    monkeypatch.delenv("GUARDLITE_RICH_LOGS", raising=False)
    settings = AppSettings.from_file(None)
    assert settings.tick_interval_ms == 100
    assert settings.log_level == "INFO"
    assert settings.rich_logs is True


def test_missing_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("GUARDLITE_RICH_LOGS", raising=False)
    assert AppSettings.from_file(tmp_path / "nope.yml") == AppSettings()


def test_load_yaml(tmp_path, monkeypatch):
    monkeypatch.delenv("GUARDLITE_RICH_LOGS", raising=False)
    path = tmp_path / "guardlite.yml"
    path.write_text("title: Guard\ntick_interval_ms: 250\nlog_level: debug\nrich_logs: false\n", encoding="utf-8")
    settings = AppSettings.from_file(path)
    assert settings.title == "Guard"
    assert settings.tick_interval_ms == 250
    assert settings.log_level == "DEBUG"
    assert settings.rich_logs is False


def test_empty_yaml(tmp_path, monkeypatch):
    monkeypatch.delenv("GUARDLITE_RICH_LOGS", raising=False)
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert AppSettings.from_file(path).title == "Steam Guard Lite"


@pytest.mark.parametrize(
    "content",
    ["tick_interval_ms: 1\n", "log_level: chatty\n", "- a\n- b\n", "title: [unclosed\n"],
)
def test_invalid_settings(tmp_path, content):
    path = tmp_path / "bad.yml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        AppSettings.from_file(path)


def test_env_overrides_rich_logs(tmp_path, monkeypatch):
    path = tmp_path / "guardlite.yml"
    path.write_text("rich_logs: true\n", encoding="utf-8")
    monkeypatch.setenv("GUARDLITE_RICH_LOGS", "off")
    assert AppSettings.from_file(path).rich_logs is False
