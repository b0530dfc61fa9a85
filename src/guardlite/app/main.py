"""Console entrypoint that shows the current guard code for a maFile."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.text import Text

from guardlite.app.state import GuardState
from guardlite.core.models import ExtractionFailure, GuardSnapshot
from guardlite.core.settings import AppSettings
from guardlite.services import MafileLoader, MafileReadError
from guardlite.utils.logging import get_logger, set_level, set_rich


logger = get_logger("guardlite.cli")

NEW_CODE_FLASH_SECONDS = 1.5


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


def _account_line(snapshot: GuardSnapshot) -> str:
    return f"Account: {snapshot.label or '(no account_name)'}"


def render(snapshot: GuardSnapshot, title: str) -> Panel:
    body = Group(
        Text(_account_line(snapshot), style="dim"),
        Text(snapshot.code, style="bold cyan", justify="center"),
        ProgressBar(total=100.0, completed=snapshot.progress_percent),
        Text(f"Refresh in: {snapshot.remaining_seconds} s", justify="right"),
    )
    return Panel(body, title=title, expand=False, width=40)


def watch(state: GuardState, console: Console, tick_interval_ms: int) -> None:
    with Live(console=console, auto_refresh=False) as live:
        try:
            while True:
                snapshot = state.tick(_now_millis())
                if snapshot.slice_changed:
                    state.flash("New code", NEW_CODE_FLASH_SECONDS, time.monotonic())
                live.update(render(snapshot, state.title(time.monotonic())), refresh=True)
                time.sleep(tick_interval_ms / 1000)
        except KeyboardInterrupt:
            logger.debug("Watch stopped by user")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="guardlite", description="Show the Steam Guard code for a maFile.")
    parser.add_argument("mafile", type=Path, help="Path to a .maFile or JSON export")
    parser.add_argument("--config", type=Path, default=None, help="Path to settings YAML")
    parser.add_argument("--watch", action="store_true", help="Keep the code and countdown on screen")
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    try:
        settings = AppSettings.from_file(args.config)
    except ValueError as exc:
        console.print(Text(f"Settings error: {exc}", style="red"))
        return 1
    set_rich(settings.rich_logs)
    set_level(settings.log_level)

    try:
        result = MafileLoader().load(args.mafile)
    except MafileReadError as exc:
        console.print(Text(f"File read error: {exc}", style="red"))
        return 1
    if isinstance(result, ExtractionFailure):
        console.print(Text(f"maFile error: {result.reason}", style="red"))
        return 1

    state = GuardState(base_title=settings.title)
    state.load(result)
    snapshot = state.refresh_now(_now_millis())

    if args.watch:
        watch(state, console, settings.tick_interval_ms)
        return 0

    console.print(Text(_account_line(snapshot)))
    console.print(Text(snapshot.code, style="bold"))
    console.print(Text(f"Refresh in: {snapshot.remaining_seconds} s"))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
