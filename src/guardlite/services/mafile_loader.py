"""Reads credential files from disk and hands their text to the extractor."""

from __future__ import annotations

from pathlib import Path

from guardlite.core.mafile import extract
from guardlite.core.models import ExtractionResult, ExtractionSuccess
from guardlite.utils.logging import get_logger


logger = get_logger(__name__)


class MafileReadError(Exception):
    """The file could not be read; the message is suitable for display."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class MafileLoader:
    """Load maFile / JSON exports."""

    def __init__(self, encoding: str = "utf-8-sig") -> None:
        self._encoding = encoding

    def read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self._encoding)
        except FileNotFoundError as exc:
            raise MafileReadError(path, f"File not found: {path}") from exc
        except PermissionError as exc:
            raise MafileReadError(path, f"Permission denied: {path}") from exc
        except IsADirectoryError as exc:
            raise MafileReadError(path, f"Not a file: {path}") from exc
        except UnicodeDecodeError as exc:
            raise MafileReadError(path, f"File is not valid {self._encoding} text: {path}") from exc
        except OSError as exc:
            raise MafileReadError(path, f"Unable to read {path}: {exc.strerror or exc}") from exc

    def load(self, path: Path) -> ExtractionResult:
        result = extract(self.read_text(path))
        if isinstance(result, ExtractionSuccess):
            logger.info("Loaded maFile %s (account: %s)", path.name, result.label or "(no account_name)")
        else:
            logger.warning("maFile %s rejected: %s", path.name, result.reason)
        return result
