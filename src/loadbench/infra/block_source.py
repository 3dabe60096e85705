"""Block record sources: directory listing, file reading and JSON parsing."""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from loadbench.exceptions import IoError, ParseError


class BlockSource(ABC):
    """Strategy interface for locating and reading block files."""

    @abstractmethod
    def list_paths(self, directory: Path) -> list[Path]:
        """Return block file paths in a stable order. Raises IoError."""

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Return the file's text. Raises IoError."""


class LocalBlockSource(BlockSource):
    """Reads block files from the local filesystem, sorted by name."""

    def __init__(self, file_pattern: str = "*") -> None:
        self._file_pattern = file_pattern

    def list_paths(self, directory: Path) -> list[Path]:
        if not directory.is_dir():
            raise IoError(f"Block directory not found or not a directory: {directory}")
        try:
            return sorted(directory.glob(self._file_pattern))
        except OSError as exc:
            raise IoError(f"Cannot list block directory {directory}: {exc}") from exc

    def read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise IoError(f"Cannot read block file {path}: {exc}") from exc


def parse_record(text: str, source: str = "<string>") -> Any:
    """Parse JSON text into a plain dict/list tree. Raises ParseError."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"{source} is not valid JSON: {exc}") from exc
