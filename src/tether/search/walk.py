"""Built-in directory walk, used when no search tool is installed."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from tether.search.base import eligible

logger = logging.getLogger(__name__)


class WalkSearch:
    """Match entry names against an identifier with ``os.scandir`` / ``os.walk``."""

    @property
    def name(self) -> str:
        return "walk"

    def find_by_identifier(
        self, directory: Path, identifier: str, recursive: bool = False
    ) -> list[Path]:
        directory = Path(directory)
        if not recursive:
            return eligible(self._scan(directory, identifier))

        matches: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(directory, onerror=self._on_error):
            for entry in dirnames + filenames:
                if identifier in entry:
                    matches.append(Path(dirpath) / entry)
        return eligible(matches)

    def _scan(self, directory: Path, identifier: str) -> list[Path]:
        try:
            with os.scandir(directory) as entries:
                return [directory / e.name for e in entries if identifier in e.name]
        except OSError as e:
            self._on_error(e)
            return []

    @staticmethod
    def _on_error(error: OSError) -> None:
        logger.debug("Skipping unreadable directory: %s", error)
