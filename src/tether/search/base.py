"""Search strategy protocol and shared candidate helpers."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

# Editor backups ("notes.org~") and empty names never count as search results.
IGNORE_RE = re.compile(r"~\Z")


def is_eligible(name: str) -> bool:
    """Return True if ``name`` may be reported as a search result."""
    return bool(name) and IGNORE_RE.search(name) is None


def eligible(paths: Iterable[str | Path]) -> list[Path]:
    """Drop ineligible entries, keeping the order of ``paths``."""
    return [Path(p) for p in paths if is_eligible(str(p))]


def pick_candidate(candidates: Iterable[Path], extension: str | None = None) -> Path | None:
    """Choose one entry among candidates sharing an identifier.

    An exact extension match wins; otherwise the first candidate in result
    order. Result order comes from the filesystem or the search tool and is
    not sorted.
    """
    candidates = eligible(candidates)
    if not candidates:
        return None
    if extension:
        for candidate in candidates:
            if os.path.splitext(candidate.name)[1] == extension:
                return candidate
    return candidates[0]


@runtime_checkable
class SearchStrategy(Protocol):
    """Protocol that all search backends must implement."""

    @property
    def name(self) -> str: ...

    def find_by_identifier(
        self, directory: Path, identifier: str, recursive: bool = False
    ) -> list[Path]:
        """Return entries under ``directory`` whose name contains ``identifier``.

        Paths may be relative to ``directory``. A failed search returns an
        empty list rather than raising.
        """
        ...
