"""fd-backed search: wraps `fd <identifier>` run inside the target directory."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from tether.search.base import eligible

logger = logging.getLogger(__name__)


@dataclass
class FdSearch:
    """Subprocess wrapper around the `fd` filename search utility.

    Output paths are relative to the searched directory. Hidden and ignored
    files are included so results match the directory walk.
    """

    executable: str = "fd"
    timeout: float | None = None

    @property
    def name(self) -> str:
        return "fd"

    def _build_command(self, identifier: str, recursive: bool) -> list[str]:
        cmd = [
            self.executable,
            "--hidden",
            "--no-ignore",
            "--fixed-strings",
            "--color", "never",
        ]
        if not recursive:
            cmd.extend(["--max-depth", "1"])
        cmd.append(identifier)
        return cmd

    def find_by_identifier(
        self, directory: Path, identifier: str, recursive: bool = False
    ) -> list[Path]:
        cmd = self._build_command(identifier, recursive)
        logger.debug("Running: %s (cwd=%s)", " ".join(cmd), directory)

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                cwd=directory,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning("%s timed out searching %s", self.executable, directory)
            return []
        except OSError as e:
            # Missing binary or unusable cwd: same as an empty result.
            logger.debug("%s unavailable for %s: %s", self.executable, directory, e)
            return []

        if result.returncode != 0:
            logger.debug(
                "%s exited rc=%d: %s", self.executable, result.returncode, result.stderr.strip()
            )
            return []

        lines = [line.rstrip("/") for line in result.stdout.splitlines()]
        return eligible(lines)
