"""Configuration loading from environment variables and tether.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_STORE_DIR = Path.home() / "Documents" / "tether"
_CONFIG_FILENAME = "tether.toml"
_POSITIONS = ("head", "tail")
_FD_NAMES = ("fd", "fdfind")


def _split_dirs(value: str) -> list[Path]:
    return [Path(p).expanduser() for p in value.split(os.pathsep) if p]


def _as_dirs(values: list[str]) -> list[Path]:
    return [Path(v).expanduser() for v in values]


@dataclass
class SearchConfig:
    """Search backend configuration."""

    tool: str = "fd"
    use_tool: bool = True
    timeout: float | None = None

    def __post_init__(self) -> None:
        # The search backend speaks fd's command line; a path to fd is fine.
        if Path(self.tool).name not in _FD_NAMES:
            raise ValueError(f"search.tool must be one of {_FD_NAMES}, got {self.tool!r}")


@dataclass
class TetherConfig:
    """Top-level Tether configuration."""

    store_dirs: list[Path] = field(default_factory=lambda: [_DEFAULT_STORE_DIR])
    search_dirs: list[Path] = field(default_factory=list)
    id_position: str = "head"
    link_types: list[str] = field(default_factory=lambda: ["file"])
    search: SearchConfig = field(default_factory=SearchConfig)
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.id_position not in _POSITIONS:
            raise ValueError(
                f"id_position must be one of {_POSITIONS}, got {self.id_position!r}"
            )

    @property
    def default_store_dir(self) -> Path:
        return self.store_dirs[0]

    @property
    def effective_search_dirs(self) -> list[Path]:
        """Fallback search order; falls back to the store directories."""
        return list(self.search_dirs or self.store_dirs)


def load_config(config_path: Path | None = None) -> TetherConfig:
    """Load configuration from environment variables and optional tether.toml.

    Priority: environment variables > tether.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.tether/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".tether" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    search_data = file_data.get("search", {})

    store_dirs = _as_dirs(file_data.get("store_dirs", [])) or [_DEFAULT_STORE_DIR]
    if os.getenv("TETHER_STORE_DIRS"):
        store_dirs = _split_dirs(os.environ["TETHER_STORE_DIRS"])

    search_dirs = _as_dirs(file_data.get("search_dirs", []))
    if os.getenv("TETHER_SEARCH_DIRS"):
        search_dirs = _split_dirs(os.environ["TETHER_SEARCH_DIRS"])

    timeout = os.getenv("TETHER_SEARCH_TIMEOUT", search_data.get("timeout"))

    config = TetherConfig(
        store_dirs=store_dirs,
        search_dirs=search_dirs,
        id_position=os.getenv("TETHER_ID_POSITION", file_data.get("id_position", "head")),
        link_types=file_data.get("link_types", ["file"]),
        search=SearchConfig(
            tool=os.getenv("TETHER_SEARCH_TOOL", search_data.get("tool", "fd")),
            use_tool=search_data.get("use_tool", True),
            timeout=float(timeout) if timeout is not None else None,
        ),
        log_level=os.getenv("TETHER_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
    return config
