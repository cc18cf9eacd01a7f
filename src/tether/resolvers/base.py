"""Resolution request/result types shared by the resolvers and the orchestrator."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ResolutionState(str, Enum):
    UNTRIED = "untried"
    TRYING = "trying"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class ResolutionRequest:
    """A possibly stale path plus the leaf details used for tie-breaking."""

    path: Path
    leaf: str
    extension: str

    @classmethod
    def from_path(cls, path: str | Path) -> ResolutionRequest:
        p = expand(path)
        return cls(path=p, leaf=p.name, extension=os.path.splitext(p.name)[1])


@dataclass
class ResolutionResult:
    """Outcome of a resolution pass. ``path`` is None when nothing was found."""

    request: ResolutionRequest
    path: Path | None = None
    stage: str | None = None
    state: ResolutionState = ResolutionState.UNTRIED
    attempted: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.state is ResolutionState.FOUND and self.path is not None


def normalize(path: Path) -> Path:
    return Path(os.path.normpath(path))


def expand(path: str | Path) -> Path:
    """``Path.expanduser`` that leaves ``~unknown`` paths unexpanded."""
    p = Path(path)
    try:
        return p.expanduser()
    except RuntimeError:
        return p


# False on any OSError (ENAMETOOLONG, EACCES, ...), never raises.
def exists(path: Path) -> bool:
    return os.path.exists(path)


def is_dir(path: Path) -> bool:
    return os.path.isdir(path)
