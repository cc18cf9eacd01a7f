"""Tether orchestrator: turns stale paths into current ones.

Responsibilities:
1. Pick the search strategy once, from configuration
2. Gate resolution by link type (other link types pass through)
3. Run the resolution cascade: direct check → segment-wise → store fallback
4. Report the first success, or an exhausted result
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from tether.config import TetherConfig
from tether.resolvers.base import (
    ResolutionRequest,
    ResolutionResult,
    ResolutionState,
    exists,
    normalize,
)
from tether.resolvers.fallback import StoreDirectoryResolver
from tether.resolvers.segment import SegmentResolver
from tether.search import select_strategy

if TYPE_CHECKING:
    from tether.search.base import SearchStrategy

logger = logging.getLogger(__name__)

Stage = Callable[[ResolutionRequest], Path | None]


class Tether:
    """Core orchestrator: resolves paths against the configured store."""

    def __init__(self, config: TetherConfig, search: SearchStrategy | None = None) -> None:
        self.config = config
        self.search = search or select_strategy(config.search)
        self.segments = SegmentResolver(self.search)
        self.fallback = StoreDirectoryResolver(
            self.search, self.segments, config.effective_search_dirs
        )
        self._stages: list[tuple[str, Stage]] = [
            ("direct", self._direct),
            ("segment", lambda req: self.segments.resolve(req.path)),
            ("fallback", lambda req: self.fallback.resolve(req.path)),
        ]

    # ── Stages ───────────────────────────────────────────────

    @staticmethod
    def _direct(request: ResolutionRequest) -> Path | None:
        return normalize(request.path) if exists(request.path) else None

    # ── Resolution ───────────────────────────────────────────

    def resolve(self, path: str | Path) -> ResolutionResult:
        """Run the cascade, stopping at the first stage that finds the entry."""
        request = ResolutionRequest.from_path(path)
        result = ResolutionResult(request=request)

        for name, stage in self._stages:
            result.state = ResolutionState.TRYING
            result.attempted.append(name)
            found = stage(request)
            if found is not None:
                result.path = found
                result.stage = name
                result.state = ResolutionState.FOUND
                if name != "direct":
                    logger.info("Resolved %s -> %s (%s)", request.path, found, name)
                return result

        result.state = ResolutionState.EXHAUSTED
        logger.info("Not found: %s", request.path)
        return result

    def resolve_link(self, link_type: str, target: str | Path) -> ResolutionResult:
        """Resolve a link target, passing through link types we don't manage."""
        if link_type not in self.config.link_types:
            request = ResolutionRequest.from_path(target)
            return ResolutionResult(
                request=request,
                path=request.path,
                stage="passthrough",
                state=ResolutionState.FOUND,
            )
        return self.resolve(target)
