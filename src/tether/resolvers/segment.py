"""Segment-wise path reconstruction.

Walks a stale path from the root down. Components that still exist are kept
as-is; a missing component is looked up in the directory built so far by the
identifier embedded in its name. A missing component without an identifier
ends the pass. Renamed directories are recovered; a directory moved under a
different parent is not.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from tether.identifier import extract
from tether.resolvers.base import expand, exists, normalize
from tether.search.base import pick_candidate

if TYPE_CHECKING:
    from tether.search.base import SearchStrategy

logger = logging.getLogger(__name__)


class SegmentResolver:
    """Rebuild a path component by component using depth-1 identifier search."""

    def __init__(self, search: SearchStrategy) -> None:
        self.search = search

    def resolve(self, path: str | Path) -> Path | None:
        """Return the reconstructed absolute path, or None if a component is lost."""
        target = Path(os.path.abspath(expand(path)))
        building = Path(target.anchor)

        for component in target.parts[1:]:
            candidate = building / component
            if exists(candidate):
                building = candidate
                continue

            identifier = extract(component)
            if not identifier:
                logger.debug("Segment %r missing and carries no identifier", component)
                return None

            hits = self.search.find_by_identifier(building, identifier, recursive=False)
            match = pick_candidate(hits, os.path.splitext(component)[1])
            if match is None:
                logger.debug("No entry for %s in %s", identifier, building)
                return None

            building = building / match
            logger.debug("Segment %r -> %s", component, building)

        return normalize(building)
