"""Store-directory fallback: recursive identifier search across root directories."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from tether.identifier import extract
from tether.resolvers.base import ResolutionRequest, expand, is_dir, normalize
from tether.search.base import pick_candidate

if TYPE_CHECKING:
    from tether.resolvers.segment import SegmentResolver
    from tether.search.base import SearchStrategy

logger = logging.getLogger(__name__)


class StoreDirectoryResolver:
    """Search each directory in order for the leaf's identifier; first hit wins.

    Directories that no longer exist are themselves resolved segment-wise
    before searching, and skipped if that fails.
    """

    def __init__(
        self,
        search: SearchStrategy,
        segments: SegmentResolver,
        search_dirs: Iterable[Path] = (),
    ) -> None:
        self.search = search
        self.segments = segments
        self.search_dirs = list(search_dirs)

    def resolve(
        self, path: str | Path, search_dirs: Iterable[Path] | None = None
    ) -> Path | None:
        request = ResolutionRequest.from_path(path)
        identifier = extract(request.leaf)
        if not identifier:
            logger.debug("Leaf %r carries no identifier, skipping store search", request.leaf)
            return None

        dirs = self.search_dirs if search_dirs is None else list(search_dirs)
        for directory in dirs:
            root = self._locate(expand(directory))
            if root is None:
                continue
            hits = self.search.find_by_identifier(root, identifier, recursive=True)
            match = pick_candidate(hits, request.extension)
            if match is not None:
                logger.debug("Found %s under %s", identifier, root)
                return normalize(root / match)
        return None

    def _locate(self, directory: Path) -> Path | None:
        if is_dir(directory):
            return directory
        resolved = self.segments.resolve(directory)
        if resolved is None or not is_dir(resolved):
            logger.debug("Search directory %s is unavailable", directory)
            return None
        return resolved
