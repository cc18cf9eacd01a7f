"""Search strategies for locating entries by identifier.

``select_strategy`` probes for the search tool once; callers keep the returned
strategy for the lifetime of their configuration.
"""

from __future__ import annotations

import logging
import shutil
from typing import TYPE_CHECKING

from tether.search.base import SearchStrategy, eligible, is_eligible, pick_candidate
from tether.search.fd import FdSearch
from tether.search.walk import WalkSearch

if TYPE_CHECKING:
    from tether.config import SearchConfig

logger = logging.getLogger(__name__)

# Debian and Ubuntu ship fd as `fdfind`.
_TOOL_ALIASES = {"fd": ["fd", "fdfind"]}


def select_strategy(config: SearchConfig) -> SearchStrategy:
    """Return the fd-backed strategy if the tool is on PATH, else the walk."""
    if config.use_tool:
        for candidate in _TOOL_ALIASES.get(config.tool, [config.tool]):
            executable = shutil.which(candidate)
            if executable:
                logger.debug("Using %s for identifier search", executable)
                return FdSearch(executable=executable, timeout=config.timeout)
        logger.info("%s not found on PATH, falling back to directory walk", config.tool)
    return WalkSearch()


__all__ = [
    "FdSearch",
    "SearchStrategy",
    "WalkSearch",
    "eligible",
    "is_eligible",
    "pick_candidate",
    "select_strategy",
]
