"""Store-time operations: give entries an identifier as they enter the store.

An entry keeps the identifier it already carries. Text documents may declare
one themselves, either as an ``id`` key in YAML front matter or as an inline
``id:<identifier>`` marker; that declared identifier is embedded in the name
instead of a freshly generated one.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import frontmatter

from tether.config import TetherConfig
from tether.identifier import INLINE_ID_RE, embed, extract, is_identifier, place, strip

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = {".md", ".markdown", ".org", ".txt"}


class EntityStore:
    """Embed identifiers in entry names and move entries into the store."""

    def __init__(self, config: TetherConfig) -> None:
        self.config = config

    # ── Identifier lookup ─────────────────────────────────────

    def identifier_of(self, path: Path) -> str | None:
        """Identifier from the name, else one declared inside a text document."""
        from_name = extract(path.name)
        if from_name:
            return from_name
        if path.is_file() and path.suffix.lower() in TEXT_SUFFIXES:
            return self._declared_identifier(path)
        return None

    def _declared_identifier(self, path: Path) -> str | None:
        try:
            post = frontmatter.load(str(path))
        except Exception:
            # Unparseable front matter: scan the raw text instead.
            logger.debug("Could not parse front matter in %s", path)
            return self._inline_identifier(path)

        declared = post.metadata.get("id")
        if declared is not None and is_identifier(str(declared)):
            return str(declared)
        return extract(post.content, INLINE_ID_RE)

    def _inline_identifier(self, path: Path) -> str | None:
        try:
            return extract(path.read_text(encoding="utf-8"), INLINE_ID_RE)
        except (OSError, UnicodeDecodeError):
            return None

    def link_for(self, path: Path) -> str:
        """Return an ``id:<identifier>`` marker for the entry, or "" if it has none."""
        identifier = self.identifier_of(path)
        return f"id:{identifier}" if identifier else ""

    # ── Store / rename ────────────────────────────────────────

    def _named(self, name: str, is_directory: bool, identifier: str | None = None) -> str:
        return embed(
            name,
            is_directory=is_directory,
            identifier=identifier,
            position=self.config.id_position,
        )

    def store(self, path: Path, dest: Path | None = None, copy: bool = False) -> Path:
        """Move (or copy) ``path`` into the store under an identified name."""
        if not path.exists():
            raise FileNotFoundError(path)

        target_dir = (dest or self.config.default_store_dir).expanduser()
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / self._named(path.name, path.is_dir(), self.identifier_of(path))
        if target.exists():
            raise FileExistsError(target)

        if copy:
            if path.is_dir():
                shutil.copytree(path, target)
            else:
                shutil.copy2(path, target)
        else:
            shutil.move(str(path), str(target))
        logger.info("Stored %s -> %s", path, target)
        return target

    def rename(self, path: Path, new_name: str) -> Path:
        """Rename ``path`` in place, keeping its identifier."""
        if not path.exists():
            raise FileNotFoundError(path)

        identifier = self.identifier_of(path)
        name = strip(new_name)
        if identifier and extract(name) not in (None, identifier):
            # A digit run left in the title reads as an identifier; keep the entry's own.
            name = place(name, identifier, path.is_dir(), self.config.id_position)
        else:
            name = self._named(name, path.is_dir(), identifier)
        target = path.with_name(name)
        if target == path:
            return path
        if target.exists():
            raise FileExistsError(target)

        path.rename(target)
        logger.info("Renamed %s -> %s", path.name, target.name)
        return target
