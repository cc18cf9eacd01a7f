"""Identifier codec: generate, find, embed and strip timestamp identifiers.

An identifier is either ``YYYYMMDDTHHMMSS`` (optionally followed by ``==`` and
an alphanumeric signature) or a legacy run of 12 digits. Identifiers live in
entry names, joined to the rest of the name by ``--`` (``-`` is accepted on
read but never written):

    20240101T120000--notes.org        # head position
    notes--20240101T120000.org        # tail position (files)
    projects--20240101T120000         # tail position (directories)
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Literal

ID_FORMAT = "%Y%m%dT%H%M%S"
ID_PATTERN = r"(?:\d{8}T\d{6}(?:==[A-Za-z0-9]*)?|\d{12})"
SEPARATOR = "--"

ID_RE = re.compile(ID_PATTERN)
INLINE_ID_RE = re.compile(rf"id:({ID_PATTERN})")

_TAIL_RE = re.compile(rf"^(?P<stem>.*?)(?P<sep>--|-)(?P<id>{ID_PATTERN})(?P<ext>\..*)?$")
_HEAD_RE = re.compile(rf"^(?P<id>{ID_PATTERN})(?P<sep>--|-)(?P<stem>.*)$")

Position = Literal["head", "tail"]


@dataclass(frozen=True)
class NamedEntity:
    """An entry name split into identifier, separator, stem and extension."""

    stem: str
    identifier: str | None = None
    separator: str = ""
    extension: str = ""

    @property
    def bare_name(self) -> str:
        """The name with identifier and separator removed."""
        return self.stem + self.extension


def generate(now: datetime | None = None) -> str:
    """Format the current (or given) time as an identifier."""
    return (now or datetime.now()).strftime(ID_FORMAT)


def is_identifier(text: str | None) -> bool:
    return bool(text) and ID_RE.fullmatch(text) is not None


def extract(text: str, pattern: re.Pattern[str] | str | None = None) -> str | None:
    """Return the first identifier in ``text``, or None.

    ``pattern`` replaces the default identifier pattern, e.g. ``INLINE_ID_RE``
    for ``id:<identifier>`` markers. When the pattern has a capture group the
    first group is returned, otherwise the whole match.
    """
    if not text:
        return None
    regex = ID_RE if pattern is None else re.compile(pattern)
    match = regex.search(text)
    if not match:
        return None
    return match.group(1) if regex.groups else match.group(0)


def parse_name(name: str) -> NamedEntity:
    """Decompose ``name``; tail placement is tried first, then head, then anywhere.

    A placement only counts when it holds the name's identifier, i.e. the one
    ``extract`` reports.
    """
    ident = extract(name)

    match = _TAIL_RE.match(name)
    if match and match["id"] == ident:
        return NamedEntity(
            stem=match["stem"],
            identifier=match["id"],
            separator=match["sep"],
            extension=match["ext"] or "",
        )

    match = _HEAD_RE.match(name)
    if match and match["id"] == ident:
        stem, extension = os.path.splitext(match["stem"])
        return NamedEntity(
            stem=stem, identifier=match["id"], separator=match["sep"], extension=extension
        )

    match = ID_RE.search(name)
    if match:
        # Malformed placement: drop the identifier only, separators stay as they are.
        rest = name[: match.start()] + name[match.end() :]
        stem, extension = os.path.splitext(rest)
        return NamedEntity(stem=stem, identifier=match.group(0), extension=extension)

    stem, extension = os.path.splitext(name)
    return NamedEntity(stem=stem, extension=extension)


def embed(
    name: str,
    is_directory: bool = False,
    identifier: str | None = None,
    position: Position = "head",
) -> str:
    """Add an identifier to ``name`` unless it already carries one.

    ``identifier`` is used when it is itself a valid identifier; otherwise a
    fresh one is generated.
    """
    if extract(name):
        return name

    ident = identifier if is_identifier(identifier) else generate()
    return place(name, ident, is_directory, position)


def place(
    name: str, identifier: str, is_directory: bool = False, position: Position = "head"
) -> str:
    """Join ``identifier`` to ``name`` at ``position``, whatever ``name`` already holds."""
    if position == "tail":
        if is_directory:
            return f"{name}{SEPARATOR}{identifier}"
        stem, extension = os.path.splitext(name)
        return f"{stem}{SEPARATOR}{identifier}{extension}"
    return f"{identifier}{SEPARATOR}{name}"


def strip(name: str) -> str:
    """Remove the identifier and its separator from ``name``, keeping the extension."""
    if not extract(name):
        return name
    return parse_name(name).bare_name
