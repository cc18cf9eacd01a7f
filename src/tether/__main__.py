"""Entry point: python -m tether <command>

- resolve PATH...   Print the current location of each (possibly stale) path
- id                Print a fresh identifier
- embed / strip     Add or remove an identifier in a name
- extract TEXT      Print the first identifier found in TEXT
- store PATH...     Move entries into the store under identified names
- rename PATH NAME  Rename an entry, keeping its identifier
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tether import identifier
from tether.config import TetherConfig, load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _run_resolve(config: TetherConfig, args: argparse.Namespace) -> int:
    from tether.core import Tether

    tether = Tether(config)
    status = 0
    for raw in args.paths:
        result = tether.resolve(raw)
        if result.found:
            print(result.path)
        else:
            print(f"not found: {raw}", file=sys.stderr)
            status = 1
    return status


def _run_store(config: TetherConfig, args: argparse.Namespace) -> int:
    from tether.storage import EntityStore

    store = EntityStore(config)
    dest = Path(args.dest) if args.dest else None
    for raw in args.paths:
        print(store.store(Path(raw), dest=dest, copy=args.copy))
    return 0


def _run_rename(config: TetherConfig, args: argparse.Namespace) -> int:
    from tether.storage import EntityStore

    print(EntityStore(config).rename(Path(args.path), args.new_name))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tether", description="Identifier-based links that survive renames."
    )
    parser.add_argument("--config", help="Path to tether.toml")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("resolve", help="Resolve stale paths")
    p.add_argument("paths", nargs="+")

    sub.add_parser("id", help="Print a fresh identifier")

    p = sub.add_parser("embed", help="Add an identifier to a name")
    p.add_argument("name")
    p.add_argument("--dir", action="store_true", help="Treat NAME as a directory")
    p.add_argument("--id", dest="explicit_id", help="Identifier to embed")

    p = sub.add_parser("strip", help="Remove the identifier from a name")
    p.add_argument("name")

    p = sub.add_parser("extract", help="Print the first identifier in TEXT")
    p.add_argument("text")
    p.add_argument("--inline", action="store_true", help="Only match id:<identifier> markers")

    p = sub.add_parser("store", help="Move entries into the store")
    p.add_argument("paths", nargs="+")
    p.add_argument("--dest", help="Store directory (default: first store dir)")
    p.add_argument("--copy", action="store_true", help="Copy instead of moving")

    p = sub.add_parser("rename", help="Rename an entry, keeping its identifier")
    p.add_argument("path")
    p.add_argument("new_name")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    config = load_config(Path(args.config) if args.config else None)
    _setup_logging(config.log_level)

    if args.command == "resolve":
        return _run_resolve(config, args)
    if args.command == "store":
        return _run_store(config, args)
    if args.command == "rename":
        return _run_rename(config, args)

    if args.command == "id":
        print(identifier.generate())
    elif args.command == "embed":
        print(
            identifier.embed(
                args.name,
                is_directory=args.dir,
                identifier=args.explicit_id,
                position=config.id_position,
            )
        )
    elif args.command == "strip":
        print(identifier.strip(args.name))
    elif args.command == "extract":
        pattern = identifier.INLINE_ID_RE if args.inline else None
        found = identifier.extract(args.text, pattern)
        if not found:
            return 1
        print(found)
    return 0


if __name__ == "__main__":
    sys.exit(main())
