from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from canonjson.api import serialize_to_string
from canonjson.generic import load

log = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        return _run(Path(args.path))
    except Exception as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


def _run(path: Path) -> int:
    log.debug("canonicalizing %s", path)
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise OSError(f"cannot open input file {str(path)!r}: {exc.strerror or exc}") from exc
    with handle:
        value = load(handle)
    print(serialize_to_string(value))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="canonjson",
        description="Print the canonical JSON form of a JSON file.",
    )
    parser.add_argument("path", help="JSON file to canonicalize.")
    return parser


__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
