#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
DEFAULT_FIXTURES = REPO_ROOT / "tests" / "testdata"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from canonjson.conformance import (  # noqa: E402
    FixtureResult,
    verify_digest_fixtures,
    verify_error_fixtures,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Check canonical JSON output against a digest fixture corpus."
    )
    parser.add_argument("--fixtures", type=Path, default=DEFAULT_FIXTURES)
    parser.add_argument(
        "--errors",
        type=Path,
        default=None,
        help="Directory of inputs that must fail (default: <fixtures>/errors).",
    )
    args = parser.parse_args(argv)

    error_dir = args.errors if args.errors is not None else args.fixtures / "errors"
    results = verify_digest_fixtures(args.fixtures)
    if error_dir.is_dir():
        results += verify_error_fixtures(error_dir)

    failures = [result for result in results if not result.passed]
    for failure in failures:
        print(_describe(failure), file=sys.stderr)
    print(f"{len(results) - len(failures)}/{len(results)} fixtures passed")
    return 1 if failures else 0


def _describe(result: FixtureResult) -> str:
    if result.error is not None:
        return f"FAIL {result.path}: {result.error}"
    if result.expected is None:
        return f"FAIL {result.path}: canonicalized to {result.actual}"
    return f"FAIL {result.path}: expected {result.expected}, got {result.actual}"


if __name__ == "__main__":
    raise SystemExit(main())
