"""Check canonicalization against a fixture corpus.

Digest fixtures are JSON files named ``<sha256-hex>.json``: the canonical
form of the parsed content plus a trailing newline must hash to the file
stem. Error fixtures parse as JSON but must fail canonicalization.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from canonjson.api import serialize_to_string, sha256_hex
from canonjson.errors import CanonicalJSONError
from canonjson.generic import loads
from canonjson.policy import CanonicalPolicy


@dataclass(frozen=True, slots=True)
class FixtureResult:
    path: Path
    passed: bool
    expected: str | None = None
    actual: str | None = None
    error: str | None = None


def verify_digest_fixtures(
    directory: Path | str, *, policy: CanonicalPolicy | None = None
) -> list[FixtureResult]:
    results: list[FixtureResult] = []
    for path in _fixture_files(directory):
        expected = path.stem
        try:
            parsed = loads(path.read_bytes(), policy=policy)
            canonical = serialize_to_string(parsed, policy=policy)
        except CanonicalJSONError as exc:
            results.append(
                FixtureResult(path=path, passed=False, expected=expected, error=str(exc))
            )
            continue
        actual = sha256_hex(canonical + "\n")
        results.append(
            FixtureResult(path=path, passed=actual == expected, expected=expected, actual=actual)
        )
    return results


def verify_error_fixtures(
    directory: Path | str, *, policy: CanonicalPolicy | None = None
) -> list[FixtureResult]:
    results: list[FixtureResult] = []
    for path in _fixture_files(directory):
        try:
            parsed = loads(path.read_bytes(), policy=policy)
        except CanonicalJSONError as exc:
            results.append(
                FixtureResult(path=path, passed=False, error=f"fixture is not valid JSON: {exc}")
            )
            continue
        try:
            canonical = serialize_to_string(parsed, policy=policy)
        except CanonicalJSONError as exc:
            results.append(FixtureResult(path=path, passed=True, error=str(exc)))
            continue
        results.append(FixtureResult(path=path, passed=False, actual=canonical))
    return results


def _fixture_files(directory: Path | str) -> list[Path]:
    root = Path(directory)
    if not root.is_dir():
        raise NotADirectoryError(f"Fixture directory does not exist: {root}")
    return sorted(path for path in root.iterdir() if path.is_file())


__all__ = ["FixtureResult", "verify_digest_fixtures", "verify_error_fixtures"]
