"""Generic JSON values: the unrestricted input side of canonicalization.

A generic value is what ``json.loads`` produces, plus ``Decimal`` for numeric
literals that cannot be an exact int64 (so diagnostics keep the literal as
written), tuples, read-only mappings and pydantic models.
"""

from __future__ import annotations

import json
from decimal import Decimal
from functools import partial
from typing import IO, Any, NoReturn

from pydantic import BaseModel

from canonjson.errors import CanonicalJSONError, DuplicateKeyError, InvalidJSONError
from canonjson.policy import CanonicalPolicy, DuplicateKeyMode, resolve_policy

_MAX_INT64_LITERAL = len(str(-(2**63)))


def loads(text: str | bytes | bytearray, *, policy: CanonicalPolicy | None = None) -> Any:
    """Parse JSON text into a generic value.

    Integers stay exact. Fractional and exponent literals, ``-0`` and integer
    literals too long for 64 bits become ``Decimal``, and ``NaN``/``Infinity``
    are refused. Duplicate keys follow ``policy.duplicate_keys``.
    """
    resolved = resolve_policy(policy)
    try:
        return json.loads(
            text,
            parse_float=Decimal,
            parse_int=_parse_int,
            parse_constant=_reject_constant,
            object_pairs_hook=partial(_build_object, duplicate_keys=resolved.duplicate_keys),
        )
    except CanonicalJSONError:
        raise
    except RecursionError as exc:
        raise InvalidJSONError("JSON text is nested too deeply to parse.") from exc
    except ValueError as exc:
        # JSONDecodeError and undecodable bytes.
        raise InvalidJSONError(f"Invalid JSON: {exc}") from exc


def load(fp: IO[str] | IO[bytes], *, policy: CanonicalPolicy | None = None) -> Any:
    return loads(fp.read(), policy=policy)


def to_generic(value: object) -> object:
    """Unwrap inputs that have their own JSON form (pydantic models)."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


def _build_object(
    pairs: list[tuple[str, Any]], *, duplicate_keys: DuplicateKeyMode
) -> dict[str, Any]:
    if duplicate_keys == "last_wins":
        return dict(pairs)
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise DuplicateKeyError(key)
        result[key] = value
    return result


def _parse_int(literal: str) -> int | Decimal:
    # "-0" has no distinct integer form, and anything longer than
    # "-9223372036854775808" cannot be an int64.
    if literal == "-0" or len(literal) > _MAX_INT64_LITERAL:
        return Decimal(literal)
    return int(literal)


def _reject_constant(name: str) -> NoReturn:
    raise InvalidJSONError(f"Non-finite number {name} is not valid JSON.")


__all__ = ["load", "loads", "to_generic"]
