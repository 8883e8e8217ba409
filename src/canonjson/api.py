from __future__ import annotations

import hashlib
import logging

from canonjson.converter import convert
from canonjson.generic import loads
from canonjson.policy import CanonicalPolicy
from canonjson.writer import BinarySink, write, write_to

log = logging.getLogger(__name__)


def serialize_to_sink(
    value: object, sink: BinarySink, *, policy: CanonicalPolicy | None = None
) -> None:
    """Write the canonical form of ``value`` to a binary sink.

    Nothing is written when conversion fails. Sink failures surface as
    ``SinkWriteError``.
    """
    write_to(convert(value, policy=policy), sink)


def serialize_to_bytes(value: object, *, policy: CanonicalPolicy | None = None) -> bytes:
    canonical = convert(value, policy=policy)
    data = write(canonical)
    log.debug("canonicalized %s value into %d bytes", type(value).__name__, len(data))
    return data


def serialize_to_string(value: object, *, policy: CanonicalPolicy | None = None) -> str:
    """Serialize ``value`` as canonical JSON text.

    The bytes are decoded with validation rather than trusted to be UTF-8.
    """
    return serialize_to_bytes(value, policy=policy).decode("utf-8")


def canonicalize_json_text(
    text: str | bytes | bytearray, *, policy: CanonicalPolicy | None = None
) -> str:
    """Parse JSON text and return its canonical form.

    Raises ``InvalidJSONError`` for malformed text or duplicate keys (unless the
    policy keeps the last occurrence) and ``UnsupportedValueError`` for
    numbers that are not exact 64-bit integers.
    """
    return serialize_to_string(loads(text, policy=policy), policy=policy)


def canonical_sha256(value: object, *, policy: CanonicalPolicy | None = None) -> str:
    return sha256_hex(serialize_to_bytes(value, policy=policy))


def sha256_hex(data: bytes | str) -> str:
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


__all__ = [
    "canonical_sha256",
    "canonicalize_json_text",
    "serialize_to_bytes",
    "serialize_to_sink",
    "serialize_to_string",
    "sha256_hex",
]
