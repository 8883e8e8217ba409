from canonjson.api import (
    canonical_sha256,
    canonicalize_json_text,
    serialize_to_bytes,
    serialize_to_sink,
    serialize_to_string,
    sha256_hex,
)
from canonjson.converter import convert
from canonjson.errors import (
    CanonicalJSONError,
    CanonicalWriteError,
    DuplicateKeyError,
    InvalidJSONError,
    MaxDepthExceededError,
    SinkWriteError,
    UnserializableInputError,
    UnsupportedValueError,
)
from canonjson.generic import load, loads
from canonjson.policy import CanonicalPolicy
from canonjson.values import (
    CanonicalArray,
    CanonicalBool,
    CanonicalInteger,
    CanonicalNull,
    CanonicalObject,
    CanonicalString,
    CanonicalValue,
)
from canonjson.writer import write

__all__ = [
    "CanonicalArray",
    "CanonicalBool",
    "CanonicalInteger",
    "CanonicalJSONError",
    "CanonicalNull",
    "CanonicalObject",
    "CanonicalPolicy",
    "CanonicalString",
    "CanonicalValue",
    "CanonicalWriteError",
    "DuplicateKeyError",
    "InvalidJSONError",
    "MaxDepthExceededError",
    "SinkWriteError",
    "UnserializableInputError",
    "UnsupportedValueError",
    "canonical_sha256",
    "canonicalize_json_text",
    "convert",
    "load",
    "loads",
    "serialize_to_bytes",
    "serialize_to_sink",
    "serialize_to_string",
    "sha256_hex",
    "write",
]
