"""Canonical value model.

Every variant is a frozen, slotted dataclass over immutable members, so a tree
cannot change after conversion and never aliases the caller's containers.
Object entries are held in ascending order of their UTF-8 encoded keys.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final, TypeAlias

from canonjson.errors import UnserializableInputError, UnsupportedValueError

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


@dataclass(frozen=True, slots=True)
class CanonicalNull:
    pass


@dataclass(frozen=True, slots=True)
class CanonicalBool:
    value: bool


@dataclass(frozen=True, slots=True)
class CanonicalInteger:
    value: int

    def __post_init__(self) -> None:
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise UnsupportedValueError(
                "Integer outside the signed 64-bit range",
                rendering=str(self.value),
            )


@dataclass(frozen=True, slots=True)
class CanonicalString:
    value: str


@dataclass(frozen=True, slots=True)
class CanonicalArray:
    items: tuple[CanonicalValue, ...] = ()


@dataclass(frozen=True, slots=True)
class CanonicalObject:
    entries: tuple[tuple[str, CanonicalValue], ...] = ()

    def __post_init__(self) -> None:
        try:
            ordered = tuple(sorted(self.entries, key=lambda pair: key_sort_bytes(pair[0])))
        except UnicodeEncodeError as exc:
            raise UnsupportedValueError(
                "Object key is not valid Unicode text", rendering=repr(exc.object)
            ) from exc
        for previous, current in zip(ordered, ordered[1:]):
            if previous[0] == current[0]:
                raise UnserializableInputError(f"Duplicate object key {current[0]!r}")
        object.__setattr__(self, "entries", ordered)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, CanonicalValue]]) -> CanonicalObject:
        return cls(entries=tuple(pairs))

    def keys(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.entries)


CanonicalValue: TypeAlias = (
    CanonicalNull
    | CanonicalBool
    | CanonicalInteger
    | CanonicalString
    | CanonicalArray
    | CanonicalObject
)

NULL: Final[CanonicalNull] = CanonicalNull()


def key_sort_bytes(key: str) -> bytes:
    # Byte-wise order of UTF-8 equals code point order, but not UTF-16 order.
    return key.encode("utf-8")


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "NULL",
    "CanonicalArray",
    "CanonicalBool",
    "CanonicalInteger",
    "CanonicalNull",
    "CanonicalObject",
    "CanonicalString",
    "CanonicalValue",
    "key_sort_bytes",
]
