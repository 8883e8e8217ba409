"""Convert generic JSON values into the canonical value model.

Traversal keeps its own stack of open containers instead of recursing, so
deeply nested input cannot exhaust the interpreter stack. The first value
without an exact canonical form aborts the whole conversion.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterator, Mapping
from decimal import Decimal

from canonjson.errors import (
    MaxDepthExceededError,
    UnserializableInputError,
    UnsupportedValueError,
)
from canonjson.generic import to_generic
from canonjson.policy import CanonicalPolicy, resolve_policy
from canonjson.values import (
    INT64_MAX,
    INT64_MIN,
    NULL,
    CanonicalArray,
    CanonicalBool,
    CanonicalInteger,
    CanonicalObject,
    CanonicalString,
    CanonicalValue,
)

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class _OpenContainer:
    __slots__ = ("source_id", "path", "keys", "converted", "_children", "_is_object", "_seen")

    def __init__(
        self,
        source: list[object] | tuple[object, ...] | Mapping[object, object],
        path: str,
    ) -> None:
        self.source_id = id(source)
        self.path = path
        self.keys: list[str] = []
        self._seen: set[str] = set()
        self.converted: list[CanonicalValue] = []
        self._is_object = isinstance(source, Mapping)
        self._children: Iterator[tuple[object, object]] = (
            iter(source.items()) if isinstance(source, Mapping) else enumerate(source)
        )

    def next_child(self) -> tuple[object, str] | None:
        try:
            key, child = next(self._children)
        except StopIteration:
            return None
        if not self._is_object:
            return child, f"{self.path}[{key}]"
        if not isinstance(key, str):
            raise UnserializableInputError(
                f"Object key {key!r} of type {type(key).__name__} is not a string",
                path=self.path,
            )
        child_path = _child_path(self.path, key)
        _check_text(key, child_path)
        text = str.__str__(key)
        if text in self._seen:
            # Distinct str subclass keys can share the same text.
            raise UnserializableInputError(f"Duplicate object key {text!r}", path=self.path)
        self._seen.add(text)
        self.keys.append(text)
        return child, child_path

    def finish(self) -> CanonicalValue:
        if self._is_object:
            return CanonicalObject.from_pairs(zip(self.keys, self.converted, strict=True))
        return CanonicalArray(items=tuple(self.converted))


def convert(value: object, *, policy: CanonicalPolicy | None = None) -> CanonicalValue:
    """Convert a generic JSON value into a canonical value.

    Raises ``UnsupportedValueError`` for numbers that are not exact signed
    64-bit integers and for text that cannot be encoded as UTF-8,
    ``UnserializableInputError`` for inputs outside the JSON model or
    containers that contain themselves, and ``MaxDepthExceededError`` when
    ``policy.max_depth`` is exceeded.
    """
    max_depth = resolve_policy(policy).max_depth
    stack: list[_OpenContainer] = []
    active: set[int] = set()
    item: object = value
    path = "$"
    while True:
        item = to_generic(item)
        node: CanonicalValue | None
        if isinstance(item, (list, tuple, Mapping)):
            if max_depth is not None and len(stack) >= max_depth:
                raise MaxDepthExceededError(max_depth=max_depth, path=path)
            if id(item) in active:
                raise UnserializableInputError("Circular reference", path=path)
            active.add(id(item))
            stack.append(_OpenContainer(item, path))
            node = None
        else:
            node = _convert_scalar(item, path)

        while True:
            if not stack:
                assert node is not None
                return node
            container = stack[-1]
            if node is not None:
                container.converted.append(node)
            upcoming = container.next_child()
            if upcoming is not None:
                item, path = upcoming
                break
            stack.pop()
            active.discard(container.source_id)
            node = container.finish()


def _convert_scalar(item: object, path: str) -> CanonicalValue:
    if item is None:
        return NULL
    if isinstance(item, bool):
        return CanonicalBool(item)
    if isinstance(item, int):
        number = int(item)
        if not INT64_MIN <= number <= INT64_MAX:
            raise UnsupportedValueError(
                "Integer outside the signed 64-bit range",
                rendering=_render_int(number),
                path=path,
            )
        return CanonicalInteger(number)
    if isinstance(item, float):
        raise UnsupportedValueError(
            "Unsupported number in canonical JSON", rendering=repr(item), path=path
        )
    if isinstance(item, Decimal):
        raise UnsupportedValueError(
            "Unsupported number in canonical JSON", rendering=str(item), path=path
        )
    if isinstance(item, str):
        _check_text(item, path)
        return CanonicalString(str.__str__(item))
    raise UnserializableInputError(
        f"Value of type {type(item).__name__} is not representable as JSON",
        path=path,
    )


def _check_text(text: str, path: str) -> None:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise UnsupportedValueError(
            "String is not valid Unicode text", rendering=json.dumps(text), path=path
        ) from exc


def _render_int(number: int) -> str:
    try:
        return str(number)
    except ValueError:
        # Past the interpreter's integer-to-string digit limit.
        return f"<{number.bit_length()}-bit integer>"


def _child_path(parent: str, key: str) -> str:
    if _IDENTIFIER.fullmatch(key):
        return f"{parent}.{key}"
    return f"{parent}[{json.dumps(key, ensure_ascii=True)}]"


__all__ = ["convert"]
