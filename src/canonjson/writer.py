"""Serialize canonical values to their exact byte form.

Output has no insignificant whitespace and no trailing newline. Strings use
standard JSON escaping with ASCII escaping disabled: quote, backslash and
control characters are escaped, everything else is raw UTF-8.
"""

from __future__ import annotations

import io
import json
from collections.abc import Iterator
from typing import Protocol

from canonjson.errors import CanonicalWriteError, SinkWriteError
from canonjson.values import (
    CanonicalArray,
    CanonicalBool,
    CanonicalInteger,
    CanonicalNull,
    CanonicalObject,
    CanonicalString,
    CanonicalValue,
)


class BinarySink(Protocol):
    def write(self, data: bytes, /) -> int | None: ...


def write(value: CanonicalValue) -> bytes:
    text = "".join(iter_tokens(value))
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise CanonicalWriteError(f"Cannot encode canonical output as UTF-8: {exc}") from exc


def write_to(value: CanonicalValue, sink: BinarySink) -> None:
    """Write the canonical bytes of ``value`` to a binary sink.

    The whole document is rendered before the first write, so a formatting
    failure never leaves partial output in the sink.
    """
    write_all(sink, write(value))


def write_all(sink: BinarySink, data: bytes) -> None:
    view = memoryview(data)
    try:
        while view:
            written = sink.write(view)
            if written is None:
                # A raw sink returns None when it would block; nothing was written.
                if isinstance(sink, io.RawIOBase):
                    raise SinkWriteError("Sink would block; no bytes were written.")
                # Other sinks that do not report a count take the whole buffer.
                return
            if written <= 0:
                raise SinkWriteError("Sink accepted no bytes.")
            view = view[written:]
    except SinkWriteError:
        raise
    except OSError as exc:
        raise SinkWriteError(f"Cannot write canonical JSON: {exc}") from exc


def iter_tokens(value: CanonicalValue) -> Iterator[str]:
    """Yield the canonical text of ``value`` piece by piece, without recursion."""
    pending: list[CanonicalValue | str] = [value]
    while pending:
        current = pending.pop()
        if isinstance(current, str):
            yield current
        elif isinstance(current, CanonicalNull):
            yield "null"
        elif isinstance(current, CanonicalBool):
            yield "true" if current.value else "false"
        elif isinstance(current, CanonicalInteger):
            yield _format_integer(current.value)
        elif isinstance(current, CanonicalString):
            yield encode_string(current.value)
        elif isinstance(current, CanonicalArray):
            pending.append("]")
            for index in range(len(current.items) - 1, -1, -1):
                pending.append(current.items[index])
                if index:
                    pending.append(",")
            pending.append("[")
        elif isinstance(current, CanonicalObject):
            pending.append("}")
            for index in range(len(current.entries) - 1, -1, -1):
                key, item = current.entries[index]
                pending.append(item)
                pending.append(encode_string(key) + ":")
                if index:
                    pending.append(",")
            pending.append("{")
        else:
            raise CanonicalWriteError(
                f"Cannot write {type(current).__name__}; expected a canonical value."
            )


def encode_string(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _format_integer(number: int) -> str:
    # bool is an int subclass; CanonicalBool is handled before this point.
    if type(number) is not int:
        raise CanonicalWriteError(f"Cannot write integer of type {type(number).__name__}.")
    return str(number)


__all__ = ["BinarySink", "encode_string", "iter_tokens", "write", "write_all", "write_to"]
