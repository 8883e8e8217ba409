from __future__ import annotations


class CanonicalJSONError(Exception):
    pass


class UnsupportedValueError(CanonicalJSONError, ValueError):
    """A value has no unique canonical representation."""

    def __init__(self, message: str, *, rendering: str, path: str = "$") -> None:
        super().__init__(f"{message} at {path}: {rendering}")
        self.rendering = rendering
        self.path = path


class UnserializableInputError(CanonicalJSONError, TypeError):
    def __init__(self, message: str, *, path: str = "$") -> None:
        super().__init__(f"{message} at {path}")
        self.path = path


class MaxDepthExceededError(CanonicalJSONError, ValueError):
    def __init__(self, *, max_depth: int, path: str) -> None:
        super().__init__(f"Nesting deeper than {max_depth} levels at {path}")
        self.max_depth = max_depth
        self.path = path


class InvalidJSONError(CanonicalJSONError, ValueError):
    pass


class DuplicateKeyError(InvalidJSONError):
    def __init__(self, key: str) -> None:
        super().__init__(
            f"Duplicate object key {key!r}. Canonical JSON requires unique keys; "
            "use CanonicalPolicy.lenient() to keep the last occurrence."
        )
        self.key = key


class SinkWriteError(CanonicalJSONError, OSError):
    pass


class CanonicalWriteError(CanonicalJSONError, RuntimeError):
    pass


__all__ = [
    "CanonicalJSONError",
    "CanonicalWriteError",
    "DuplicateKeyError",
    "InvalidJSONError",
    "MaxDepthExceededError",
    "SinkWriteError",
    "UnserializableInputError",
    "UnsupportedValueError",
]
