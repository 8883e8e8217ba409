from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DuplicateKeyMode = Literal["reject", "last_wins"]


@dataclass(frozen=True, slots=True)
class CanonicalPolicy:
    duplicate_keys: DuplicateKeyMode = "reject"
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.duplicate_keys not in ("reject", "last_wins"):
            raise ValueError(
                f"Unknown duplicate_keys mode {self.duplicate_keys!r}. "
                "Expected 'reject' or 'last_wins'."
            )
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be a positive integer or None.")

    @classmethod
    def strict(cls) -> "CanonicalPolicy":
        return cls()

    @classmethod
    def lenient(cls) -> "CanonicalPolicy":
        return cls(duplicate_keys="last_wins")


DEFAULT_POLICY = CanonicalPolicy()


def resolve_policy(policy: CanonicalPolicy | None) -> CanonicalPolicy:
    return DEFAULT_POLICY if policy is None else policy


__all__ = ["CanonicalPolicy", "DEFAULT_POLICY", "DuplicateKeyMode", "resolve_policy"]
