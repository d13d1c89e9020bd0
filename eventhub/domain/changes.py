"""Explicit dirty-field tracking for write candidates."""

from dataclasses import dataclass, fields as dataclass_fields
from typing import Any, Self

# System-managed fields never count as a change.
_UNTRACKED = frozenset({"id", "created_at", "updated_at"})


@dataclass(frozen=True)
class ChangeSet:
    """Which fields a write sets or modifies.

    A new record touches every field. An update touches only the fields whose
    value differs from the stored version.
    """

    is_new: bool
    fields: frozenset[str] = frozenset()

    @classmethod
    def for_new(cls) -> Self:
        return cls(is_new=True)

    @classmethod
    def between(cls, before: Any, after: Any) -> Self:
        """Diff two instances of the same domain dataclass."""
        if type(before) is not type(after):
            raise TypeError(
                f"Cannot diff {type(before).__name__} against {type(after).__name__}"
            )
        changed = frozenset(
            f.name
            for f in dataclass_fields(before)
            if f.name not in _UNTRACKED
            and getattr(before, f.name) != getattr(after, f.name)
        )
        return cls(is_new=False, fields=changed)

    def touches(self, name: str) -> bool:
        return self.is_new or name in self.fields
