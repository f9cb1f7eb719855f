"""Domain entity describing a change on a document in the shopping store."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class EventKind(str, Enum):
    """Kind of write that produced a :class:`ChangeEvent`."""

    CREATED = "created"
    UPDATED = "updated"


def _freeze(state: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    if state is None:
        return None
    return MappingProxyType(dict(state))


@dataclass(frozen=True)
class ChangeEvent:
    """Before/after snapshot of a single document write.

    ``before_state`` is ``None`` for creations. Both snapshots are exposed as
    read-only mappings so an event can be routed more than once without being
    altered.
    """

    document_path: str
    after_state: Mapping[str, Any]
    event_kind: EventKind
    before_state: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "document_path", self.document_path.strip("/"))
        object.__setattr__(self, "after_state", _freeze(self.after_state) or MappingProxyType({}))
        object.__setattr__(self, "before_state", _freeze(self.before_state))

    @classmethod
    def created(cls, document_path: str, data: Mapping[str, Any]) -> "ChangeEvent":
        return cls(document_path=document_path, after_state=data, event_kind=EventKind.CREATED)

    @classmethod
    def updated(
        cls,
        document_path: str,
        before: Mapping[str, Any] | None,
        after: Mapping[str, Any],
    ) -> "ChangeEvent":
        return cls(
            document_path=document_path,
            after_state=after,
            before_state=before,
            event_kind=EventKind.UPDATED,
        )

    def before(self, key: str) -> Any:
        """Return ``key`` from the previous snapshot, or ``None``."""

        if self.before_state is None:
            return None
        return self.before_state.get(key)

    def after(self, key: str) -> Any:
        """Return ``key`` from the new snapshot, or ``None``."""

        return self.after_state.get(key)


__all__ = ["ChangeEvent", "EventKind"]
