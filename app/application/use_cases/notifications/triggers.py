"""Registration table binding document path patterns to classifiers."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass

from app.domain.entities import ChangeEvent, EventKind, NotificationIntent

Classifier = Callable[[ChangeEvent, Mapping[str, str]], NotificationIntent | None]

_PLACEHOLDER = re.compile(r"\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)\}")


def compile_path_pattern(pattern: str) -> re.Pattern[str]:
    """Translate ``orders/{orderId}`` into a regex matching one segment per placeholder."""

    normalized = pattern.strip("/")
    if not normalized:
        raise ValueError("Path pattern must not be empty")

    parts: list[str] = []
    position = 0
    for match in _PLACEHOLDER.finditer(normalized):
        parts.append(re.escape(normalized[position : match.start()]))
        parts.append(f"(?P<{match.group('name')}>[^/]+)")
        position = match.end()
    parts.append(re.escape(normalized[position:]))
    return re.compile("^" + "".join(parts) + "$")


@dataclass(frozen=True)
class Trigger:
    event_kind: EventKind
    pattern: str
    regex: re.Pattern[str]
    handler: Classifier

    def match(self, event: ChangeEvent) -> dict[str, str] | None:
        if event.event_kind is not self.event_kind:
            return None
        found = self.regex.match(event.document_path)
        if found is None:
            return None
        return found.groupdict()


class TriggerTable:
    """Ordered set of ``(event kind, path pattern) -> classifier`` bindings."""

    def __init__(self) -> None:
        self._triggers: list[Trigger] = []

    def on_document_created(self, pattern: str, handler: Classifier) -> Classifier:
        return self._register(EventKind.CREATED, pattern, handler)

    def on_document_updated(self, pattern: str, handler: Classifier) -> Classifier:
        return self._register(EventKind.UPDATED, pattern, handler)

    def match(self, event: ChangeEvent) -> Iterator[tuple[Classifier, dict[str, str]]]:
        """Yield handlers bound to ``event`` with the captured path parameters."""

        for trigger in self._triggers:
            params = trigger.match(event)
            if params is not None:
                yield trigger.handler, params

    def __len__(self) -> int:
        return len(self._triggers)

    def _register(self, kind: EventKind, pattern: str, handler: Classifier) -> Classifier:
        self._triggers.append(
            Trigger(
                event_kind=kind,
                pattern=pattern.strip("/"),
                regex=compile_path_pattern(pattern),
                handler=handler,
            )
        )
        return handler


__all__ = ["Classifier", "Trigger", "TriggerTable", "compile_path_pattern"]
