"""Aggregate application use cases."""

from .notifications import handle_change_event, sweep_notifications

__all__ = [
    "handle_change_event",
    "sweep_notifications",
]
