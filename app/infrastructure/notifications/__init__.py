"""Push delivery helpers for the infrastructure layer."""

from .push import (
    MAX_MULTICAST_BATCH_SIZE,
    FirebasePushTransport,
    LoggingPushTransport,
    build_push_transport,
)

__all__ = [
    "FirebasePushTransport",
    "LoggingPushTransport",
    "MAX_MULTICAST_BATCH_SIZE",
    "build_push_transport",
]
