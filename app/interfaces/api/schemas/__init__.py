from .events import ChangeEventRequest, ChangeEventResponse, SendReportRead
from .notification import NotificationRecordRead, SweepRequest, SweepResponse

__all__ = [
    "ChangeEventRequest",
    "ChangeEventResponse",
    "NotificationRecordRead",
    "SendReportRead",
    "SweepRequest",
    "SweepResponse",
]
