from fastapi import APIRouter, Depends

from app.domain.ports import PushTransport
from app.interfaces.api.dependencies import get_push_transport

router = APIRouter(tags=["health"])


@router.get("/health")
def health(transport: PushTransport = Depends(get_push_transport)) -> dict[str, str]:
    """Report liveness and the active push transport."""

    return {"status": "ok", "push_transport": transport.name}
