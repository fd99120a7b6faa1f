"""Intent handler status API routes."""

from typing import Any

from fastapi import APIRouter, HTTPException

from hearth.dispatcher import dispatcher

router = APIRouter(prefix="/handlers", tags=["handlers"])


@router.get("")
async def list_handlers() -> list[dict[str, Any]]:
    """Get status of all handlers, in dispatch order."""
    return dispatcher.get_all_handler_info()


@router.get("/{handler_id}")
async def get_handler(handler_id: str) -> dict[str, Any]:
    """Get status of a specific handler."""
    for info in dispatcher.get_all_handler_info():
        if info["handler_id"] == handler_id:
            return info
    raise HTTPException(status_code=404, detail=f"Handler not found: {handler_id}")
