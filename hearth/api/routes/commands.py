"""Natural language command API routes."""

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from hearth.dispatcher import dispatcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/agent", tags=["agent"])

MISSING_COMMAND_ERROR = "A voice command is required."
INTERNAL_ERROR = "Sorry, I ran into an issue handling that request. Please try again."


class CommandRequest(BaseModel):
    # Left untyped so a non-string command gets the same 400 as a missing one.
    command: Any = None


@router.post("")
async def submit_command(req: CommandRequest) -> Any:
    """Submit a typed or voice-transcribed command to the dispatcher."""
    if not req.command or not isinstance(req.command, str):
        return JSONResponse(status_code=400, content={"error": MISSING_COMMAND_ERROR})

    try:
        result = dispatcher.process_command(req.command)
    except Exception as e:
        logger.error(f"Agent route error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})
    return result.model_dump(mode="json", by_alias=True)


@router.get("/history")
async def get_command_history() -> list[dict[str, Any]]:
    """Get recently processed commands."""
    return [record.model_dump(mode="json") for record in dispatcher.history]
