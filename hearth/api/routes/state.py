"""Household state API routes."""

from typing import Any

from fastapi import APIRouter

from hearth.dispatcher import dispatcher

router = APIRouter(prefix="/state", tags=["state"])


@router.get("")
async def get_state() -> dict[str, Any]:
    """Get a snapshot of the household state."""
    return dispatcher.store.snapshot().model_dump(mode="json", by_alias=True)
