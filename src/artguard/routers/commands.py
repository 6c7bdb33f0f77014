"""Operator command API: submit text commands, read the chat transcript."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from .deps import get_console

router = APIRouter(prefix="/api/commands", tags=["commands"])


class CommandBody(BaseModel):
    text: str


@router.post("")
def submit_command(body: CommandBody, request: Request):
    """Interpret one command and apply its effects (threadpool, may join camera threads)."""
    console = get_console(request)
    response = console.handle_command(body.text)
    if response is None:
        raise HTTPException(400, "Command text is empty")
    return response.to_dict()


@router.get("/transcript")
async def get_transcript(request: Request, limit: int | None = None):
    console = get_console(request)
    return {"messages": console.transcript.messages(limit)}
