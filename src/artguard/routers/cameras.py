"""Camera API: display layout, tracker snapshots, floor maps, effects."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from camsim.commands.effects import Effects

from .deps import get_console

router = APIRouter(prefix="/api/cameras", tags=["cameras"])


class EffectsBody(BaseModel):
    focusCameraId: Optional[int] = None
    showAllCameras: bool = False
    emergency: Optional[str] = None
    help: bool = False


@router.get("")
async def get_display(request: Request):
    """Current layout: mode, focused camera, visible views."""
    console = get_console(request)
    return console.display.state()


@router.get("/{camera_id}/trackers")
async def get_trackers(camera_id: int, request: Request):
    """Tracker snapshots for a camera that is currently simulated."""
    console = get_console(request)
    sim = console.display.get_simulation(camera_id)
    if sim is None:
        raise HTTPException(404, f"Camera {camera_id} is not being simulated")
    snapshot = sim.snapshot()
    return {
        "camera_id": camera_id,
        "floor_map": sim.floor_map.to_dict(),
        "trackers": [t.to_dict() for t in snapshot],
        "stats": sim.stats(),
    }


@router.get("/{camera_id}/floormap")
async def get_floor_map(camera_id: int, request: Request):
    """Base-scale floor map for a camera."""
    console = get_console(request)
    floor_map = console.display.base_floor_map(camera_id)
    if floor_map is None:
        raise HTTPException(404, f"No map data for camera {camera_id}")
    return floor_map.to_dict()


@router.post("/effects")
def apply_effects(body: EffectsBody, request: Request):
    """Apply focus/show-all effects directly, bypassing the interpreter.

    Plain def: a layout change joins the old camera threads, so this runs
    in the threadpool instead of on the event loop.
    """
    console = get_console(request)
    effects = Effects.from_dict(body.model_dump(exclude_unset=True))
    changed = console.display.apply_effects(effects)
    return {"changed": changed, **console.display.state()}
