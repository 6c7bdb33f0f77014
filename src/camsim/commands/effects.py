"""Effects: the side effects an operator command asks the console to apply.

Wire shape (camelCase, only present keys are emitted):

    {"focusCameraId": 3}                         focus camera 3
    {"focusCameraId": null}                      clear focus
    {"showAllCameras": true, "focusCameraId": null}
    {"emergency": "lockdown" | "police"}
    {"help": true}

"focus not mentioned" and "focus cleared" are different requests, so the
dataclass tracks ``focus_requested`` separately from the id itself.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Effects:
    focus_requested: bool = False
    focus_camera_id: int | None = None
    show_all_cameras: bool = False
    emergency: str | None = None
    help: bool = False

    @classmethod
    def focus(cls, camera_id: int | None) -> Effects:
        return cls(focus_requested=True, focus_camera_id=camera_id)

    @classmethod
    def show_all(cls) -> Effects:
        return cls(focus_requested=True, focus_camera_id=None, show_all_cameras=True)

    @classmethod
    def from_dict(cls, data: dict | None) -> Effects:
        if not data:
            return cls()
        focus_id = data.get("focusCameraId")
        return cls(
            focus_requested="focusCameraId" in data,
            focus_camera_id=int(focus_id) if focus_id is not None else None,
            show_all_cameras=bool(data.get("showAllCameras", False)),
            emergency=data.get("emergency") or None,
            help=bool(data.get("help", False)),
        )

    def to_dict(self) -> dict:
        out: dict = {}
        if self.focus_requested:
            out["focusCameraId"] = self.focus_camera_id
        if self.show_all_cameras:
            out["showAllCameras"] = True
        if self.emergency:
            out["emergency"] = self.emergency
        if self.help:
            out["help"] = True
        return out

    @property
    def is_empty(self) -> bool:
        return not self.to_dict()
