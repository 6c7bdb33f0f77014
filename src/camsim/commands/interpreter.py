"""Rule-based interpreter for operator text and voice commands.

Flat keyword matching, first rule wins, no conversation state:

    status                          -> status report
    show camera <n>                 -> focus camera n
    show all                        -> back to the camera grid
    where is guard <name>           -> guard location
    alerts / any alerts / what's wrong
    lockdown                        -> emergency "lockdown"
    call police / emergency / panic -> emergency "police"
    mona lisa / gallery 3           -> focus the Mona Lisa camera
    help / what can you do
    anything else                   -> "didn't catch that" + help

Rule order matters: "show camera status" is a status request, and
"show camera" without a number falls through to later rules.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from loguru import logger

from camsim.museum import Alert, MuseumContext

from .effects import Effects

_NUMBER_WORDS = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
}
_DIGITS_RE = re.compile(r"(\d{1,3})")
_WORDS_RE = re.compile(r"\b(" + "|".join(_NUMBER_WORDS) + r")\b")
_GUARD_RE = re.compile(r"guard\s+([a-z]+(?:\s+[a-z]+)?)", re.IGNORECASE)
_MONA_LISA_RE = re.compile(r"mona lisa|gallery 3", re.IGNORECASE)


@dataclass(frozen=True)
class CommandResponse:
    text: str
    effects: Effects = field(default_factory=Effects)

    def to_dict(self) -> dict:
        out: dict = {"text": self.text}
        if not self.effects.is_empty:
            out["effects"] = self.effects.to_dict()
        return out


def normalize(text: str | None) -> str:
    return (text or "").lower().strip()


def extract_number(text: str | None) -> int | None:
    """First 1-3 digit number in ``text``, else the first number word (one..ten)."""
    m = _DIGITS_RE.search(text or "")
    if m:
        return int(m.group(1))
    m = _WORDS_RE.search(normalize(text))
    if m:
        return _NUMBER_WORDS[m.group(1)]
    return None


def list_alerts(alerts: list[Alert]) -> str:
    if not alerts:
        return "No active alerts."
    return "\n".join(f"• [{a.severity.upper()}] {a.message} ({a.time})" for a in alerts)


def status_report(ctx: MuseumContext) -> str:
    total = len(ctx.cameras)
    online = ctx.cameras_online()
    alerts = ctx.alerts
    lines = [
        f"System status: {online}/{total} cameras online, {total - online} offline.",
        f"Guards on duty: {ctx.guards_on_duty()}/{len(ctx.guards)}.",
        f"Alerts: {len(alerts)} active.\n{list_alerts(alerts)}" if alerts else "No active alerts.",
    ]
    return "\n".join(lines)


def help_text() -> str:
    return "\n".join([
        "Try commands like:",
        "• “status report”",
        "• “show camera 2” or “show all cameras”",
        "• “where is guard Martinez”",
        "• “any alerts?” or “what’s wrong?”",
        "• “initiate lockdown”, “call police”, “emergency”",
        "• “mona lisa” or “gallery 3”",
    ])


def _guard_location(raw: str, ctx: MuseumContext) -> CommandResponse:
    m = _GUARD_RE.search(raw)
    if not m:
        return CommandResponse("Please specify a guard name, e.g., “Where is Guard Martinez?”")
    token = m.group(1).lower()
    guard = next((g for g in ctx.guards if token in g.name.lower()), None)
    if guard is None:
        return CommandResponse(f"I don't have a current location for Guard {token}.")
    return CommandResponse(f"{guard.name} is at {guard.location} ({guard.status}).")


def interpret(command: str | None, context: MuseumContext | None = None) -> CommandResponse:
    """Map one operator command to a reply and optional effects."""
    raw = command or ""
    cmd = normalize(raw)
    ctx = context or MuseumContext()
    logger.debug(f"Command input: {raw!r}")

    if "status" in cmd:
        return CommandResponse(status_report(ctx))

    if "show camera" in cmd:
        n = extract_number(cmd)
        if n is not None:
            camera = ctx.camera(n)
            if camera is not None:
                return CommandResponse(f"Showing {camera.name}.", Effects.focus(camera.id))
            return CommandResponse(f"Camera {n} not found.")

    if "show all" in cmd:
        return CommandResponse("Displaying all camera feeds.", Effects.show_all())

    if (
        "where is guard" in cmd
        or "where's guard" in cmd
        or ("where is" in cmd and "guard" in cmd)
    ):
        return _guard_location(raw, ctx)

    if any(k in cmd for k in ("any alerts", "what's wrong", "what is wrong", "alerts")):
        return CommandResponse(list_alerts(ctx.alerts))

    if "lockdown" in cmd:
        return CommandResponse(
            "Initiating museum lockdown protocol. All entrances secured, staff notified.",
            Effects(emergency="lockdown"),
        )

    if any(k in cmd for k in ("call police", "emergency", "panic")):
        return CommandResponse(
            "Emergency services protocol triggered. Contacting local authorities "
            "and broadcasting message to guards.",
            Effects(emergency="police"),
        )

    if "mona lisa" in cmd or "gallery 3" in cmd:
        cam = ctx.find_camera(
            lambda c: bool(_MONA_LISA_RE.search(c.name)) or "gallery 3" in c.room.lower()
        )
        if cam is not None:
            return CommandResponse(f"Focusing on {cam.name}.", Effects.focus(cam.id))
        return CommandResponse("I could not find a camera for that location.")

    if cmd == "help" or "help me" in cmd or "what can you do" in cmd:
        return CommandResponse(help_text(), Effects(help=True))

    return CommandResponse(f"I didn't catch that. {help_text()}")
