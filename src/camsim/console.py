"""OperatorConsole: the glue between operator commands and the camera display.

One call to handle_command() does what the console UI does per message:
record the operator's text, interpret it, record the reply, then push the
reply's effects into the display.  Emergency effects are not something the
simulation reacts to; the console logs them and publishes an ``emergency``
event for whoever is listening.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from camsim.commands.interpreter import CommandResponse, interpret
from camsim.commands.transcript import ChatTranscript
from camsim.museum import MuseumContext

if TYPE_CHECKING:
    from camsim.comms.event_bus import EventBus
    from camsim.simulation.display import CameraDisplay

GREETING = "System online. Say 'status report' or try 'help' to see commands."
ERROR_REPLY = "I hit an error processing that command."


class OperatorConsole:
    def __init__(
        self,
        display: CameraDisplay,
        museum: MuseumContext,
        transcript: ChatTranscript | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.display = display
        self.museum = museum
        self.transcript = transcript if transcript is not None else ChatTranscript()
        self.event_bus = event_bus
        if len(self.transcript) == 0:
            self.transcript.append("assistant", GREETING)

    def handle_command(self, text: str | None) -> CommandResponse | None:
        """Process one operator command.  Blank input is ignored (None)."""
        if not text or not text.strip():
            return None
        self.transcript.append("user", text)
        try:
            response = interpret(text, self.museum)
            self.transcript.append("assistant", response.text)
            self._apply(text, response)
        except Exception:
            logger.exception(f"Command failed: {text!r}")
            response = CommandResponse(ERROR_REPLY)
            self.transcript.append("assistant", ERROR_REPLY)
        return response

    def _apply(self, text: str, response: CommandResponse) -> None:
        effects = response.effects
        if effects.is_empty:
            return
        self.display.apply_effects(effects)
        if effects.emergency:
            logger.warning(f"EMERGENCY: {effects.emergency} (operator: {text!r})")
            if self.event_bus is not None:
                self.event_bus.publish("emergency", {
                    "kind": effects.emergency,
                    "command": text,
                })

    def shutdown(self) -> None:
        self.display.close()
