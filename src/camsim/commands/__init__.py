"""Operator command layer: interpreter, effects, transcript."""
from .effects import Effects
from .interpreter import CommandResponse, extract_number, help_text, interpret, status_report
from .transcript import ChatTranscript

__all__ = [
    "ChatTranscript",
    "CommandResponse",
    "Effects",
    "extract_number",
    "help_text",
    "interpret",
    "status_report",
]
