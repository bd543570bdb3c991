"""
Summary: Use cases wiring ingestion, reconstruction and delivery together.
Why: Provide a stable import surface for the application layer and tests.
"""

from .ingestion import IngestedInput, InputLocation, InputSource, locate_input, resolve_lines, split_text
from .outfile import ClobberPolicy, OutfileMode, OutfileRequest, clean_script_path, make_filebase
from .ports import ClipboardPort, ClobberGuard, FileSystemGateway
from .undo_code import DeliveryOutcome, Sink, UndoRequest, UndoResult, UndoService

__all__ = [
    "ClipboardPort",
    "ClobberGuard",
    "ClobberPolicy",
    "DeliveryOutcome",
    "FileSystemGateway",
    "IngestedInput",
    "InputLocation",
    "InputSource",
    "OutfileMode",
    "OutfileRequest",
    "Sink",
    "UndoRequest",
    "UndoResult",
    "UndoService",
    "clean_script_path",
    "locate_input",
    "make_filebase",
    "resolve_lines",
    "split_text",
]
