"""Use case recovering clean code from a rendered reprex and delivering it."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from logging import Logger, getLogger
from pathlib import Path

from ..domain.dispatcher import reconstruct
from ..domain.models import ReconstructionStrategy
from .ingestion import IngestedInput, InputLocation, InputSource, resolve_lines
from .outfile import OutfileRequest, clean_script_path, make_filebase
from .ports import ClipboardPort, ClobberGuard, FileSystemGateway


class Sink(str, Enum):
    """Destinations the clean code can be delivered to."""

    CLIPBOARD = "clipboard"
    FILE = "file"


@dataclass(slots=True)
class DeliveryOutcome:
    """Capture the outcome of delivering to a single sink."""

    sink: Sink
    delivered: bool
    path: Path | None = None
    message: str | None = None


@dataclass(slots=True)
class UndoRequest:
    """Inputs required for a single reconstruction run."""

    source: InputSource
    strategy: ReconstructionStrategy
    outfile: OutfileRequest = None
    working_dir: Path | None = None


@dataclass(slots=True)
class UndoResult:
    """Recovered lines plus where they were delivered."""

    lines: list[str]
    location: InputLocation
    outfile: Path | None = None
    deliveries: list[DeliveryOutcome] = field(default_factory=list)

    @property
    def failed_deliveries(self) -> list[DeliveryOutcome]:
        """Deliveries that were attempted and raised."""

        return [
            outcome
            for outcome in self.deliveries
            if not outcome.delivered and outcome.message not in {None, "destination_exists"}
        ]


class UndoService:
    """Coordinate ingestion, reconstruction and delivery through injected ports."""

    _clipboard: ClipboardPort
    _filesystem: FileSystemGateway
    _clobber_guard: ClobberGuard
    _logger: Logger

    def __init__(
        self,
        *,
        clipboard: ClipboardPort,
        filesystem: FileSystemGateway,
        clobber_guard: ClobberGuard,
        logger: Logger | None = None,
    ) -> None:
        self._clipboard = clipboard
        self._filesystem = filesystem
        self._clobber_guard = clobber_guard
        self._logger = logger or getLogger(__name__)

    def run(self, request: UndoRequest) -> UndoResult:
        """Resolve input, reconstruct it and deliver the result.

        Input resolution errors propagate untouched. Delivery failures are
        logged and recorded per sink so that one sink never blocks the other.
        """

        ingested = resolve_lines(
            request.source,
            clipboard=self._clipboard,
            filesystem=self._filesystem,
            logger=self._logger,
        )
        target = self._resolve_outfile(request, ingested)

        lines = reconstruct(ingested.lines, request.strategy)
        self._logger.debug(
            "Reconstructed %d of %d lines using %s",
            len(lines),
            len(ingested.lines),
            request.strategy.kind.value,
        )

        result = UndoResult(lines=lines, location=ingested.location, outfile=target)

        clipboard_outcome = self._deliver_to_clipboard(lines)
        if clipboard_outcome is not None:
            result.deliveries.append(clipboard_outcome)
        if target is not None:
            result.deliveries.append(self._deliver_to_file(lines, target))
        return result

    def _resolve_outfile(self, request: UndoRequest, ingested: IngestedInput) -> Path | None:
        if request.outfile is None:
            return None
        filebase = make_filebase(
            request.outfile,
            ingested.path,
            working_dir=request.working_dir,
        )
        return clean_script_path(filebase)

    def _deliver_to_clipboard(self, lines: Sequence[str]) -> DeliveryOutcome | None:
        try:
            if not self._clipboard.is_available():
                return None
            self._clipboard.write_lines(lines)
        except Exception as exc:
            message = str(exc) or exc.__class__.__name__
            self._logger.error("Failed to copy clean code to the clipboard: %s", message)
            return DeliveryOutcome(sink=Sink.CLIPBOARD, delivered=False, message=message)

        self._logger.info(
            "Clean code is on the clipboard.",
            extra={"notice_event": "clipboard.copied", "line_count": len(lines)},
        )
        return DeliveryOutcome(sink=Sink.CLIPBOARD, delivered=True)

    def _deliver_to_file(self, lines: Sequence[str], target: Path) -> DeliveryOutcome:
        exists = self._filesystem.exists(target)
        if not self._clobber_guard.allows_overwrite(target, exists=exists):
            self._logger.warning(
                "Refusing to overwrite existing file %s",
                target,
                extra={"notice_event": "file.clobber", "path": str(target)},
            )
            return DeliveryOutcome(
                sink=Sink.FILE,
                delivered=False,
                path=target,
                message="destination_exists",
            )

        try:
            self._filesystem.write_lines(target, lines)
        except OSError as exc:
            message = str(exc) or exc.__class__.__name__
            self._logger.error("Failed to write clean code to %s: %s", target, message)
            return DeliveryOutcome(sink=Sink.FILE, delivered=False, path=target, message=message)

        self._logger.info(
            "Writing clean code as .R script: %s",
            target,
            extra={"notice_event": "file.written", "path": str(target), "line_count": len(lines)},
        )
        return DeliveryOutcome(sink=Sink.FILE, delivered=True, path=target)


__all__ = ["DeliveryOutcome", "Sink", "UndoRequest", "UndoResult", "UndoService"]
