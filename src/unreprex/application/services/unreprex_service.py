"""Application service exposing the invert, clean and rescue operations."""

from __future__ import annotations

from logging import Logger, getLogger
from pathlib import Path
from typing import final

from unreprex.features.undo import (
    ClobberPolicy,
    ReconstructionStrategy,
    UndoOptions,
    UndoRequest,
    UndoResult,
    UndoService,
    Venue,
    compose_prompt_pattern,
    select_strategy,
)
from unreprex.features.undo.adapters import (
    DisabledClipboard,
    LocalFileSystemGateway,
    PyperclipClipboard,
)
from unreprex.features.undo.usecases import (
    ClipboardPort,
    ClobberGuard,
    FileSystemGateway,
    InputSource,
    OutfileRequest,
)


@final
class UnreprexService:
    """Application façade wiring adapters into the undo use case.

    Every operation takes its pattern parameters explicitly; anything left
    unset falls back to the ``UndoOptions`` the service was built with.
    """

    _options: UndoOptions
    _service: UndoService
    _working_dir: Path | None

    def __init__(
        self,
        *,
        options: UndoOptions | None = None,
        clipboard: ClipboardPort | None = None,
        filesystem: FileSystemGateway | None = None,
        clobber_guard: ClobberGuard | None = None,
        use_clipboard: bool = True,
        working_dir: Path | None = None,
        logger: Logger | None = None,
    ) -> None:
        if clipboard is None:
            clipboard = PyperclipClipboard() if use_clipboard else DisabledClipboard()

        self._options = options or UndoOptions()
        self._working_dir = working_dir
        self._service = UndoService(
            clipboard=clipboard,
            filesystem=filesystem or LocalFileSystemGateway(),
            clobber_guard=clobber_guard or ClobberPolicy.ABORT,
            logger=logger or getLogger(__name__),
        )

    @property
    def options(self) -> UndoOptions:
        """Options used when a call leaves a parameter unset."""

        return self._options

    def invert(
        self,
        source: InputSource = None,
        *,
        outfile: OutfileRequest = None,
        venue: str | Venue = Venue.GH,
        comment: str | None = None,
        drop_output: bool = True,
    ) -> UndoResult:
        """Reverse a Markdown rendering; the ``r`` venue falls back to ``clean``."""

        resolved_venue = Venue.from_user_input(venue)
        if resolved_venue is Venue.R:
            return self.clean(source, outfile=outfile, comment=comment)

        options = self._with_overrides(comment=comment)
        strategy = select_strategy(is_markdown=True, options=options, drop_output=drop_output)
        return self._run(source, strategy, outfile)

    def clean(
        self,
        source: InputSource = None,
        *,
        outfile: OutfileRequest = None,
        comment: str | None = None,
    ) -> UndoResult:
        """Remove commented output from top-level code."""

        options = self._with_overrides(comment=comment)
        strategy = select_strategy(is_markdown=False, options=options)
        return self._run(source, strategy, outfile)

    def rescue(
        self,
        source: InputSource = None,
        *,
        outfile: OutfileRequest = None,
        prompt: str | None = None,
        continuation: str | None = None,
    ) -> UndoResult:
        """Keep prompted commands from a console transcript."""

        options = self._with_overrides(prompt=prompt, continuation=continuation)
        prompt_pattern = compose_prompt_pattern(options.prompt, options.continuation)
        strategy = select_strategy(
            is_markdown=False,
            options=options,
            prompt_pattern=prompt_pattern,
        )
        return self._run(source, strategy, outfile)

    def _with_overrides(
        self,
        *,
        comment: str | None = None,
        prompt: str | None = None,
        continuation: str | None = None,
    ) -> UndoOptions:
        base = self._options
        return UndoOptions(
            comment=base.comment if comment is None else comment,
            prompt=base.prompt if prompt is None else prompt,
            continuation=base.continuation if continuation is None else continuation,
            prose_prefix=base.prose_prefix,
            fence=base.fence,
        )

    def _run(
        self,
        source: InputSource,
        strategy: ReconstructionStrategy,
        outfile: OutfileRequest,
    ) -> UndoResult:
        request = UndoRequest(
            source=source,
            strategy=strategy,
            outfile=outfile,
            working_dir=self._working_dir,
        )
        return self._service.run(request)


__all__ = ["UnreprexService"]
