"""src/unreprex/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse service construction and presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from unreprex.application.services.unreprex_service import UnreprexService
from unreprex.config.config import Config
from unreprex.features.undo import UndoResult
from unreprex.ui.cli.args.options import CLIArgs
from unreprex.ui.cli.display.result import ResultDisplay

ServiceFactory = Callable[[CLIArgs, Config], UnreprexService]


def build_service(args: CLIArgs, configuration: Config) -> UnreprexService:
    """Build the application service for ``args`` on top of ``configuration``."""

    return UnreprexService(
        options=configuration.to_options(),
        clobber_guard=args.clobber_policy,
        use_clipboard=args.use_clipboard,
    )


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    app: UnreprexService
    result_display: ResultDisplay

    def __init__(
        self,
        args: CLIArgs,
        *,
        service_factory: ServiceFactory | None = None,
        result_display: ResultDisplay | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            service_factory: Builds the application service. Defaults to ``build_service``.
            result_display: Presentation helper. Defaults to a console display.
        """
        self.args = args
        factory = service_factory or build_service
        self.app = factory(args, Config.load())
        self.result_display = result_display or ResultDisplay()

    @abstractmethod
    def run(self) -> UndoResult:
        """Run the underlying operation."""
        pass

    def execute(self) -> UndoResult:
        """Execute the command and display its results.

        Returns:
            UndoResult: Recovered code and delivery outcomes.
        """
        result = self.run()
        self.result_display.show_code(result.lines, quiet=self.args.quiet)
        self.result_display.show_failures(result)
        return result
