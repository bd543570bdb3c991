"""Tests for CLI command executors."""

from collections.abc import Callable
from unittest.mock import MagicMock

from pytest_mock import MockerFixture

from unreprex.config.config import Config
from unreprex.features.undo import ClobberPolicy, InputLocation, UndoResult, Venue
from unreprex.ui.cli.args import CleanArgs, InvertArgs, RescueArgs
from unreprex.ui.cli.commands import CleanCommand, InvertCommand, RescueCommand, build_service


def _result() -> UndoResult:
    return UndoResult(lines=["x"], location=InputLocation.TEXT)


def _factory(app: MagicMock) -> Callable[[object, Config], MagicMock]:
    return lambda _args, _config: app


def test_invert_command_forwards_arguments(mocker: MockerFixture) -> None:
    app = mocker.MagicMock()
    app.invert.return_value = _result()
    display = mocker.MagicMock()
    args = InvertArgs(
        command="invert",
        source="reprex.md",
        outfile="foo",
        clobber_policy=ClobberPolicy.ABORT,
        use_clipboard=False,
        verbose=False,
        quiet=True,
        venue=Venue.R,
        comment="##",
        drop_output=False,
    )

    result = InvertCommand(args, service_factory=_factory(app), result_display=display).execute()

    assert result.lines == ["x"]
    app.invert.assert_called_once_with(
        "reprex.md", outfile="foo", venue=Venue.R, comment="##", drop_output=False
    )
    display.show_code.assert_called_once_with(["x"], quiet=True)
    display.show_failures.assert_called_once_with(result)


def test_clean_and_rescue_commands(mocker: MockerFixture) -> None:
    app = mocker.MagicMock()
    app.clean.return_value = _result()
    app.rescue.return_value = _result()
    shared = dict(
        source=None,
        outfile=None,
        clobber_policy=ClobberPolicy.ABORT,
        use_clipboard=False,
        verbose=False,
        quiet=False,
    )

    _ = CleanCommand(
        CleanArgs(command="clean", comment=None, **shared),
        service_factory=_factory(app),
        result_display=mocker.MagicMock(),
    ).execute()
    _ = RescueCommand(
        RescueArgs(command="rescue", prompt="R> ", continuation=None, **shared),
        service_factory=_factory(app),
        result_display=mocker.MagicMock(),
    ).execute()

    app.clean.assert_called_once_with(None, outfile=None, comment=None)
    app.rescue.assert_called_once_with(None, outfile=None, prompt="R> ", continuation=None)


def test_build_service_applies_configuration() -> None:
    args = CleanArgs(
        command="clean",
        source=None,
        outfile=None,
        clobber_policy=ClobberPolicy.OVERWRITE,
        use_clipboard=False,
        verbose=False,
        quiet=False,
        comment=None,
    )

    service = build_service(args, Config(comment="##"))

    assert service.options.comment == "##"
    assert service.clean(["x", "## 1"]).lines == ["x"]
