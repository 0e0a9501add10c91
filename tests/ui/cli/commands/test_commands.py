"""Tests for the parse and locations CLI commands."""

from __future__ import annotations

from io import StringIO

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from winpath.platform.windows import LocationResult, WorkingDirectoryResolver
from winpath.ui.cli.args.options import LocationsArgs, ParseArgs
from winpath.ui.cli.commands import LocationsCommand, ParseCommand


def _console() -> tuple[Console, StringIO]:
    stream = StringIO()
    return Console(file=stream, width=200, force_terminal=False), stream


def _parse_args(*paths: str, directory: bool = False, absolute: bool = False, quiet: bool = False) -> ParseArgs:
    return ParseArgs(
        command="parse",
        paths=list(paths),
        directory=directory,
        absolute=absolute,
        verbose=False,
        quiet=quiet,
    )


def test_parse_command_displays_components() -> None:
    console, stream = _console()
    command = ParseCommand(_parse_args("\\\\?\\UNC\\peaches\\msys64"), console=console)

    results = command.execute()

    assert [result.node for result in results] == ["peaches"]
    assert not command.failed(results)
    output = stream.getvalue()
    assert "peaches" in output
    assert "\\\\peaches\\msys64" in output
    assert "\\\\?\\UNC\\peaches\\msys64" in output


def test_parse_command_applies_absolute_then_directory() -> None:
    console, _ = _console()
    command = ParseCommand(
        _parse_args("docs\\readme", absolute=True, directory=True),
        console=console,
        resolver=WorkingDirectoryResolver("C:\\Users\\joe"),
    )

    [result] = command.execute()

    assert result.device == "C"
    assert result.dirs == ["Users", "joe", "docs", "readme"]
    assert result.name == ""


def test_parse_command_warns_when_resolution_fails(mocker: MockerFixture) -> None:
    from winpath.features.path import PathResolutionError

    console, _ = _console()
    resolver = mocker.Mock()
    resolver.full_path.side_effect = PathResolutionError("x", "no working directory")
    warning = mocker.patch("winpath.ui.cli.commands.parse.logger.warning")

    [result] = ParseCommand(_parse_args("x", absolute=True), console=console, resolver=resolver).execute()

    assert result.is_relative()
    warning.assert_called_once()


def test_parse_command_reports_validation_errors() -> None:
    console, stream = _console()
    command = ParseCommand(_parse_args("C:\\ok", "C:\\b<d", quiet=True), console=console)

    results = command.execute()

    assert command.failed(results)
    output = stream.getvalue()
    assert "Validation errors: 1" in output
    assert "ReservedCharacter at 4" in output
    # Quiet mode prints no tables.
    assert "Canonical" not in output


def test_locations_command(mocker: MockerFixture) -> None:
    console, stream = _console()
    locations = {
        "Computer name": LocationResult("PEACHES", True),
        "Config directory": LocationResult("", False),
    }
    _ = mocker.patch("winpath.ui.cli.commands.locations.known_locations", return_value=locations)

    command = LocationsCommand(LocationsArgs(command="locations", verbose=False, quiet=False), console=console)
    results = command.execute()

    assert results == locations
    assert command.failed(results)
    output = stream.getvalue()
    assert "PEACHES" in output
    assert "Config directory could not be determined" in output


@pytest.mark.parametrize("ok", [True, False])
def test_locations_command_failure_follows_lookups(ok: bool, mocker: MockerFixture) -> None:
    console, _ = _console()
    _ = mocker.patch(
        "winpath.ui.cli.commands.locations.known_locations",
        return_value={"Computer name": LocationResult("PEACHES" if ok else "", ok)},
    )

    command = LocationsCommand(LocationsArgs(command="locations", verbose=False, quiet=True), console=console)

    assert command.failed(command.execute()) is not ok
