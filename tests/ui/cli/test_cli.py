"""Tests for CLI functionality."""

import pytest
from pytest_mock import MockerFixture

from winpath.config.config import ConfigError
from winpath.ui.cli import CommandProcessor, main


@pytest.fixture(autouse=True)
def quiet_logging(mocker: MockerFixture) -> None:
    """Keep CLI runs from reconfiguring the shared logger or touching log files."""

    _ = mocker.patch("winpath.ui.cli.args.parser.setup_logger")


def test_parse_valid_path_succeeds(capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["parse", "C:\\msys64\\home"])

    assert "msys64" in capsys.readouterr().out


def test_parse_invalid_path_exits_with_failure() -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["parse", "C:\\bad|name", "--quiet"])

    assert excinfo.value.code == 1


def test_locations_failure_exits_with_failure(mocker: MockerFixture) -> None:
    from winpath.platform.windows import LocationResult

    _ = mocker.patch(
        "winpath.ui.cli.commands.locations.known_locations",
        return_value={"Computer name": LocationResult("", False)},
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["locations", "--quiet"])

    assert excinfo.value.code == 1


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (KeyboardInterrupt(), 130),
        (ConfigError("bad value"), 1),
        (RuntimeError("boom"), 1),
    ],
)
def test_errors_map_to_exit_codes(error: BaseException, code: int, mocker: MockerFixture) -> None:
    _ = mocker.patch("winpath.ui.cli.cli.ParseCommand", side_effect=error)

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["parse", "x"])

    assert excinfo.value.code == code


def test_main_returns_zero_on_success(mocker: MockerFixture) -> None:
    _ = mocker.patch("sys.argv", ["winpath", "parse", "C:\\x", "--quiet"])

    assert main() == 0
