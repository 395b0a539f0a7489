"""Tests for the asdbctl command line (argument parsing, output, exit codes)."""

import json
from unittest.mock import patch

import pytest
from conftest import make_descriptor

import main
from asdbctl.app.backend import DisplayReading
from asdbctl.errors import NoDeviceFound, TransportIoError


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.json"


@pytest.fixture
def backend():
    with patch("main.DisplayBackend") as backend_cls:
        yield backend_cls.return_value


@pytest.fixture(autouse=True)
def _no_logging_reconfig():
    with patch("main.configure_logging") as configure:
        yield configure


def _run(config_path, *argv):
    return main.main(["--config", str(config_path), *argv])


class TestParser:

    def test_set_requires_value(self):
        with pytest.raises(SystemExit) as exc_info:
            main.build_parser().parse_args(["set"])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize("value", ["101", "-1", "abc"])
    def test_set_out_of_range(self, value):
        with pytest.raises(SystemExit) as exc_info:
            main.build_parser().parse_args(["set", value])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize("step", ["0", "101"])
    def test_step_out_of_range(self, step):
        with pytest.raises(SystemExit) as exc_info:
            main.build_parser().parse_args(["up", "--step", step])
        assert exc_info.value.code == 2

    def test_serial_is_global(self):
        args = main.build_parser().parse_args(["-s", "C02XYZ", "down", "-s", "5"])
        assert args.serial == "C02XYZ"
        assert args.step == 5

    def test_verbosity_count(self):
        assert main.build_parser().parse_args(["-vv", "get"]).verbose == 2


class TestCommands:

    def test_get_prints_each_display(self, config_path, backend, capsys):
        backend.get.return_value = [
            DisplayReading(make_descriptor(serial="A"), 42),
            DisplayReading(make_descriptor(serial="B"), 7),
        ]
        assert _run(config_path, "get") == 0
        assert capsys.readouterr().out == "brightness 42\nbrightness 7\n"
        backend.get.assert_called_once_with(None)

    def test_set_passes_serial(self, config_path, backend, capsys):
        backend.set.return_value = [DisplayReading(make_descriptor(serial="B"), 80)]
        assert _run(config_path, "-s", "B", "set", "80") == 0
        backend.set.assert_called_once_with(80, "B")
        assert capsys.readouterr().out == ""

    def test_up_uses_explicit_step(self, config_path, backend):
        backend.up.return_value = [DisplayReading(make_descriptor(), 60)]
        assert _run(config_path, "up", "--step", "25") == 0
        backend.up.assert_called_once_with(25, None)

    def test_down_uses_config_step(self, config_path, backend):
        config_path.write_text(json.dumps({"display": {"step": 5, "serial": "Q"}}))
        backend.down.return_value = [DisplayReading(make_descriptor(serial="Q"), 45)]
        assert _run(config_path, "down") == 0
        backend.down.assert_called_once_with(5, "Q")

    def test_cli_serial_overrides_config(self, config_path, backend):
        config_path.write_text(json.dumps({"display": {"serial": "Q"}}))
        backend.get.return_value = [DisplayReading(make_descriptor(serial="R"), 1)]
        _run(config_path, "-s", "R", "get")
        backend.get.assert_called_once_with("R")

    def test_list(self, config_path, backend, capsys):
        backend.discover.return_value = [make_descriptor(serial="A", path=b"/dev/hidraw2")]
        assert _run(config_path, "list") == 0
        assert capsys.readouterr().out == "A\tStudio Display\t/dev/hidraw2\n"

    def test_unmatched_serial_exits_1(self, config_path, backend):
        backend.get.return_value = []
        assert _run(config_path, "-s", "Z", "get") == 1

    @pytest.mark.parametrize("exc", [NoDeviceFound("none"), TransportIoError("gone")])
    def test_errors_exit_1(self, config_path, backend, exc, caplog):
        backend.set.side_effect = exc
        assert _run(config_path, "set", "50") == 1
        assert str(exc) in caplog.text

    def test_logging_configured_from_flags(self, config_path, backend, _no_logging_reconfig):
        backend.get.return_value = [DisplayReading(make_descriptor(), 1)]
        _run(config_path, "-v", "--log-level", "DEBUG", "get")
        _no_logging_reconfig.assert_called_once_with(cli_level="DEBUG", verbosity=1)


class TestGuiLaunch:

    @pytest.mark.parametrize("argv", [[], ["gui"]])
    def test_launches_window(self, config_path, argv):
        with patch("ui_main.run_gui", return_value=0) as run_gui:
            assert _run(config_path, *argv) == 0
        run_gui.assert_called_once()
        assert run_gui.call_args.kwargs == {"serial": None}

    def test_gui_gets_serial(self, config_path):
        with patch("ui_main.run_gui", return_value=1) as run_gui:
            assert _run(config_path, "-s", "B") == 1
        assert run_gui.call_args.kwargs == {"serial": "B"}
