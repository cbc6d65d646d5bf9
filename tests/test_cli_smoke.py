"""Smoke tests for CLI commands.

Uses Click's CliRunner with --dry-run or a patched serial port, so no
hardware is needed.
"""

import json
import logging
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import serial
from click.testing import CliRunner

from ledcube.cli.main import cli


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Remove log handlers installed by the CLI after each test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(level)


@pytest.fixture
def invoke(runner, tmp_path: Path, config_path: Path):
    """Invoke the CLI with a temporary config and log file."""
    def _invoke(*args, **kwargs):
        base = ['--config-file', str(config_path), '--log-file', str(tmp_path / "ledcube.log")]
        return runner.invoke(cli, base + list(args), **kwargs)
    return _invoke


@pytest.fixture
def mock_serial():
    """Patch serial.Serial with a port that accepts every write."""
    with patch("ledcube.transport.serial_transport.serial.Serial") as mock_cls:
        mock_cls.return_value.is_open = True
        mock_cls.return_value.write.side_effect = lambda data: len(data)
        yield mock_cls


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        """Test main CLI help displays."""
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'LED Cube' in result.output

    def test_version_flag(self, runner):
        """Test --version flag works."""
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    @pytest.mark.parametrize("command", ['light', 'clear', 'sweep', 'ports', 'config'])
    def test_command_help(self, invoke, command):
        """Test each command has help."""
        result = invoke(command, '--help')
        assert result.exit_code == 0


@pytest.mark.integration
class TestLightCommand:
    """Test the light command."""

    def test_dry_run(self, invoke):
        """Test --dry-run prints the pattern."""
        result = invoke('light', '0', '0', '0', '--dry-run')

        assert result.exit_code == 0
        assert f"pattern: {'00' * 15}08" in result.output

    def test_serial(self, invoke, mock_serial):
        """Test lighting over a (patched) serial port."""
        result = invoke('light', '3', '3', '3', '--port', '/dev/ttyUSB0')

        assert result.exit_code == 0, result.output
        assert '[OK] Lit 1 LED(s)' in result.output
        last_write = mock_serial.return_value.write.call_args[0][0]
        assert last_write == b"\x01" + bytes(15)
        mock_serial.return_value.close.assert_called_once()

    def test_port_from_config(self, invoke, config_path, mock_serial):
        """Test the saved port and baud rate are used."""
        config_path.parent.mkdir(parents=True)
        config_path.write_text(json.dumps({"port": "COM7", "serial": {"baudrate": 19200}}))

        result = invoke('light', '1', '1', '1')

        assert result.exit_code == 0, result.output
        assert mock_serial.call_args.kwargs["port"] == "COM7"
        assert mock_serial.call_args.kwargs["baudrate"] == 19200

    def test_no_port(self, invoke):
        """Test a missing port is a usage error."""
        result = invoke('light', '0', '0', '0')
        assert result.exit_code == 2
        assert 'No serial port given' in result.output

    def test_incomplete_triple(self, invoke):
        """Test positions must come in threes."""
        result = invoke('light', '0', '0', '--dry-run')
        assert result.exit_code == 2
        assert 'X Y Z triples' in result.output

    def test_out_of_range(self, invoke):
        """Test coordinates above 3 are rejected."""
        result = invoke('light', '4', '0', '0', '--dry-run')
        assert result.exit_code == 2
        assert 'outside 0-3' in result.output

    def test_connection_error(self, invoke, tmp_path):
        """Test an unopenable port shows a friendly error."""
        with patch(
            "ledcube.transport.serial_transport.serial.Serial",
            side_effect=serial.SerialException("could not open port"),
        ):
            result = invoke('light', '0', '0', '0', '--port', 'COM9')

        assert result.exit_code == 1
        assert "Could not connect to LED cube on 'COM9'" in result.output
        assert 'ledcube ports list' in result.output
        assert f"check the log file: {tmp_path / 'ledcube.log'}" in result.output


@pytest.mark.integration
class TestClearAndSweep:
    """Test clear and sweep commands."""

    def test_clear_dry_run(self, invoke):
        """Test clear shows an empty pattern."""
        result = invoke('clear', '--dry-run')
        assert result.exit_code == 0
        assert f"pattern: {'00' * 16}" in result.output

    def test_clear_serial(self, invoke, mock_serial):
        """Test clear sends a single all-off pattern."""
        result = invoke('clear', '--port', 'COM5')

        assert result.exit_code == 0
        mock_serial.return_value.write.assert_called_once_with(bytes(16))

    def test_sweep_dry_run(self, invoke):
        """Test a dry-run sweep walks all 64 LEDs."""
        result = invoke('sweep', '--dry-run', '--interval', '0')

        assert result.exit_code == 0, result.output
        assert '[OK] Swept 64 step(s)' in result.output
        assert f"0 0 0  {'00' * 15}08" in result.output

    def test_sweep_interval_from_config(self, invoke, config_path):
        """Test the configured interval is used by default."""
        config_path.parent.mkdir(parents=True)
        config_path.write_text(json.dumps({"sweep_interval": 0}))

        result = invoke('sweep', '--dry-run', '--cycles', '2')

        assert result.exit_code == 0, result.output
        assert '[OK] Swept 128 step(s)' in result.output

    def test_sweep_interrupted_clears_cube(self, invoke, mock_serial):
        """Test Ctrl+C during an endless sweep leaves every LED off."""
        writes = []

        def write(data):
            writes.append(bytes(data))
            if len(writes) == 4:
                raise KeyboardInterrupt()
            return len(data)

        mock_serial.return_value.write.side_effect = write

        result = invoke('sweep', '--port', 'COM1', '--interval', '0', '--cycles', '0')

        assert result.exit_code == 0, result.output
        assert 'Cleaning up' in result.output
        assert len(writes) == 5
        assert writes[-1] == bytes(16)
        mock_serial.return_value.close.assert_called_once()

    def test_sweep_serial_ends_dark(self, invoke, mock_serial):
        """Test a finished sweep sends an all-off pattern last."""
        result = invoke('sweep', '--port', 'COM1', '--interval', '0')

        assert result.exit_code == 0, result.output
        assert mock_serial.return_value.write.call_args[0][0] == bytes(16)
        assert mock_serial.return_value.write.call_count == 1 + 64 + 1


@pytest.mark.integration
class TestConfigCommand:
    """Test config commands."""

    def test_show_defaults(self, invoke):
        """Test show prints default values."""
        result = invoke('config', 'show')
        assert result.exit_code == 0
        assert '(not set)' in result.output
        assert '9600' in result.output

    def test_set_and_show(self, invoke, config_path):
        """Test set saves values that show then displays."""
        result = invoke('config', 'set', '--port', '/dev/ttyACM0', '--baudrate', '115200')
        assert result.exit_code == 0, result.output

        saved = json.loads(config_path.read_text())
        assert saved["port"] == "/dev/ttyACM0"
        assert saved["serial"]["baudrate"] == 115200

        result = invoke('config', 'show')
        assert '/dev/ttyACM0' in result.output

    def test_set_timeouts(self, invoke, config_path):
        """Test both serial timeouts can be set and are shown."""
        result = invoke('config', 'set', '--timeout', '0.5', '--write-timeout', '2')
        assert result.exit_code == 0, result.output

        saved = json.loads(config_path.read_text())
        assert saved["serial"]["timeout"] == 0.5
        assert saved["serial"]["write_timeout"] == 2.0
        assert saved["serial"]["baudrate"] == 9600

        result = invoke('config', 'show')
        assert 'serial.timeout:       0.5' in result.output

    def test_set_nothing(self, invoke, config_path):
        """Test set with no options changes nothing."""
        result = invoke('config', 'set')
        assert result.exit_code == 0
        assert 'Nothing to change' in result.output
        assert not config_path.exists()

    def test_set_invalid(self, invoke, config_path):
        """Test invalid values are rejected with a hint."""
        result = invoke('config', 'set', '--baudrate', '0')
        assert result.exit_code == 1
        assert "Invalid configuration value for 'serial.baudrate'" in result.output
        assert not config_path.exists()

    def test_reset(self, invoke, config_path):
        """Test reset restores defaults and keeps a backup."""
        invoke('config', 'set', '--port', 'COM5')

        result = invoke('config', 'reset', '--yes')

        assert result.exit_code == 0
        assert json.loads(config_path.read_text())["port"] is None
        assert config_path.with_suffix(".json.bak").exists()

    def test_broken_config_file(self, invoke, config_path):
        """Test a corrupt config is reported, not overwritten."""
        config_path.parent.mkdir(parents=True)
        config_path.write_text('{"port": ')

        result = invoke('config', 'show')

        assert result.exit_code == 1
        assert 'ERROR: Configuration file has invalid syntax' in result.output
        assert config_path.read_text() == '{"port": '


@pytest.mark.integration
class TestPortsCommand:
    """Test the ports command."""

    def test_list(self, invoke):
        """Test ports are listed."""
        ports = [Mock(device="/dev/ttyUSB0", description="CH340")]
        with patch(
            "ledcube.transport.serial_transport.serial_list_ports.comports",
            return_value=ports,
        ):
            result = invoke('ports', 'list')

        assert result.exit_code == 0
        assert '[0] /dev/ttyUSB0  CH340' in result.output

    def test_list_empty(self, invoke):
        """Test a message is shown when no ports exist."""
        with patch(
            "ledcube.transport.serial_transport.serial_list_ports.comports",
            return_value=[],
        ):
            result = invoke('ports', 'list')

        assert 'No serial ports found' in result.output
