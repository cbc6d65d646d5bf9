"""Serial port transport backed by pyserial."""

import logging
from typing import Optional

import serial
from serial.tools import list_ports as serial_list_ports

logger = logging.getLogger(__name__)


class SerialTransport:
    """
    A pyserial connection to the cube's controller board.

    The port is opened in the constructor; any serial.SerialException from
    pyserial propagates to the caller.
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 9600,
        timeout: Optional[float] = None,
        write_timeout: Optional[float] = None,
    ):
        """
        Open serial port.

        Args:
            port: Device name (e.g. "/dev/ttyUSB0", "COM5")
            baudrate: Line speed
            timeout: Read timeout in seconds (None = block)
            write_timeout: Write timeout in seconds (None = block)
        """
        self.port = port
        self._serial = serial.Serial(
            port=port,
            baudrate=baudrate,
            timeout=timeout,
            write_timeout=write_timeout,
        )
        logger.info(f"Opened serial port {port} at {baudrate} baud")

    def write(self, data: bytes) -> int:
        """Write bytes to the port, blocking until accepted or timed out."""
        return self._serial.write(data)

    def close(self) -> None:
        """Close the port."""
        if self._serial.is_open:
            self._serial.close()
            logger.info(f"Closed serial port {self.port}")

    @property
    def is_open(self) -> bool:
        return self._serial.is_open

    @staticmethod
    def list_ports() -> list[tuple[str, str]]:
        """
        List serial ports on this machine.

        Returns:
            List of (device, description) tuples sorted by device name
        """
        return sorted((p.device, p.description) for p in serial_list_ports.comports())


def serial_opener(
    baudrate: int = 9600,
    timeout: Optional[float] = None,
    write_timeout: Optional[float] = None,
):
    """
    Build a TransportOpener that opens SerialTransports with fixed settings.

    Example:
        ```python
        cube = Cube("/dev/ttyUSB0", opener=serial_opener(baudrate=9600))
        ```
    """
    def open_port(port: str) -> SerialTransport:
        return SerialTransport(port, baudrate=baudrate, timeout=timeout, write_timeout=write_timeout)

    return open_port
