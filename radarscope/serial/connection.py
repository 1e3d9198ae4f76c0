"""
Serial connection for radarscope

Wraps a pyserial port with the handful of operations the scanner and the main
loop need: open with 8N1 framing, DTR control, buffer flush, bounded
non-blocking reads and close.
"""

import logging
from typing import Optional

import serial

from .line_framer import LineFramer
from ..utils.constants import BAUD_RATE, READ_CHUNK_SIZE, READ_TIMEOUT
from ..utils.exceptions import EndpointOpenFailed

logger = logging.getLogger(__name__)


class SerialConnection:
    """
    Exclusively owned handle to one serial endpoint

    Owns the line framer holding bytes received from the port.
    """

    def __init__(self, port_name: str, baud_rate: int = BAUD_RATE,
                 read_timeout: float = READ_TIMEOUT):
        """
        Initialize connection (the port is not opened yet)

        Args:
            port_name: Port device name (e.g., "/dev/ttyACM0", "COM3")
            baud_rate: Baud rate (default 9600)
            read_timeout: Read timeout in seconds
        """
        self.port_name = port_name
        self.baud_rate = baud_rate
        self.read_timeout = read_timeout
        self.port: Optional[serial.Serial] = None
        self.framer = LineFramer()

    def __repr__(self) -> str:
        state = "open" if self.is_open() else "closed"
        return f"SerialConnection({self.port_name!r}, {self.baud_rate}, {state})"

    def __enter__(self) -> 'SerialConnection':
        if not self.is_open():
            self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def is_open(self) -> bool:
        """
        Check if port is open

        Returns:
            True if port is open and ready
        """
        return self.port is not None and self.port.is_open

    def open(self):
        """
        Open and configure the port

        Raises:
            EndpointOpenFailed: If the device is missing, busy or cannot be configured
        """
        self.close()

        port = serial.Serial()
        port.port = self.port_name
        port.baudrate = self.baud_rate
        port.bytesize = serial.EIGHTBITS
        port.parity = serial.PARITY_NONE
        port.stopbits = serial.STOPBITS_ONE
        port.timeout = self.read_timeout
        port.rtscts = False
        port.dsrdtr = False
        port.dtr = True

        try:
            port.open()
            port.reset_input_buffer()
            port.reset_output_buffer()
        except (serial.SerialException, OSError, ValueError) as e:
            try:
                port.close()
            except (serial.SerialException, OSError):
                pass
            raise EndpointOpenFailed(self.port_name, str(e)) from e

        self.port = port
        self.framer.clear()
        logger.debug("Opened %s at %d baud", self.port_name, self.baud_rate)

    def close(self):
        """Close the port (safe to call more than once)"""
        if self.port is not None:
            try:
                self.port.close()
            except (serial.SerialException, OSError) as e:
                logger.debug("Error closing %s: %s", self.port_name, e)
            self.port = None
            logger.debug("Closed %s", self.port_name)
        self.framer.clear()

    def set_dtr(self, active: bool):
        """
        Drive the data-terminal-ready line

        Args:
            active: True to assert DTR, False to deassert

        Raises:
            EndpointOpenFailed: If the port rejects DTR control (the port is closed)
        """
        if not self.is_open():
            return

        try:
            self.port.dtr = active
        except (serial.SerialException, OSError) as e:
            self.close()
            raise EndpointOpenFailed(self.port_name, f"DTR control failed: {e}") from e

    def flush(self):
        """Discard stale input/output in the OS buffers and the line framer"""
        if self.is_open():
            try:
                self.port.reset_input_buffer()
                self.port.reset_output_buffer()
            except (serial.SerialException, OSError) as e:
                logger.debug("Flush failed on %s: %s", self.port_name, e)
        self.framer.clear()

    def read_available(self) -> bytes:
        """
        Read whatever the OS has buffered, up to one chunk

        Returns:
            Bytes read (empty if nothing is waiting or the port failed)
        """
        if not self.is_open():
            return b''

        try:
            waiting = self.port.in_waiting
            if waiting > 0:
                return self.port.read(min(waiting, READ_CHUNK_SIZE))
            return b''

        except (serial.SerialException, OSError) as e:
            logger.warning("Read error on %s, closing port: %s", self.port_name, e)
            self.close()
            return b''

    def readline(self) -> Optional[bytes]:
        """
        Return the next complete line, reading at most one chunk first

        Returns:
            Line including terminator, or None if none is complete yet
        """
        return self.framer.read_line(self)
