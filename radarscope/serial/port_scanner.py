"""
Serial port auto-detection for radarscope

Finds the radar board by resetting each candidate port through DTR and waiting
for the sketch to print its signature. Most Arduino-style boards reboot on a
DTR transition and only print the signature once, right after boot.
"""

import logging
import re
import time
from typing import Callable, Iterable, List, Optional

import serial.tools.list_ports

from .connection import SerialConnection
from .protocol import has_signature
from ..utils.constants import (
    BAUD_RATE,
    DTR_SETTLE_SECS,
    HANDSHAKE_POLL_SECS,
    HANDSHAKE_TIMEOUT_SECS,
    SIGNATURE,
)
from ..utils.exceptions import DetectionExhausted, EndpointOpenFailed, HandshakeTimeout

logger = logging.getLogger(__name__)

ConnectionFactory = Callable[[str, int], SerialConnection]


def _natural_key(name: str):
    # COM2 before COM10, ttyACM0 before ttyUSB0
    return [int(part) if part.isdigit() else part.lower()
            for part in re.split(r'(\d+)', name)]


def candidate_ports() -> List[str]:
    """
    Enumerate serial ports in scan order

    Returns:
        Port device names sorted naturally
        Example: ["/dev/ttyACM0", "/dev/ttyUSB0"] or ["COM3", "COM10"]
    """
    names = [port_info.device for port_info in serial.tools.list_ports.comports()]
    names.sort(key=_natural_key)
    return names


def reset_board(connection: SerialConnection, settle: float = DTR_SETTLE_SECS,
                sleep: Callable[[float], None] = time.sleep):
    """
    Reset the board by pulsing DTR, then drop anything it sent before

    Args:
        connection: Open connection
        settle: Seconds to hold each DTR level
        sleep: Sleep function

    Raises:
        EndpointOpenFailed: If the port rejects DTR control
    """
    connection.set_dtr(False)
    sleep(settle)
    connection.set_dtr(True)
    sleep(settle)
    connection.flush()


def wait_for_signature(connection: SerialConnection, signature: str = SIGNATURE,
                       timeout: float = HANDSHAKE_TIMEOUT_SECS,
                       poll_interval: float = HANDSHAKE_POLL_SECS,
                       clock: Callable[[], float] = time.monotonic,
                       sleep: Callable[[float], None] = time.sleep):
    """
    Poll the connection until a line containing the signature arrives

    Args:
        connection: Open connection, freshly reset
        signature: Substring identifying the radar sketch
        timeout: Seconds to wait
        poll_interval: Seconds to sleep between polls
        clock: Monotonic clock
        sleep: Sleep function

    Raises:
        HandshakeTimeout: If the signature was not seen in time
    """
    start = clock()
    while clock() - start < timeout:
        line = connection.readline()
        while line is not None:
            if has_signature(line, signature):
                return
            line = connection.readline()
        sleep(poll_interval)

    raise HandshakeTimeout(connection.port_name, timeout)


def detect(signature: str = SIGNATURE, baud_rate: int = BAUD_RATE,
           candidate_names: Optional[Iterable[str]] = None,
           connection_factory: ConnectionFactory = SerialConnection,
           timeout: float = HANDSHAKE_TIMEOUT_SECS,
           settle: float = DTR_SETTLE_SECS,
           clock: Callable[[], float] = time.monotonic,
           sleep: Callable[[float], None] = time.sleep) -> SerialConnection:
    """
    Find the port the radar sketch is connected to

    Candidates are tried in order; the first one that prints the signature
    after a DTR reset is returned still open. Every other port that was
    opened is closed before the next one is tried.

    Args:
        signature: Substring identifying the radar sketch
        baud_rate: Baud rate
        candidate_names: Port names to try (default: candidate_ports())
        connection_factory: Builds an unopened connection from (name, baud)
        timeout: Seconds to wait for the signature on each port
        settle: Seconds to hold each DTR level during reset
        clock: Monotonic clock
        sleep: Sleep function

    Returns:
        Open SerialConnection to the radar

    Raises:
        DetectionExhausted: If no candidate sent the signature
    """
    if candidate_names is None:
        candidate_names = candidate_ports()

    tried = []
    for name in candidate_names:
        tried.append(name)
        connection = connection_factory(name, baud_rate)

        try:
            connection.open()
        except EndpointOpenFailed as e:
            logger.debug("Skipping %s: %s", name, e)
            continue

        found = False
        try:
            reset_board(connection, settle=settle, sleep=sleep)
            wait_for_signature(connection, signature, timeout=timeout,
                               clock=clock, sleep=sleep)
            found = True
        except (HandshakeTimeout, EndpointOpenFailed) as e:
            logger.debug("Skipping %s: %s", name, e)
        finally:
            if not found:
                connection.close()

        if found:
            logger.info("Found %s on %s", signature, name)
            return connection

    raise DetectionExhausted(signature, tried)


def open_manual(port_name: str, baud_rate: int = BAUD_RATE,
                connection_factory: ConnectionFactory = SerialConnection) -> SerialConnection:
    """
    Open a user-specified port without the reset/signature handshake

    The board is neither reset nor confirmed; whatever it is already sending
    is read as-is.

    Args:
        port_name: Port device name
        baud_rate: Baud rate
        connection_factory: Builds an unopened connection from (name, baud)

    Returns:
        Open SerialConnection

    Raises:
        EndpointOpenFailed: If the port cannot be opened
    """
    connection = connection_factory(port_name, baud_rate)
    connection.open()
    logger.info("Opened %s (manual, no handshake)", port_name)
    return connection
