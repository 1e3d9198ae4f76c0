"""
Line framing for the radar serial stream

Accumulates raw bytes from the port and splits them into newline-terminated
lines. The buffer has a fixed capacity; a producer that never sends a
terminator gets its partial data dropped instead of growing the buffer.
"""

import logging
from typing import Optional

from ..utils.constants import LINE_BUFFER_SIZE, LINE_TERMINATOR

logger = logging.getLogger(__name__)


class LineFramer:
    """
    Bounded accumulation buffer with newline framing

    Lines are returned as bytes including their terminator.
    """

    def __init__(self, capacity: int = LINE_BUFFER_SIZE,
                 terminator: bytes = LINE_TERMINATOR):
        """
        Initialize line framer

        Args:
            capacity: Maximum number of bytes held while waiting for a terminator
            terminator: Line terminator byte
        """
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.terminator = terminator
        self._buffer = bytearray()

    @property
    def pending(self) -> bytes:
        """Bytes received but not yet returned as a line"""
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def clear(self):
        """Drop all buffered bytes"""
        self._buffer.clear()

    def push(self, data: bytes):
        """
        Append bytes to the buffer

        If the new bytes do not fit, the buffer is emptied before appending.
        Data longer than the capacity keeps only its last `capacity` bytes.

        Args:
            data: Bytes read from the port
        """
        if not data:
            return

        if len(self._buffer) + len(data) > self.capacity:
            logger.debug("Line buffer overflow, dropping %d bytes", len(self._buffer))
            self._buffer.clear()
            if len(data) > self.capacity:
                data = data[-self.capacity:]

        self._buffer.extend(data)

    def pop_line(self) -> Optional[bytes]:
        """
        Remove and return the first complete line

        Returns:
            Line including terminator, or None if no terminator is buffered
        """
        index = self._buffer.find(self.terminator)
        if index < 0:
            return None

        end = index + len(self.terminator)
        line = bytes(self._buffer[:end])
        del self._buffer[:end]
        return line

    def read_line(self, connection) -> Optional[bytes]:
        """
        Do one bounded read from the connection and return the next line

        Safe to call repeatedly in the same frame to drain buffered lines.

        Args:
            connection: Object with a read_available() -> bytes method

        Returns:
            Line including terminator, or None if none is complete yet
        """
        self.push(connection.read_available())
        return self.pop_line()
