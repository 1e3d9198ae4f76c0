"""
Error kinds raised by the serial layer

Malformed lines and framer overflow are not errors: the parser returns None
and the framer resets its buffer.
"""


class RadarError(Exception):
    """Base class for radarscope errors"""


class EndpointOpenFailed(RadarError):
    """Serial endpoint could not be opened or configured"""

    def __init__(self, port_name: str, reason: str = ""):
        self.port_name = port_name
        self.reason = reason
        message = f"Failed to open {port_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class HandshakeTimeout(RadarError):
    """No signature line was seen before the handshake window closed"""

    def __init__(self, port_name: str, timeout: float):
        self.port_name = port_name
        self.timeout = timeout
        super().__init__(f"No signature from {port_name} within {timeout:.1f}s")


class DetectionExhausted(RadarError):
    """Every candidate port was tried and none sent the signature"""

    def __init__(self, signature: str, tried=None):
        self.signature = signature
        self.tried = list(tried or [])
        super().__init__(
            f"Could not auto-detect Arduino (signature {signature})."
        )
