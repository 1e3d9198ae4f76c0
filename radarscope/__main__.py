"""
radarscope entry point

Finds the radar board (or opens the port given on the command line) and
launches the pygame radar window.

Usage:
    radarscope              # auto-detect via the RADAR_READY handshake
    radarscope COM7         # manual port, no handshake
    radarscope --list       # show ports in scan order
"""

import argparse
import logging
import sys

from . import __version__
from .model.sweep import SweepModel
from .serial.port_scanner import candidate_ports, detect, open_manual
from .utils.config import RadarConfig
from .utils.exceptions import DetectionExhausted, EndpointOpenFailed

logger = logging.getLogger("radarscope")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="radarscope",
        description="Ultrasonic radar sweep viewer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  # Auto-detect the board (it must print RADAR_READY after reset)
  radarscope

  # Use a specific port
  radarscope /dev/ttyACM0
  radarscope COM7
        '''
    )
    parser.add_argument("port", nargs="?", default=None,
                        help="Serial port to open without auto-detection")
    parser.add_argument("--list", action="store_true",
                        help="List candidate ports in scan order and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def list_ports():
    """Print candidate ports in the order auto-detection tries them"""
    ports = candidate_ports()
    if not ports:
        print("No serial ports found!")
        return

    print("\nCandidate serial ports (scan order):")
    print("-" * 60)
    for i, name in enumerate(ports):
        print(f"{i+1}. {name}")


def connect(config: RadarConfig, port_name=None):
    """
    Open the radar connection

    Args:
        config: Session configuration
        port_name: Manual port, or None to auto-detect

    Returns:
        Open SerialConnection, or None on failure (diagnostic already printed)
    """
    if port_name:
        try:
            return open_manual(port_name, config.baud_rate)
        except EndpointOpenFailed as e:
            print(f"Failed to open {port_name}", file=sys.stderr)
            logger.debug("%s", e)
            return None

    try:
        connection = detect(config.signature, config.baud_rate,
                            timeout=config.handshake_timeout,
                            settle=config.dtr_settle)
    except DetectionExhausted as e:
        print(str(e), file=sys.stderr)
        print("Tips:", file=sys.stderr)
        print(" - Close Serial Monitor/Plotter.", file=sys.stderr)
        print(" - Try running with a manual port: radarscope COM3", file=sys.stderr)
        if e.tried:
            logger.debug("Tried: %s", ", ".join(e.tried))
        return None

    print(f"Detected Arduino on {connection.port_name}")
    return connection


def main(argv=None) -> int:
    """Main entry point for radarscope"""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        list_ports()
        return 0

    print(f"radarscope v{__version__}")
    print("Ultrasonic Radar Sweep Viewer")
    print()

    config = RadarConfig()
    connection = connect(config, args.port)
    if connection is None:
        return 1

    window = None
    try:
        from .app import run_session
        from .gui.radar_window import RadarWindow

        window = RadarWindow(config)
        run_session(connection, window, SweepModel(config))
    except KeyboardInterrupt:
        print("\nStopped.")
    finally:
        connection.close()
        if window is not None:
            window.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
