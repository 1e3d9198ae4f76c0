"""
radarscope - Ultrasonic Radar Sweep Viewer

Visualizes distance readings from an Arduino-style ultrasonic sensor as a
rotating radar sweep with decaying blips.

The serial device is found by resetting each candidate port and waiting for
the sketch to announce itself with a signature line.
"""

__version__ = "1.0.0"
