"""
Constants for radarscope

Wire protocol values, handshake timings and display defaults shared by the
serial layer, the sweep model and the renderer.
"""

# Wire protocol
SIGNATURE = "RADAR_READY"
BAUD_RATE = 9600
LINE_TERMINATOR = b"\n"

# Serial I/O
READ_TIMEOUT = 0.01  # seconds
READ_CHUNK_SIZE = 128  # max bytes per read
LINE_BUFFER_SIZE = 2048  # accumulation buffer capacity (bytes)

# Handshake (DTR reset + signature wait)
DTR_SETTLE_SECS = 0.08
HANDSHAKE_TIMEOUT_SECS = 2.5
HANDSHAKE_POLL_SECS = 0.01

# Distance readings (cm)
NO_ECHO_CM = -1
MIN_DISTANCE_CM = -1
MAX_DISTANCE_CM = 500

# Sweep & blips
SWEEP_MIN_DEG = 0.0
SWEEP_MAX_DEG = 180.0
SWEEP_SPEED_DEG_PER_SEC = 80.0
BLIP_LIFETIME_SECS = 2.0
BLIP_CAPACITY = 2048
BLIP_ALPHA_FLOOR = 50
BLIP_ALPHA_MAX = 255

# Display
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 600
TARGET_FPS = 60
MAX_RANGE_CM = 300
