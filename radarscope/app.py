"""
Main loop for a radar session

One iteration is one frame: drain every complete line from the port into the
model, advance the sweep, expire old blips, then hand a RadarFrame to the
renderer. Everything runs on the calling thread.
"""

import logging

from .model.sweep import SweepModel
from .serial.protocol import parse_distance

logger = logging.getLogger(__name__)


def drain_lines(connection, model: SweepModel, now: float) -> int:
    """
    Feed every line available this frame into the model

    Non-numeric lines (boot banners, the signature) are skipped.

    Args:
        connection: Open connection with readline() -> bytes | None
        model: Sweep model
        now: Current time (seconds)

    Returns:
        Number of readings accepted
    """
    accepted = 0
    line = connection.readline()
    while line is not None:
        sample = parse_distance(line)
        if sample is not None:
            model.accept(sample, now)
            accepted += 1
        else:
            logger.debug("Ignoring line %r", line)
        line = connection.readline()
    return accepted


def run_session(connection, renderer, model: SweepModel) -> int:
    """
    Run frames until the renderer asks to close

    The caller owns the connection and the renderer and must release both.

    Args:
        connection: Open connection with readline() and port_name
        renderer: Object with should_close(), elapsed(), now() and draw(frame)
        model: Sweep model to update

    Returns:
        Number of frames rendered
    """
    frames = 0
    label = connection.port_name

    while not renderer.should_close():
        elapsed = renderer.elapsed()
        now = renderer.now()

        drain_lines(connection, model, now)
        model.tick(elapsed, now)

        renderer.draw(model.frame(now, label))
        frames += 1

    logger.info("Session ended after %d frames (%d readings, %d blips evicted)",
                frames, model.samples_accepted, model.blips.evicted)
    return frames
