"""
Coordinate transformations for the radar display

Maps sweep angles and distances to screen coordinates. Angle 0 is the right
end of the baseline, 180 the left end and 90 points straight up from the pivot.
Screen y grows downwards.
"""

import numpy as np

from ..utils.constants import BLIP_ALPHA_FLOOR, BLIP_ALPHA_MAX


def polar_to_screen(angle_deg, radius, pivot):
    """
    Convert sweep angle and pixel radius to screen coordinates

    Args:
        angle_deg: Sweep angle(s) in degrees (scalar or array)
        radius: Distance(s) from the pivot in pixels (scalar or array)
        pivot: (x, y) screen position of the pivot

    Returns:
        ndarray: (..., 2) array of (x, y) screen coordinates
    """
    theta = np.radians(180.0 - np.asarray(angle_deg, dtype=np.float64))
    radius = np.asarray(radius, dtype=np.float64)

    x = pivot[0] + radius * np.cos(theta)
    y = pivot[1] - radius * np.sin(theta)

    return np.stack([x, y], axis=-1)


def distance_to_radius(distance_cm, max_range_cm, radar_radius):
    """
    Scale distances to pixel radii, saturating at the outer ring

    Args:
        distance_cm: Distance(s) in cm
        max_range_cm: Distance drawn on the outer ring
        radar_radius: Outer ring radius in pixels

    Returns:
        ndarray: Radii in pixels, in [0, radar_radius]
    """
    distance_cm = np.asarray(distance_cm, dtype=np.float64)
    fraction = np.clip(distance_cm / float(max_range_cm), 0.0, 1.0)
    return fraction * radar_radius


def blip_positions(angles_deg, distances_cm, max_range_cm, radar_radius, pivot):
    """
    Screen positions for a batch of blips

    Args:
        angles_deg: Blip sweep angles
        distances_cm: Blip distances in cm
        max_range_cm: Distance drawn on the outer ring
        radar_radius: Outer ring radius in pixels
        pivot: (x, y) screen position of the pivot

    Returns:
        ndarray: (N, 2) screen coordinates
    """
    radii = distance_to_radius(distances_cm, max_range_cm, radar_radius)
    return polar_to_screen(angles_deg, radii, pivot).reshape(-1, 2)


def blip_alphas(ages, lifetime, floor=BLIP_ALPHA_FLOOR, ceiling=BLIP_ALPHA_MAX):
    """
    Fade blips linearly from full opacity to a floor as they age

    Args:
        ages: Blip ages in seconds
        lifetime: Blip lifetime in seconds
        floor: Alpha at the end of the lifetime
        ceiling: Alpha of a new blip

    Returns:
        ndarray: Alpha values (int) in [floor, ceiling]
    """
    ages = np.asarray(ages, dtype=np.float64)
    t = np.clip(1.0 - ages / lifetime, 0.0, 1.0)
    return (floor + (ceiling - floor) * t).astype(np.int32)


def arc_points(radius, pivot, start_deg=0.0, end_deg=180.0, segments=120):
    """
    Polyline approximating a range arc

    Args:
        radius: Arc radius in pixels
        pivot: (x, y) screen position of the pivot
        start_deg: First sweep angle
        end_deg: Last sweep angle
        segments: Number of line segments

    Returns:
        ndarray: (segments + 1, 2) screen coordinates
    """
    angles = np.linspace(start_deg, end_deg, segments + 1)
    return polar_to_screen(angles, radius, pivot)
