"""Dotted trajectory preview for the launcher."""
from __future__ import annotations

import math

import numpy as np

from .vector_math import Vector, angle, magnitude, multiply, subtract


def predict_trajectory(
    mouse_position: Vector,
    launcher_position: Vector,
    velocity_scale: Vector,
    gravity: Vector,
    dot_count: int,
) -> np.ndarray:
    """Return ``dot_count`` preview points as displacements from the launcher.

    The dot index ``t`` (1..dot_count) is used as the time parameter, so the
    arc is a stylised preview and does not match the stepped flight of a
    launched ball exactly.
    """
    launch_velocity = multiply(subtract(mouse_position, launcher_position), velocity_scale)
    speed = magnitude(launch_velocity)
    launch_angle = angle(launch_velocity)

    t = np.arange(1, dot_count + 1, dtype=np.float64)
    x = speed * t * math.cos(launch_angle)
    y = speed * t * math.sin(launch_angle) - 0.5 * (-float(gravity[1])) * t**2
    return np.stack((x, y), axis=1)
