"""Lightweight vector helpers for 2D projectile dynamics."""
from __future__ import annotations

import math
from typing import Iterable

import numpy as np

Vector = np.ndarray


def to_vector(value: Iterable[float] | Vector) -> Vector:
    """Convert any iterable to a float64 numpy vector."""
    return np.asarray(list(value), dtype=np.float64)


def add(a: Vector, b: Vector) -> Vector:
    return a + b


def subtract(a: Vector, b: Vector) -> Vector:
    return a - b


def multiply(a: Vector, b: Vector) -> Vector:
    """Component-wise product."""
    return a * b


def scale(vec: Vector, factor: float) -> Vector:
    return vec * factor


def magnitude(vec: Vector) -> float:
    return float(np.linalg.norm(vec))


def angle(vec: Vector) -> float:
    """Direction of vec in radians, measured from the +x axis."""
    return math.atan2(float(vec[1]), float(vec[0]))
