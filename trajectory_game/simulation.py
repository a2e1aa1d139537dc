from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .trajectory import predict_trajectory
from .vector_math import Vector, add, multiply, scale, subtract, to_vector

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SimulationConfig:
    gravity: tuple[float, float] = (0.0, 9.8)
    velocity_scale: tuple[float, float] = (1 / 2.5, 1 / 2.5)
    trajectory_dot_count: int = 10
    time_scale: float = 10.0  # simulation seconds per wall-clock second
    ball_radius: float = 8.0
    launcher_position: tuple[float, float] = (20.0, 250.0)
    mouse_position: tuple[float, float] = (0.0, 0.0)
    max_projectiles: Optional[int] = None

    def __post_init__(self) -> None:
        if self.trajectory_dot_count < 0:
            raise ValueError("Trajectory dot count must be non-negative")
        if self.ball_radius <= 0:
            raise ValueError("Ball radius must be positive")
        if self.time_scale < 0:
            raise ValueError("Time scale must be non-negative")
        if self.max_projectiles is not None and self.max_projectiles < 0:
            raise ValueError("Projectile cap must be non-negative")


@dataclass(slots=True)
class ProjectileState:
    position: Vector
    velocity: Vector


class Projectile:
    """Ball falling under constant gravity."""

    def __init__(self, position: Vector, velocity: Vector, radius: float) -> None:
        self._radius = float(radius)
        self.state = ProjectileState(
            position=to_vector(position),
            velocity=to_vector(velocity),
        )

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def position(self) -> Vector:
        return self.state.position

    @property
    def velocity(self) -> Vector:
        return self.state.velocity

    def update(self, dt: float, gravity: Vector) -> None:
        """Semi-implicit Euler step: velocity first, then position with the new velocity."""
        self.state.velocity = add(self.state.velocity, scale(gravity, dt))
        self.state.position = add(self.state.position, scale(self.state.velocity, dt))

    def is_outside(self, width: float, height: float) -> bool:
        """True once the ball has left sideways or dropped past the bottom edge."""
        x, y = self.state.position
        r = self._radius
        return x - r >= width or x + r <= 0 or y - r >= height

    def snapshot(self) -> ProjectileState:
        return ProjectileState(
            position=self.state.position.copy(),
            velocity=self.state.velocity.copy(),
        )


class SimulationState:
    """World data mutated by the input handlers and read by the renderer."""

    def __init__(self, config: SimulationConfig = SimulationConfig()) -> None:
        self.config = config
        self.mouse_position = to_vector(config.mouse_position)
        self.launcher_position = to_vector(config.launcher_position)
        self.gravity = to_vector(config.gravity)
        self.velocity_scale = to_vector(config.velocity_scale)
        self.trajectory_dot_count = config.trajectory_dot_count
        self.projectiles: list[Projectile] = []
        self.trajectory = np.empty((0, 2), dtype=np.float64)
        self.recompute_trajectory()

    def launch_velocity(self) -> Vector:
        return multiply(subtract(self.mouse_position, self.launcher_position), self.velocity_scale)

    def recompute_trajectory(self) -> None:
        self.trajectory = predict_trajectory(
            self.mouse_position,
            self.launcher_position,
            self.velocity_scale,
            self.gravity,
            self.trajectory_dot_count,
        )

    def spawn(self, position: Vector, velocity: Vector, radius: float) -> Projectile:
        projectile = Projectile(position, velocity, radius)
        self.projectiles.append(projectile)
        cap = self.config.max_projectiles
        if cap is not None and len(self.projectiles) > cap:
            dropped = len(self.projectiles) - cap
            del self.projectiles[:dropped]
            logger.debug("Projectile cap %d reached, dropped %d oldest", cap, dropped)
        logger.debug(
            "Spawned projectile at (%.1f, %.1f) with velocity (%.2f, %.2f)",
            projectile.position[0],
            projectile.position[1],
            projectile.velocity[0],
            projectile.velocity[1],
        )
        return projectile

    def cull(self, viewport_width: float, viewport_height: float) -> int:
        """Drop projectiles that left the viewport; survivors keep their order."""
        if not self.projectiles:
            return 0
        survivors = [p for p in self.projectiles if not p.is_outside(viewport_width, viewport_height)]
        removed = len(self.projectiles) - len(survivors)
        if removed:
            self.projectiles[:] = survivors
            logger.debug("Culled %d projectile(s), %d active", removed, len(survivors))
        return removed
