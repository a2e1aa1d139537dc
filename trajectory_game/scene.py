"""Per-frame draw list built from the simulation state."""
from __future__ import annotations

from dataclasses import dataclass

from .simulation import SimulationState

Color = tuple[int, int, int, int]

LAUNCHER_COLOR: Color = (0, 255, 0, 255)
TRAJECTORY_COLOR: Color = (255, 0, 0, 128)
BALL_COLOR: Color = (255, 255, 255, 255)
LAUNCHER_RADIUS = 5.0
TRAJECTORY_DOT_RADIUS = 3.0


@dataclass(frozen=True, slots=True)
class Circle:
    center: tuple[float, float]
    radius: float
    color: Color


def build_draw_list(state: SimulationState) -> list[Circle]:
    """Launcher marker, then preview dots, then balls, in draw order."""
    lx, ly = (float(v) for v in state.launcher_position)
    circles = [Circle((lx, ly), LAUNCHER_RADIUS, LAUNCHER_COLOR)]
    circles.extend(
        Circle((float(dx) + lx, float(dy) + ly), TRAJECTORY_DOT_RADIUS, TRAJECTORY_COLOR)
        for dx, dy in state.trajectory
    )
    circles.extend(
        Circle((float(p.position[0]), float(p.position[1])), p.radius, BALL_COLOR)
        for p in state.projectiles
    )
    return circles
