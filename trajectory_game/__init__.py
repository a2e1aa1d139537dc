"""Interactive 2D projectile trajectory demo."""

from .events import (
    MouseButton,
    MouseMove,
    MousePress,
    MouseScroll,
    Tick,
    ViewportSize,
    dispatch,
)
from .scene import Circle, build_draw_list
from .simulation import Projectile, ProjectileState, SimulationConfig, SimulationState
from .trajectory import predict_trajectory

__all__ = [
    "Circle",
    "MouseButton",
    "MouseMove",
    "MousePress",
    "MouseScroll",
    "Projectile",
    "ProjectileState",
    "SimulationConfig",
    "SimulationState",
    "Tick",
    "ViewportSize",
    "build_draw_list",
    "dispatch",
    "predict_trajectory",
]
