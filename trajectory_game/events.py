"""Typed input events and the handlers that apply them to a SimulationState."""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Union

from .simulation import SimulationState
from .vector_math import to_vector

logger = logging.getLogger(__name__)


class MouseButton(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


@dataclass(frozen=True, slots=True)
class Tick:
    delta_time: float


@dataclass(frozen=True, slots=True)
class MouseMove:
    position: tuple[float, float]


@dataclass(frozen=True, slots=True)
class MousePress:
    button: MouseButton


@dataclass(frozen=True, slots=True)
class MouseScroll:
    delta_y: float


@dataclass(frozen=True, slots=True)
class ViewportSize:
    width: float
    height: float


Event = Union[Tick, MouseMove, MousePress, MouseScroll]


def handle_tick(state: SimulationState, event: Tick, viewport: ViewportSize) -> None:
    state.cull(viewport.width, viewport.height)
    dt = event.delta_time * state.config.time_scale
    for projectile in state.projectiles:
        projectile.update(dt, state.gravity)


def handle_mouse_move(state: SimulationState, event: MouseMove) -> None:
    state.mouse_position = to_vector(event.position)
    state.recompute_trajectory()


def handle_mouse_press(state: SimulationState, event: MousePress) -> None:
    if event.button is MouseButton.LEFT:
        state.spawn(state.launcher_position.copy(), state.launch_velocity(), state.config.ball_radius)
    elif event.button is MouseButton.RIGHT:
        state.launcher_position = state.mouse_position.copy()
        state.recompute_trajectory()
        logger.debug("Launcher moved to (%.1f, %.1f)", *state.launcher_position)


def handle_mouse_scroll(state: SimulationState, event: MouseScroll) -> None:
    if event.delta_y < 0:
        state.trajectory_dot_count += 1
    elif state.trajectory_dot_count > 0:
        state.trajectory_dot_count -= 1
    state.recompute_trajectory()


def dispatch(
    state: SimulationState,
    event: Event,
    viewport_size: Callable[[], ViewportSize],
) -> None:
    """Route one event to its handler. The viewport is only queried for ticks."""
    if isinstance(event, Tick):
        handle_tick(state, event, viewport_size())
    elif isinstance(event, MouseMove):
        handle_mouse_move(state, event)
    elif isinstance(event, MousePress):
        handle_mouse_press(state, event)
    elif isinstance(event, MouseScroll):
        handle_mouse_scroll(state, event)
    else:
        raise TypeError(f"Unsupported event: {event!r}")
