from __future__ import annotations

import numpy as np

from trajectory_game.scene import (
    BALL_COLOR,
    LAUNCHER_COLOR,
    LAUNCHER_RADIUS,
    TRAJECTORY_COLOR,
    TRAJECTORY_DOT_RADIUS,
    build_draw_list,
)
from trajectory_game.simulation import SimulationConfig, SimulationState


def test_draw_list_order_and_offsets():
    state = SimulationState(
        SimulationConfig(
            launcher_position=(0.0, 0.0),
            mouse_position=(25.0, 0.0),
            velocity_scale=(0.4, 0.4),
            trajectory_dot_count=2,
        )
    )
    state.launcher_position = np.array([100.0, 200.0])
    state.recompute_trajectory()
    state.spawn(np.array([50.0, 60.0]), np.zeros(2), 8.0)

    circles = build_draw_list(state)

    assert len(circles) == 1 + len(state.trajectory) + 1
    launcher, *dots, ball = circles
    assert launcher.center == (100.0, 200.0)
    assert launcher.radius == LAUNCHER_RADIUS
    assert launcher.color == LAUNCHER_COLOR

    for dot, (dx, dy) in zip(dots, state.trajectory):
        assert dot.center == (100.0 + dx, 200.0 + dy)
        assert dot.radius == TRAJECTORY_DOT_RADIUS
        assert dot.color == TRAJECTORY_COLOR

    assert ball.center == (50.0, 60.0)
    assert ball.radius == 8.0
    assert ball.color == BALL_COLOR


def test_draw_list_with_nothing_but_launcher():
    state = SimulationState(SimulationConfig(trajectory_dot_count=0))
    circles = build_draw_list(state)
    assert len(circles) == 1
    assert circles[0].center == (20.0, 250.0)


def test_balls_keep_spawn_order():
    state = SimulationState(SimulationConfig(trajectory_dot_count=0))
    for x in (30.0, 10.0, 20.0):
        state.spawn(np.array([x, 0.0]), np.zeros(2), 8.0)
    centers = [circle.center for circle in build_draw_list(state)[1:]]
    assert centers == [(30.0, 0.0), (10.0, 0.0), (20.0, 0.0)]
