from __future__ import annotations

import logging
from typing import Callable

import pygame

from trajectory_game.events import (
    Event,
    MouseButton,
    MouseMove,
    MousePress,
    MouseScroll,
    Tick,
    ViewportSize,
    dispatch,
)
from trajectory_game.logging_config import setup_logging
from trajectory_game.scene import Circle, build_draw_list
from trajectory_game.simulation import SimulationConfig, SimulationState

WIDTH, HEIGHT = 900, 500
TITLE = "Trajectory of a Projectile"
BACKGROUND_COLOR = (0, 0, 0)
HUD_COLOR = (230, 235, 245)
FPS_TARGET = 120

PYGAME_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}

logger = logging.getLogger("trajectory_game.game")


def translate_event(event: pygame.event.Event) -> Event | None:
    if event.type == pygame.MOUSEMOTION:
        return MouseMove(position=(float(event.pos[0]), float(event.pos[1])))
    if event.type == pygame.MOUSEBUTTONDOWN and event.button in PYGAME_BUTTONS:
        return MousePress(button=PYGAME_BUTTONS[event.button])
    if event.type == pygame.MOUSEWHEEL:
        return MouseScroll(delta_y=float(event.y))
    return None


def handle_events(state: SimulationState, viewport: Callable[[], ViewportSize]) -> bool:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        translated = translate_event(event)
        if translated is not None:
            dispatch(state, translated, viewport)
    return True


def draw_circle(surface: pygame.Surface, circle: Circle) -> None:
    cx, cy = round(circle.center[0]), round(circle.center[1])
    radius = max(1, round(circle.radius))
    if circle.color[3] == 255:
        pygame.draw.circle(surface, circle.color[:3], (cx, cy), radius)
        return
    # Plain display surfaces ignore alpha, so blend through a per-circle sprite
    sprite = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
    pygame.draw.circle(sprite, circle.color, (radius, radius), radius)
    surface.blit(sprite, (cx - radius, cy - radius))


def draw_circles(surface: pygame.Surface, circles: list[Circle]) -> None:
    for circle in circles:
        draw_circle(surface, circle)


def draw_hud(surface: pygame.Surface, state: SimulationState, font: pygame.font.Font) -> None:
    hud_lines = [
        "Left click fire | Right click move launcher | Wheel preview length",
        f"Preview dots: {state.trajectory_dot_count} | Balls: {len(state.projectiles)}",
    ]
    for idx, text in enumerate(hud_lines):
        surface.blit(font.render(text, True, HUD_COLOR), (16, 16 + idx * 20))


def main() -> None:
    setup_logging()
    pygame.init()
    pygame.font.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    font = pygame.font.SysFont("JetBrains Mono", 16)
    clock = pygame.time.Clock()

    state = SimulationState(SimulationConfig())

    def viewport() -> ViewportSize:
        width, height = pygame.display.get_surface().get_size()
        return ViewportSize(float(width), float(height))

    logger.info("Window opened at %dx%d", WIDTH, HEIGHT)

    running = True
    while running:
        dt = clock.tick(FPS_TARGET) / 1000.0

        running = handle_events(state, viewport)
        if not running:
            break

        dispatch(state, Tick(delta_time=dt), viewport)

        screen.fill(BACKGROUND_COLOR)
        draw_circles(screen, build_draw_list(state))
        draw_hud(screen, state, font)

        pygame.display.flip()

    logger.info("Shutting down with %d active ball(s)", len(state.projectiles))
    pygame.quit()


if __name__ == "__main__":
    main()
