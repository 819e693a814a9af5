"""Window, main loop and switching between the games."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Callable
from enum import Enum

from arcadesixteen.arkanoid import ArkanoidGame
from arcadesixteen.asteroids import AsteroidsGame, Controls, load_highscore
from arcadesixteen.button import Button

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
TIME_STEP = 1 / 60


class GameState(Enum):
    """Which screen is active."""

    MENU = "menu"
    TETRIS = "tetris"
    ARKANOID = "arkanoid"
    SPACE_INVADERS = "space_invaders"
    PONG = "pong"
    ASTEROIDS = "asteroids"
    PACMAN = "pacman"
    SIMON = "simon"
    SUPER_MARIO = "super_mario"


def run_frames(
    frame_time: float, step: Callable[[float], object], max_step: float
) -> list[float]:
    """Split frame_time into steps no longer than max_step; return the steps taken."""
    taken = []
    while frame_time > 0.0:
        delta = min(frame_time, max_step)
        step(delta)
        taken.append(delta)
        frame_time -= delta
    return taken


def _draw_button(pygame, surface, font, button: Button) -> None:
    rect = button.rect
    pygame.draw.rect(surface, button.color, (rect.x, rect.y, rect.width, rect.height))
    if button.outline_thickness and button.outline_color:
        pygame.draw.rect(
            surface, button.outline_color, (rect.x, rect.y, rect.width, rect.height),
            int(button.outline_thickness),
        )
    surface.blit(font.render(button.label, True, button.text_color), button.text_position)


class _MenuScene:
    def __init__(self) -> None:
        self.next_state: GameState | None = None
        self.buttons = {
            GameState.ARKANOID: Button("Arkanoid", (270.0, 150.0), (100.0, 40.0)),
            GameState.ASTEROIDS: Button("Asteroids", (270.0, 210.0), (100.0, 40.0)),
        }

    def update(self, delta, keys, mouse, pressed, pygame) -> None:
        for state, button in self.buttons.items():
            if button.is_clicked(*mouse, pressed):
                self.next_state = state

    def draw(self, pygame, surface, fonts) -> None:
        for button in self.buttons.values():
            _draw_button(pygame, surface, fonts["small"], button)


class _ArkanoidScene:
    def __init__(self) -> None:
        self.next_state: GameState | None = None
        self.game = ArkanoidGame()

    def update(self, delta, keys, mouse, pressed, pygame) -> None:
        if self.game.back_button.is_clicked(*mouse, pressed):
            self.next_state = GameState.MENU
        self.game.update(delta, keys[pygame.K_LEFT], keys[pygame.K_RIGHT])

    def restart(self) -> None:
        if self.game.game_over:
            self.game.reset()

    def draw(self, pygame, surface, fonts) -> None:
        game = self.game
        ball = game.ball_rect
        pygame.draw.ellipse(surface, (255, 255, 255), (ball.x, ball.y, ball.width, ball.height))
        for block in game.blocks:
            pygame.draw.rect(surface, (0, 255, 0), (block.x, block.y, block.width, block.height))
        _draw_button(pygame, surface, fonts["small"], game.back_button)
        paddle = game.paddle_rect
        pygame.draw.rect(surface, (255, 0, 0), (paddle.x, paddle.y, paddle.width, paddle.height))


class _AsteroidsScene:
    def __init__(self, highscore_path: str) -> None:
        self.next_state: GameState | None = None
        try:
            highscore = load_highscore(highscore_path)
        except (OSError, ValueError):
            highscore = 0
        self.game = AsteroidsGame(highscore=highscore, highscore_path=highscore_path)

    def update(self, delta, keys, mouse, pressed, pygame) -> None:
        if self.game.back_button.is_clicked(*mouse, pressed):
            self.next_state = GameState.MENU
        controls = Controls(
            left=bool(keys[pygame.K_LEFT]),
            right=bool(keys[pygame.K_RIGHT]),
            shoot=bool(keys[pygame.K_SPACE]),
            move=bool(keys[pygame.K_UP]),
        )
        self.game.update(delta, controls)

    def restart(self) -> None:
        if self.game.game_over:
            self.game.reset()

    def draw(self, pygame, surface, fonts) -> None:
        game = self.game
        surface.fill((0, 0, 0))
        _draw_button(pygame, surface, fonts["small"], game.back_button)

        x, y = game.ship_position
        r = game.ship_radius
        angle = math.radians(game.ship_angle)
        points = [
            (x + math.cos(angle + offset) * r * scale, y + math.sin(angle + offset) * r * scale)
            for offset, scale in ((0.0, 1.0), (2.5, 1.0), (-2.5, 1.0))
        ]
        pygame.draw.polygon(surface, (255, 255, 255), points, 1)

        for bullet in game.bullets:
            pygame.draw.circle(surface, (255, 255, 255), bullet.position, bullet.radius)
        for asteroid in (*game.big, *game.medium, *game.small):
            pygame.draw.circle(surface, (180, 180, 180), asteroid.position, asteroid.r, 1)

        font = fonts["large"]
        surface.blit(font.render(f"Score: {game.score}", True, (255, 255, 255)), (20, 10))
        surface.blit(font.render(f"Highscore: {game.highscore}", True, (255, 255, 255)), (200, 10))


def _make_scene(state: GameState, highscore_path: str):
    if state is GameState.ARKANOID:
        return _ArkanoidScene()
    if state is GameState.ASTEROIDS:
        return _AsteroidsScene(highscore_path)
    return _MenuScene()


def main(argv: list[str] | None = None) -> int:
    """Open the arcade window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="arcadesixteen", description="Small arcade games.")
    parser.add_argument(
        "--game",
        choices=[s.value for s in (GameState.MENU, GameState.ARKANOID, GameState.ASTEROIDS)],
        default=GameState.MENU.value,
    )
    parser.add_argument("--highscore-file", default="res/asteroids/hs.txt")
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Arcade 16")
        fonts = {
            "small": pygame.font.SysFont("arial", 14),
            "large": pygame.font.SysFont("arial", 26),
        }
        scene = _make_scene(GameState(args.game), args.highscore_file)
        limiter = pygame.time.Clock()
        current = time.perf_counter()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    restart = getattr(scene, "restart", None)
                    if restart is not None:
                        restart()

            keys = pygame.key.get_pressed()
            mouse = pygame.mouse.get_pos()
            pressed = bool(pygame.mouse.get_pressed()[0])

            now = time.perf_counter()
            frame_time = now - current
            current = now
            run_frames(
                frame_time,
                lambda dt: scene.update(dt, keys, mouse, pressed, pygame),
                TIME_STEP,
            )
            if scene.next_state is not None:
                scene = _make_scene(scene.next_state, args.highscore_file)

            surface.fill((50, 50, 50))
            scene.draw(pygame, surface, fonts)
            pygame.display.flip()
            limiter.tick(120)
    finally:
        pygame.quit()
    return 0