"""
pygame host for the simulation
"""

from __future__ import annotations

import argparse

import pygame

from formation_shooter.constants import (
    BACKGROUND_COLOR,
    BULLET_COLOR,
    PLAYER_COLOR,
    PLAYER_NOSE_COLOR,
    ROW_COLORS,
    TEXT_COLOR,
)
from formation_shooter.events import LevelCleared, ScoreChanged, StatusChanged
from formation_shooter.exceptions import SettingsError
from formation_shooter.input import Direction, PointerAdapter
from formation_shooter.scene import RenderRect, Snapshot
from formation_shooter.settings import GameSettings
from formation_shooter.simulation import Simulation
from formation_shooter.status import GameStatus
from formation_shooter.utils import configure_logging, logger

CAPTION = "Formation Shooter"

KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

MOUSE_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP)


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)

    return screen


class Game:
    """
    Runs the simulation in a pygame window
    """

    def __init__(self, settings: GameSettings | None = None):
        """
        :param settings: Game settings
        :type settings: GameSettings
        """
        self.settings = settings or GameSettings()
        logger.debug(f"Initializing {CAPTION}")
        pygame.init()

        self._screen = set_screen(
            CAPTION, self.settings.canvas_width, self.settings.canvas_height
        )
        self._clock = pygame.time.Clock()
        self._carry_on = True

        self.simulation = Simulation(self.settings)
        self.pointer = PointerAdapter(
            self.simulation,
            self.settings.canvas_width,
            self.settings.double_tap_window,
        )
        self.snapshot: Snapshot = self.simulation.snapshot()

        self._fonts = {
            "large": pygame.font.Font(None, 48),
            "medium": pygame.font.Font(None, 32),
            "small": pygame.font.Font(None, 24),
        }
        self._shade = pygame.Color(0, 0, 0, 77)
        self._overlay = pygame.Surface(
            (self.settings.canvas_width, self.settings.canvas_height), pygame.SRCALPHA
        )
        self._overlay.fill(pygame.Color(0, 0, 0, 178))

    @property
    def carry_on(self) -> bool:
        return self._carry_on

    def handle_event(self, event: pygame.event.Event, now: int) -> None:
        """
        Translate one pygame event into simulation intents

        :param event: Event from the queue
        :type event: pygame.event.Event

        :param now: Current time in ms
        :type now: int
        """
        width = self.settings.canvas_width

        if event.type == pygame.QUIT:
            logger.debug("Quitting the game")
            self._carry_on = False
        elif event.type == pygame.KEYDOWN:
            if event.key in KEY_DIRECTIONS:
                self.simulation.set_intent(KEY_DIRECTIONS[event.key], True)
            elif event.key == pygame.K_SPACE:
                self.simulation.fire(now)
            elif event.key == pygame.K_RETURN:
                self.snapshot = self.simulation.start_or_restart()
                self.log_events(self.snapshot)
            elif event.key == pygame.K_ESCAPE:
                logger.debug("Quitting the game")
                self._carry_on = False
        elif event.type == pygame.KEYUP:
            if event.key in KEY_DIRECTIONS:
                self.simulation.set_intent(KEY_DIRECTIONS[event.key], False)
        elif event.type in MOUSE_EVENTS and getattr(event, "touch", False):
            # SDL mirrors every touch as a mouse event; the FINGER events handle it
            return
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.pointer.press(event.pos[0], now)
        elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
            self.pointer.move(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.pointer.release()
        elif event.type == pygame.FINGERDOWN:
            self.pointer.press(event.x * width, now)
        elif event.type == pygame.FINGERMOTION:
            self.pointer.move(event.x * width)
        elif event.type == pygame.FINGERUP:
            self.pointer.release()

    def handle_events(self) -> None:
        now = pygame.time.get_ticks()
        for event in pygame.event.get():
            self.handle_event(event, now)

    def handle_game_logic(self) -> None:
        self.snapshot = self.simulation.tick(pygame.time.get_ticks())
        self.log_events(self.snapshot)

    def log_events(self, snapshot: Snapshot) -> list[str]:
        """
        Log what happened during the last tick

        :return: The logged messages
        """
        messages = []
        for event in snapshot.events:
            if isinstance(event, ScoreChanged):
                messages.append(f"Points: {event.score}")
            elif isinstance(event, LevelCleared):
                messages.append(
                    f"Level {event.level}, enemies every {event.move_interval:.0f}ms"
                )
            elif isinstance(event, StatusChanged):
                if event.current is GameStatus.GAME_OVER:
                    messages.append(f"You lost! Final score: {snapshot.score}")
                else:
                    messages.append(f"Game {event.current.value}")

        for message in messages:
            logger.debug(message)

        return messages

    def _draw_rect(self, rect: RenderRect, color) -> None:
        pygame.draw.rect(
            self._screen,
            pygame.Color(color),
            pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height)),
        )

    def _draw_enemy(self, rect: RenderRect) -> None:
        self._draw_rect(rect, ROW_COLORS[(rect.color_index or 0) % len(ROW_COLORS)])

        x, y = int(rect.x), int(rect.y)
        w, h = int(rect.width), int(rect.height)
        details = pygame.Surface((w, h), pygame.SRCALPHA)
        details.fill(self._shade, pygame.Rect(5, 8, w - 10, h - 16))
        details.fill(self._shade, pygame.Rect(5, h - 8, w - 10, 4))
        self._screen.blit(details, (x, y))

    def _draw_text(self, text: str, size: str, center_y: int) -> None:
        surface = self._fonts[size].render(text, True, pygame.Color(TEXT_COLOR))
        rect = surface.get_rect(center=(self.settings.canvas_width // 2, center_y))
        self._screen.blit(surface, rect)

    def draw_stuff(self) -> None:
        """
        Draw the stuff
        """
        snapshot = self.snapshot
        self._screen.fill(BACKGROUND_COLOR)

        player = snapshot.player
        self._draw_rect(player, PLAYER_COLOR)
        nose = RenderRect("nose", player.x + player.width / 2 - 2, player.y - 5, 4, 5)
        self._draw_rect(nose, PLAYER_NOSE_COLOR)

        for bullet in snapshot.bullets:
            self._draw_rect(bullet, BULLET_COLOR)

        for enemy in snapshot.enemies:
            self._draw_enemy(enemy)

        score = self._fonts["small"].render(
            f"Score: {snapshot.score}  Level: {snapshot.level}",
            True,
            pygame.Color(TEXT_COLOR),
        )
        self._screen.blit(score, (10, 10))

        middle = self.settings.canvas_height // 2
        if snapshot.status is GameStatus.GAME_OVER:
            self._screen.blit(self._overlay, (0, 0))
            self._draw_text("GAME OVER", "large", middle - 20)
            self._draw_text(f"Score: {snapshot.score}", "medium", middle + 20)
            self._draw_text("Press Enter to play again", "small", middle + 60)
        elif snapshot.status is GameStatus.NOT_STARTED:
            self._draw_text("Press Enter to start", "medium", middle)

        pygame.display.flip()

    def run(self) -> None:
        """
        Run the game
        """
        logger.debug("Running the game")

        while self._carry_on:
            self._clock.tick(self.settings.fps)
            self.handle_events()
            self.handle_game_logic()
            self.draw_stuff()

        pygame.quit()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=CAPTION)
    parser.add_argument("--config", help="YAML file overriding the game settings")
    parser.add_argument("--fps", type=int, help="Frames per second")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> GameSettings:
    """
    Build the settings from the command line

    :raise SettingsError: If the config file or the overrides are invalid
    """
    settings = GameSettings.from_yaml(args.config) if args.config else GameSettings()

    overrides = {}
    if args.fps is not None:
        overrides["fps"] = args.fps
    if args.debug:
        overrides["log_level"] = "DEBUG"

    if overrides:
        settings = GameSettings.from_dict({**settings.to_dict(), **overrides})

    return settings


def main(argv: list[str] | None = None) -> None:
    """
    Main entry point
    """
    args = parse_args(argv)
    configure_logging("DEBUG" if args.debug else "INFO")

    try:
        settings = load_settings(args)
    except SettingsError as e:
        logger.error(f"Failed to load settings: {e}")
        raise

    configure_logging(settings.log_level)
    logger.info(f"Starting {CAPTION}")
    logger.debug(settings.to_dict())

    Game(settings).run()


if __name__ == "__main__":
    main()
