"""
Simulation step

Owns the world and advances it one tick at a time. Hosts feed it intents
between ticks and draw the snapshot each tick returns.
"""

from __future__ import annotations

from formation_shooter import collisions, status
from formation_shooter.entities import Bullet, Player
from formation_shooter.input import Direction, InputController
from formation_shooter.scene import Snapshot
from formation_shooter.settings import GameSettings
from formation_shooter.status import GameStatus
from formation_shooter.utils import logger
from formation_shooter.world import World


class Simulation:
    """
    Per-tick orchestrator and game lifecycle
    """

    def __init__(self, settings: GameSettings | None = None):
        """
        :param settings: Playfield configuration, defaults to the classic field
        :type settings: GameSettings
        """
        self.settings = settings or GameSettings()
        self.world = World.create(self.settings)
        self.controller = InputController(self.settings.shoot_cooldown)

    @property
    def status(self) -> GameStatus:
        return self.world.status

    def set_intent(self, direction: Direction, active: bool) -> None:
        """
        Press or release a movement intent. Presses only count while running.

        :param direction: Which way
        :type direction: Direction

        :param active: Pressed or released
        :type active: bool
        """
        if active and not self.world.is_running:
            return
        self.controller.set_intent(direction, active)

    def fire(self, now: float) -> bool:
        """
        Fire a bullet from the player if the cooldown allows it

        :param now: Current time in ms
        :type now: float

        :return: True when a bullet was spawned
        """
        if not self.world.is_running or not self.controller.fire(now):
            return False

        bullet = Bullet.fired_by(self.world.player, self.settings)
        self.world.bullets.append(bullet)
        logger.debug(f"Shooting bullet at ({bullet.x}, {bullet.y})")

        return True

    def tick(self, now: float) -> Snapshot:
        """
        Advance the world by one frame

        :param now: Monotonic timestamp in ms
        :type now: float

        :return: Snapshot
        """
        if not self.world.is_running:
            return self.snapshot()

        self._update_player()
        self._update_bullets()
        self.world.formation.advance(now)
        collisions.resolve(self.world)
        status.evaluate(self.world)

        return self.snapshot()

    def _update_player(self) -> None:
        player = self.world.player
        max_x = self.settings.player_max_x

        player.moving_left = self.controller.moving_left
        player.moving_right = self.controller.moving_right

        if player.moving_left and player.x > 0:
            player.x = max(player.x - player.speed, 0)

        if player.moving_right and player.x < max_x:
            player.x = min(player.x + player.speed, max_x)

    def _update_bullets(self) -> None:
        bullets = self.world.bullets

        for i in range(len(bullets) - 1, -1, -1):
            bullets[i].y -= bullets[i].speed
            if bullets[i].y < 0:
                del bullets[i]

    def start_or_restart(self) -> Snapshot:
        """
        Start a new game, or a fresh one after a game over. No-op while running.
        """
        if self.world.is_running:
            return self.snapshot()

        if self.world.status is GameStatus.GAME_OVER:
            logger.info("Restarting the game")
            self._reset_world()
        else:
            logger.info("Starting the game")

        self.world.set_status(GameStatus.RUNNING)
        return self.snapshot()

    def stop(self) -> Snapshot:
        """
        Halt a running game at the tick boundary, keeping the world as is
        """
        if self.world.is_running:
            logger.info("Stopping the game")
            self.controller.reset()
            self.world.set_status(GameStatus.NOT_STARTED)
        return self.snapshot()

    def reset(self) -> Snapshot:
        """
        Full reset back to a fresh, not yet started game
        """
        self._reset_world()
        self.world.set_status(GameStatus.NOT_STARTED)
        return self.snapshot()

    def _reset_world(self) -> None:
        world = self.world
        world.player = Player.spawn(self.settings)
        world.bullets.clear()
        world.score = 0
        world.level = 1
        world.formation.reset()
        self.controller.reset()

    def snapshot(self) -> Snapshot:
        """
        Current world as an immutable snapshot, carrying the pending events
        """
        return Snapshot.of(self.world, tuple(self.world.drain_events()))
