"""
Enemy formation

The enemies move as one rigid body: a fixed horizontal step every
``move_interval`` ms, reversing and dropping when the grid touches a side of
the field.
"""

from __future__ import annotations

from formation_shooter.entities import Enemy
from formation_shooter.settings import GameSettings
from formation_shooter.utils import logger


class Formation:
    """
    Owns the enemy grid and its pacing
    """

    def __init__(self, settings: GameSettings):
        self.settings = settings
        self.enemies: list[Enemy] = []
        self.direction = 1
        self.last_move: float = 0
        self.move_interval: float = settings.move_interval

        self.spawn_grid()

    @property
    def total(self) -> int:
        return self.settings.enemy_rows * self.settings.enemy_cols

    @property
    def speed_factor(self) -> float:
        """
        Pressure ratio growing from 1.0 to 1.5 as the grid empties.

        Informational only: pacing is driven by ``move_interval`` alone.
        """
        return 1 + (1 - len(self.enemies) / self.total) * 0.5

    def spawn_grid(self) -> None:
        """
        Lay out a fresh grid, centered horizontally, row 0 on top
        """
        s = self.settings
        pitch_x = s.enemy_width + s.enemy_padding
        pitch_y = s.enemy_height + s.enemy_padding
        start_x = (s.canvas_width - s.grid_width) / 2

        self.enemies = [
            Enemy(
                x=start_x + col * pitch_x,
                y=s.enemy_top_offset + row * pitch_y,
                width=s.enemy_width,
                height=s.enemy_height,
                row=row,
                col=col,
            )
            for row in range(s.enemy_rows)
            for col in range(s.enemy_cols)
        ]

        logger.debug(f"Spawned {len(self.enemies)} enemies at x={start_x}")

    def advance(self, now: float | None) -> bool:
        """
        Step the formation if a move is due

        :param now: Current time in ms; a falsy value never moves
        :type now: float

        :return: True when the formation moved
        """
        # elapsed <= interval also covers timestamps going backwards
        if not now or now - self.last_move <= self.move_interval:
            return False

        width = self.settings.canvas_width
        left_most = min((e.x for e in self.enemies), default=width)
        right_most = max((e.right for e in self.enemies), default=0)

        drop = False
        if self.direction == 1 and right_most >= width:
            self.direction = -1
            drop = True
        elif self.direction == -1 and left_most <= 0:
            self.direction = 1
            drop = True

        dx = self.direction * self.settings.enemy_step
        dy = self.settings.enemy_drop_distance if drop else 0
        for enemy in self.enemies:
            enemy.x += dx
            enemy.y += dy

        if drop:
            logger.debug(f"Formation reversed to {self.direction:+d} and dropped {dy}px")

        self.last_move = now
        return True

    def on_grid_cleared(self) -> None:
        """
        Respawn the grid and speed up future moves
        """
        self.spawn_grid()
        self.move_interval = max(
            self.move_interval * self.settings.speed_up,
            self.settings.min_move_interval,
        )
        logger.debug(f"Move interval now {self.move_interval:.1f}ms")

    def reset(self) -> None:
        """
        Full reset for a new game, restoring the initial pacing
        """
        self.direction = 1
        self.last_move = 0
        self.move_interval = self.settings.move_interval
        self.spawn_grid()
