"""
Formation Shooter entities
"""

from __future__ import annotations

from dataclasses import dataclass

from formation_shooter.settings import GameSettings


@dataclass
class Player:
    """
    Player entity
    """

    x: float
    y: float
    width: float
    height: float
    speed: float
    moving_left: bool = False
    moving_right: bool = False

    @classmethod
    def spawn(cls, settings: GameSettings) -> "Player":
        """Centered horizontally, resting above the bottom margin."""
        return cls(
            x=settings.canvas_width / 2 - settings.player_width / 2,
            y=settings.player_y,
            width=settings.player_width,
            height=settings.player_height,
            speed=settings.player_speed,
        )

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass
class Bullet:
    """
    Bullet entity
    """

    x: float
    y: float
    width: float
    height: float
    speed: float

    @classmethod
    def fired_by(cls, player: Player, settings: GameSettings) -> "Bullet":
        return cls(
            x=player.center_x - settings.bullet_width / 2,
            y=player.y - settings.bullet_height,
            width=settings.bullet_width,
            height=settings.bullet_height,
            speed=settings.bullet_speed,
        )


@dataclass
class Enemy:
    """
    Enemy entity
    """

    x: float
    y: float
    width: float
    height: float
    row: int = 0
    col: int = 0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height
