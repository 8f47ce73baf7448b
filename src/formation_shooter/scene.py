"""
Renderable scene description
"""

from __future__ import annotations

from dataclasses import dataclass

from formation_shooter.entities import Bullet, Enemy, Player
from formation_shooter.events import GameEvent
from formation_shooter.status import GameStatus
from formation_shooter.world import World


@dataclass(frozen=True)
class RenderRect:
    """
    One rectangle to draw; enemies carry their row as colour index
    """

    kind: str
    x: float
    y: float
    width: float
    height: float
    color_index: int | None = None

    @classmethod
    def of_player(cls, player: Player) -> "RenderRect":
        return cls("player", player.x, player.y, player.width, player.height)

    @classmethod
    def of_bullet(cls, bullet: Bullet) -> "RenderRect":
        return cls("bullet", bullet.x, bullet.y, bullet.width, bullet.height)

    @classmethod
    def of_enemy(cls, enemy: Enemy) -> "RenderRect":
        return cls("enemy", enemy.x, enemy.y, enemy.width, enemy.height, enemy.row)


@dataclass(frozen=True)
class Snapshot:
    """
    Immutable view of the world after a tick
    """

    player: RenderRect
    bullets: tuple[RenderRect, ...]
    enemies: tuple[RenderRect, ...]
    score: int
    status: GameStatus
    level: int
    move_interval: float
    events: tuple[GameEvent, ...] = ()

    @classmethod
    def of(cls, world: World, events: tuple[GameEvent, ...] = ()) -> "Snapshot":
        return cls(
            player=RenderRect.of_player(world.player),
            bullets=tuple(RenderRect.of_bullet(b) for b in world.bullets),
            enemies=tuple(RenderRect.of_enemy(e) for e in world.enemies),
            score=world.score,
            status=world.status,
            level=world.level,
            move_interval=world.formation.move_interval,
            events=events,
        )

    @property
    def rects(self) -> tuple[RenderRect, ...]:
        """Draw order: player, bullets, enemies."""
        return (self.player, *self.bullets, *self.enemies)

    @property
    def is_game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER
