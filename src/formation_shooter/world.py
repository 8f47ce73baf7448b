"""
World aggregate
"""

from __future__ import annotations

from dataclasses import dataclass, field

from formation_shooter.entities import Bullet, Enemy, Player
from formation_shooter.events import GameEvent, LevelCleared, ScoreChanged, StatusChanged
from formation_shooter.formation import Formation
from formation_shooter.settings import GameSettings
from formation_shooter.status import GameStatus
from formation_shooter.utils import logger


@dataclass
class World:
    """
    Everything the simulation mutates during a tick
    """

    settings: GameSettings
    player: Player
    formation: Formation
    bullets: list[Bullet] = field(default_factory=list)
    score: int = 0
    level: int = 1
    status: GameStatus = GameStatus.NOT_STARTED
    events: list[GameEvent] = field(default_factory=list)

    @classmethod
    def create(cls, settings: GameSettings) -> "World":
        return cls(
            settings=settings,
            player=Player.spawn(settings),
            formation=Formation(settings),
        )

    @property
    def enemies(self) -> list[Enemy]:
        return self.formation.enemies

    @property
    def is_running(self) -> bool:
        return self.status is GameStatus.RUNNING

    def add_points(self, points: int) -> None:
        self.score += points
        self.events.append(ScoreChanged(score=self.score, delta=points))

    def set_status(self, status: GameStatus) -> None:
        if status is self.status:
            return
        logger.debug(f"Status {self.status.value} -> {status.value}")
        self.events.append(StatusChanged(previous=self.status, current=status))
        self.status = status

    def next_level(self) -> None:
        self.level += 1
        self.events.append(
            LevelCleared(level=self.level, move_interval=self.formation.move_interval)
        )

    def drain_events(self) -> list[GameEvent]:
        events, self.events = self.events, []
        return events
