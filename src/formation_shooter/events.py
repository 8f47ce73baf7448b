"""
Events emitted by the simulation for the host (HUD, logs)
"""

from __future__ import annotations

from dataclasses import dataclass

from formation_shooter.status import GameStatus


@dataclass(frozen=True)
class ScoreChanged:
    score: int
    delta: int


@dataclass(frozen=True)
class StatusChanged:
    previous: GameStatus
    current: GameStatus


@dataclass(frozen=True)
class LevelCleared:
    level: int
    move_interval: float


GameEvent = ScoreChanged | StatusChanged | LevelCleared
