"""
Game status evaluation
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from formation_shooter.utils import logger

if TYPE_CHECKING:
    from formation_shooter.world import World


class GameStatus(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


def evaluate(world: World) -> bool:
    """
    Start the next level when the grid has been wiped out

    Score and player carry over; only the grid and its pacing change.

    :param world: World after collision resolution
    :type world: World

    :return: True when a level was cleared
    """
    if not world.is_running or world.enemies:
        return False

    world.formation.on_grid_cleared()
    world.next_level()
    logger.info(f"Level cleared, now on level {world.level}")

    return True
