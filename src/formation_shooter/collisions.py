"""
Collision resolution
"""

from __future__ import annotations

from formation_shooter.status import GameStatus
from formation_shooter.utils import intersects, logger
from formation_shooter.world import World


def resolve_bullet_hits(world: World) -> int:
    """
    Remove every bullet/enemy pair that overlaps and score them.

    Both lists are scanned from the end, so when a bullet overlaps several
    enemies the one with the highest index is destroyed. A bullet destroys at
    most one enemy.

    :param world: World to mutate
    :type world: World

    :return: Number of enemies destroyed
    """
    bullets = world.bullets
    enemies = world.enemies
    hits = 0

    for i in range(len(bullets) - 1, -1, -1):
        bullet = bullets[i]
        for j in range(len(enemies) - 1, -1, -1):
            if intersects(bullet, enemies[j]):
                del bullets[i]
                enemy = enemies.pop(j)
                world.add_points(world.settings.points_per_enemy)
                hits += 1
                logger.debug(f"Hit! enemy row={enemy.row} col={enemy.col}")
                break

    return hits


def resolve_player_hits(world: World) -> bool:
    """
    End the game when an enemy touches the player or crosses its line

    :param world: World to mutate
    :type world: World

    :return: True when the game ended
    """
    player = world.player

    for enemy in world.enemies:
        if intersects(player, enemy):
            logger.info("Player destroyed, game over")
            world.set_status(GameStatus.GAME_OVER)
            return True

        if enemy.bottom >= player.y:
            logger.info("Enemies reached the defense line, game over")
            world.set_status(GameStatus.GAME_OVER)
            return True

    return False


def resolve(world: World) -> None:
    resolve_bullet_hits(world)
    resolve_player_hits(world)
