"""
Tests for bullet/enemy and enemy/player collision resolution.
"""

from formation_shooter import collisions
from formation_shooter.entities import Bullet, Enemy
from formation_shooter.events import ScoreChanged, StatusChanged
from formation_shooter.status import GameStatus
from formation_shooter.utils import intersects
from formation_shooter.world import World


def make_world(settings, enemies, bullets=()):
    world = World.create(settings)
    world.status = GameStatus.RUNNING
    world.formation.enemies = list(enemies)
    world.bullets = list(bullets)
    return world


def bullet_at(x, y):
    return Bullet(x=x, y=y, width=3, height=15, speed=7)


def enemy_at(x, y, row=0, col=0):
    return Enemy(x=x, y=y, width=30, height=30, row=row, col=col)


class TestIntersects:
    """Test the strict overlap rule."""

    def test_overlap(self):
        assert intersects(bullet_at(10, 10), enemy_at(0, 0))

    def test_touching_edges_do_not_overlap(self):
        assert not intersects(bullet_at(30, 10), enemy_at(0, 0))
        assert not intersects(bullet_at(10, 30), enemy_at(0, 0))
        assert not intersects(bullet_at(-3, 10), enemy_at(0, 0))
        assert not intersects(bullet_at(10, -15), enemy_at(0, 0))


class TestBulletHits:
    """Test bullet/enemy removal and scoring."""

    def test_hit_removes_both_and_scores(self, settings):
        world = make_world(
            settings,
            [enemy_at(100, 100), enemy_at(200, 100)],
            [bullet_at(110, 110)],
        )

        assert collisions.resolve_bullet_hits(world) == 1

        assert world.bullets == []
        assert [e.x for e in world.enemies] == [200]
        assert world.score == 10
        assert world.events == [ScoreChanged(score=10, delta=10)]

    def test_miss_keeps_everything(self, settings):
        world = make_world(settings, [enemy_at(100, 100)], [bullet_at(300, 300)])

        assert collisions.resolve_bullet_hits(world) == 0
        assert len(world.bullets) == 1
        assert len(world.enemies) == 1
        assert world.score == 0

    def test_bullet_destroys_at_most_one_enemy(self, settings):
        """Test that the last enemy in list order wins the tie."""
        first = enemy_at(100, 100, col=0)
        last = enemy_at(100, 100, col=1)
        world = make_world(settings, [first, last], [bullet_at(110, 110)])

        collisions.resolve_bullet_hits(world)

        assert world.enemies == [first]
        assert world.score == 10

    def test_last_bullet_checked_first(self, settings):
        """Test that of two bullets on one enemy, the newest one is spent."""
        older = bullet_at(110, 110)
        newer = bullet_at(112, 112)
        world = make_world(settings, [enemy_at(100, 100)], [older, newer])

        collisions.resolve_bullet_hits(world)

        assert world.bullets == [older]
        assert world.enemies == []

    def test_several_hits_in_one_tick(self, settings):
        world = make_world(
            settings,
            [enemy_at(100, 100), enemy_at(200, 100), enemy_at(300, 100)],
            [bullet_at(110, 110), bullet_at(310, 110)],
        )

        assert collisions.resolve_bullet_hits(world) == 2
        assert [e.x for e in world.enemies] == [200]
        assert world.score == 20


class TestPlayerHits:
    """Test the two loss conditions."""

    def test_enemy_on_player_ends_game(self, settings):
        world = make_world(settings, [enemy_at(225, 575)])

        assert collisions.resolve_player_hits(world)
        assert world.status is GameStatus.GAME_OVER
        assert world.events == [
            StatusChanged(previous=GameStatus.RUNNING, current=GameStatus.GAME_OVER)
        ]

    def test_breach_without_overlap_ends_game(self, settings):
        """Test that reaching the player's line is enough to lose."""
        world = make_world(settings, [enemy_at(0, 560)])

        assert not intersects(world.player, world.enemies[0])
        assert collisions.resolve_player_hits(world)
        assert world.status is GameStatus.GAME_OVER

    def test_just_above_the_line_is_safe(self, settings):
        world = make_world(settings, [enemy_at(0, 559)])

        assert not collisions.resolve_player_hits(world)
        assert world.status is GameStatus.RUNNING

    def test_default_grid_is_safe(self, settings):
        world = World.create(settings)
        world.status = GameStatus.RUNNING
        assert not collisions.resolve_player_hits(world)
