"""
Constants for the game.
"""

from __future__ import annotations

FPS = 60

CANVAS_WIDTH = 480
CANVAS_HEIGHT = 640
WINDOW_SIZE = (CANVAS_WIDTH, CANVAS_HEIGHT)

PLAYER_WIDTH = 40
PLAYER_HEIGHT = 30
PLAYER_SPEED = 5
PLAYER_BOTTOM_MARGIN = 20

ENEMY_WIDTH = 30
ENEMY_HEIGHT = 30
ENEMY_ROWS = 5
ENEMY_COLS = 8
ENEMY_PADDING = 15
ENEMY_TOP_OFFSET = 50
ENEMY_STEP = 10
ENEMY_DROP_DISTANCE = 30
ENEMY_MOVE_INTERVAL = 1000  # ms
ENEMY_MIN_MOVE_INTERVAL = 50  # ms
ENEMY_SPEED_UP = 0.8

BULLET_WIDTH = 3
BULLET_HEIGHT = 15
BULLET_SPEED = 7

SHOOT_COOLDOWN = 300  # ms
DOUBLE_TAP_WINDOW = 300  # ms

POINTS_PER_ENEMY = 10

BACKGROUND_COLOR = (0, 0, 0)
PLAYER_COLOR = "#30cfd0"
PLAYER_NOSE_COLOR = "#107d7e"
BULLET_COLOR = "white"
TEXT_COLOR = "white"
ROW_COLORS = ("#FF5252", "#FF7B52", "#FFB752", "#FFE552", "#B4FF52")
