"""
Game settings

Pydantic model holding every tunable of the playfield. The defaults are the
values in :mod:`formation_shooter.constants` and reproduce the classic field
exactly; a YAML file or a plain dict can override any of them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from formation_shooter import constants
from formation_shooter.exceptions import SettingsError


class GameSettings(BaseModel):
    """
    Playfield, entity and pacing configuration
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    canvas_width: int = Field(default=constants.CANVAS_WIDTH, gt=0)
    canvas_height: int = Field(default=constants.CANVAS_HEIGHT, gt=0)

    player_width: int = Field(default=constants.PLAYER_WIDTH, gt=0)
    player_height: int = Field(default=constants.PLAYER_HEIGHT, gt=0)
    player_speed: float = Field(default=constants.PLAYER_SPEED, gt=0)
    player_bottom_margin: int = Field(default=constants.PLAYER_BOTTOM_MARGIN, ge=0)

    enemy_width: int = Field(default=constants.ENEMY_WIDTH, gt=0)
    enemy_height: int = Field(default=constants.ENEMY_HEIGHT, gt=0)
    enemy_rows: int = Field(default=constants.ENEMY_ROWS, gt=0)
    enemy_cols: int = Field(default=constants.ENEMY_COLS, gt=0)
    enemy_padding: int = Field(default=constants.ENEMY_PADDING, ge=0)
    enemy_top_offset: int = Field(default=constants.ENEMY_TOP_OFFSET, ge=0)
    enemy_step: float = Field(default=constants.ENEMY_STEP, gt=0)
    enemy_drop_distance: float = Field(default=constants.ENEMY_DROP_DISTANCE, ge=0)
    move_interval: float = Field(default=constants.ENEMY_MOVE_INTERVAL, gt=0)
    min_move_interval: float = Field(default=constants.ENEMY_MIN_MOVE_INTERVAL, gt=0)
    speed_up: float = Field(default=constants.ENEMY_SPEED_UP, gt=0, le=1)

    bullet_width: int = Field(default=constants.BULLET_WIDTH, gt=0)
    bullet_height: int = Field(default=constants.BULLET_HEIGHT, gt=0)
    bullet_speed: float = Field(default=constants.BULLET_SPEED, gt=0)

    shoot_cooldown: float = Field(default=constants.SHOOT_COOLDOWN, ge=0)
    double_tap_window: float = Field(default=constants.DOUBLE_TAP_WINDOW, ge=0)
    points_per_enemy: int = Field(default=constants.POINTS_PER_ENEMY, ge=0)

    fps: int = Field(default=constants.FPS, gt=0)
    log_level: str = "INFO"

    @model_validator(mode="after")
    def check_layout(self) -> "GameSettings":
        """The grid and the player must both fit inside the canvas."""
        if self.min_move_interval > self.move_interval:
            raise ValueError("min_move_interval must not exceed move_interval")
        if self.player_width > self.canvas_width:
            raise ValueError("player is wider than the canvas")
        if self.player_y < 0:
            raise ValueError("player does not fit vertically")
        if self.grid_width > self.canvas_width:
            raise ValueError(
                f"enemy grid ({self.grid_width}px) is wider than the canvas"
            )
        return self

    @property
    def grid_width(self) -> int:
        return self.enemy_cols * (self.enemy_width + self.enemy_padding)

    @property
    def player_y(self) -> float:
        return self.canvas_height - self.player_height - self.player_bottom_margin

    @property
    def player_max_x(self) -> float:
        return self.canvas_width - self.player_width

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameSettings":
        """
        Build settings from a mapping, raising SettingsError on bad input

        :param data: Overrides keyed by field name
        :type data: dict

        :return: GameSettings
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SettingsError(f"Invalid game settings: {e}") from e

    @classmethod
    def from_yaml(cls, path: str | Path) -> "GameSettings":
        """
        Load settings from a YAML file

        :param path: Path of the YAML file
        :type path: str | Path

        :return: GameSettings
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise SettingsError(f"Cannot read settings file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise SettingsError(f"Malformed settings file {path}: {e}") from e

        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")

        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
