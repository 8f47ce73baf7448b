"""
Input handling

Device events (keys, pointer presses) are turned into a small set of intents:
move left on/off, move right on/off and fire.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from formation_shooter.utils import logger


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class InputController:
    """
    Holds the current movement intent and rate-limits firing
    """

    def __init__(self, cooldown: float):
        """
        :param cooldown: Minimum time between two shots, in ms
        :type cooldown: float
        """
        self.cooldown = cooldown
        self.moving_left = False
        self.moving_right = False
        self._last_fire: float | None = None

    def set_intent(self, direction: Direction, active: bool) -> None:
        """
        Switch one movement intent on or off. Both may be on at once.

        :param direction: Which intent
        :type direction: Direction

        :param active: New state
        :type active: bool
        """
        if Direction(direction) is Direction.LEFT:
            self.moving_left = active
        else:
            self.moving_right = active

    def fire(self, now: float) -> bool:
        """
        Ask for a shot

        :param now: Current time in ms
        :type now: float

        :return: True when the cooldown has elapsed and a bullet may spawn
        """
        if self._last_fire is not None and now - self._last_fire < self.cooldown:
            logger.debug(f"Fire ignored, cooldown ({now - self._last_fire:.0f}ms)")
            return False

        self._last_fire = now
        return True

    def reset(self) -> None:
        self.moving_left = False
        self.moving_right = False
        self._last_fire = None


class IntentSink(Protocol):
    def set_intent(self, direction: Direction, active: bool) -> None: ...

    def fire(self, now: float) -> None: ...


class PointerAdapter:
    """
    Maps a pointer (mouse or touch) to intents

    Pressing on the left half steers left, on the right half steers right,
    releasing stops. Two presses within the double tap window fire.
    """

    def __init__(self, sink: IntentSink, canvas_width: float, double_tap_window: float):
        self._sink = sink
        self._half = canvas_width / 2
        self._double_tap_window = double_tap_window
        self._last_tap: float | None = None

    def _steer(self, x: float) -> None:
        left = x < self._half
        self._sink.set_intent(Direction.LEFT, left)
        self._sink.set_intent(Direction.RIGHT, not left)

    def press(self, x: float, now: float) -> None:
        self._steer(x)

        if self._last_tap is not None and now - self._last_tap < self._double_tap_window:
            self._sink.fire(now)
        self._last_tap = now

    def move(self, x: float) -> None:
        self._steer(x)

    def release(self) -> None:
        self._sink.set_intent(Direction.LEFT, False)
        self._sink.set_intent(Direction.RIGHT, False)
