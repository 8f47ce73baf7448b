"""
Tests for the input controller and the pointer adapter.
"""

import pytest

from formation_shooter.input import Direction, InputController, PointerAdapter


class RecordingSink:
    """Collects the intents a PointerAdapter sends."""

    def __init__(self):
        self.intents = {Direction.LEFT: False, Direction.RIGHT: False}
        self.shots = []

    def set_intent(self, direction, active):
        self.intents[direction] = active

    def fire(self, now):
        self.shots.append(now)


class TestInputController:
    """Test intent flags and the fire cooldown."""

    def test_intents_start_off(self):
        controller = InputController(cooldown=300)
        assert not controller.moving_left
        assert not controller.moving_right

    def test_intents_are_independent(self):
        """Test that both directions can be held at once."""
        controller = InputController(cooldown=300)
        controller.set_intent(Direction.LEFT, True)
        controller.set_intent(Direction.RIGHT, True)
        assert controller.moving_left and controller.moving_right

        controller.set_intent(Direction.LEFT, False)
        assert not controller.moving_left
        assert controller.moving_right

    def test_intent_accepts_plain_string(self):
        controller = InputController(cooldown=300)
        controller.set_intent("right", True)
        assert controller.moving_right

    @pytest.mark.parametrize(
        "second, allowed",
        [(1100, False), (1299, False), (1300, True), (2000, True)],
    )
    def test_cooldown(self, second, allowed):
        """Test that a shot within 300ms of the last one is ignored."""
        controller = InputController(cooldown=300)
        assert controller.fire(1000)
        assert controller.fire(second) is allowed

    def test_rejected_shot_does_not_restart_cooldown(self):
        controller = InputController(cooldown=300)
        controller.fire(1000)
        controller.fire(1200)
        assert controller.fire(1300)

    def test_reset(self):
        """Test that reset clears the flags and the cooldown."""
        controller = InputController(cooldown=300)
        controller.set_intent(Direction.LEFT, True)
        controller.fire(1000)

        controller.reset()

        assert not controller.moving_left
        assert controller.fire(1001)


class TestPointerAdapter:
    """Test pointer (mouse/touch) translation."""

    @pytest.fixture
    def sink(self):
        return RecordingSink()

    @pytest.fixture
    def pointer(self, sink):
        return PointerAdapter(sink, canvas_width=480, double_tap_window=300)

    def test_press_left_half(self, pointer, sink):
        pointer.press(100, now=0)
        assert sink.intents == {Direction.LEFT: True, Direction.RIGHT: False}

    def test_press_right_half(self, pointer, sink):
        pointer.press(240, now=0)
        assert sink.intents == {Direction.LEFT: False, Direction.RIGHT: True}

    def test_move_switches_direction(self, pointer, sink):
        pointer.press(100, now=0)
        pointer.move(400)
        assert sink.intents == {Direction.LEFT: False, Direction.RIGHT: True}

    def test_release_stops(self, pointer, sink):
        pointer.press(100, now=0)
        pointer.release()
        assert sink.intents == {Direction.LEFT: False, Direction.RIGHT: False}

    def test_double_tap_fires(self, pointer, sink):
        """Test that two presses within 300ms fire once."""
        pointer.press(100, now=1000)
        pointer.release()
        pointer.press(100, now=1200)
        assert sink.shots == [1200]

    def test_slow_taps_do_not_fire(self, pointer, sink):
        pointer.press(100, now=1000)
        pointer.press(100, now=1300)
        assert sink.shots == []
