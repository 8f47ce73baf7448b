"""Pytest fixtures for the simulation tests."""
import pytest

from formation_shooter.settings import GameSettings
from formation_shooter.simulation import Simulation


@pytest.fixture
def settings():
    """Classic 480x640 playfield."""
    return GameSettings()


@pytest.fixture
def sim(settings):
    """A simulation that has been started."""
    simulation = Simulation(settings)
    simulation.start_or_restart()
    return simulation
