"""
Formation Shooter: an arcade shooter simulation with a pygame front end
"""

from formation_shooter.input import Direction, InputController, PointerAdapter
from formation_shooter.scene import RenderRect, Snapshot
from formation_shooter.settings import GameSettings
from formation_shooter.simulation import Simulation
from formation_shooter.status import GameStatus

__all__ = [
    "Direction",
    "GameSettings",
    "GameStatus",
    "InputController",
    "PointerAdapter",
    "RenderRect",
    "Simulation",
    "Snapshot",
]
