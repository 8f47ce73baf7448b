"""
Formation Shooter exceptions
"""


class FormationShooterError(Exception):
    """
    Base class for every error raised by the package
    """


class SettingsError(FormationShooterError, ValueError):
    """
    Raised when game settings cannot be loaded or are invalid
    """
