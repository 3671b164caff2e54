"""Input mapping, SOCD resolution, game modes and Melee stick limits for rectangle-style controllers."""

__version__ = "0.1.0"