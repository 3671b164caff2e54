"""Game-specific controller modes."""

__all__ = [
    "fgc",
    "melee18",
    "melee20",
    "project_m",
    "rivals",
    "ultimate2",
    "mkwii",
    "hollow_knight",
    "shovel_knight",
    "salt_and_sanctuary",
]