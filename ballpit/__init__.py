"""Interactive 2D ball pit: ball physics, a stepping engine and a pygame front end."""

__version__ = "0.1.0"
__all__ = ["physics", "engine", "app"]