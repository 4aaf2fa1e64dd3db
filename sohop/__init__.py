"""A tiny entity-component platformer with gravity, jumping and box collision."""

__version__ = "0.1.0"
__all__ = ["components", "game", "systems", "main"]