"""Sprite atlases, animations, menu buttons, a player and orbiting bullets for a top-down survival arcade game."""

__version__ = "0.1.0"