"""Rendering-independent game logic for a two-slime arena battle."""

__version__ = "0.1.0"