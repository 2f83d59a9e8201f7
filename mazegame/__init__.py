"""Terminal maze game.

Generates a perfect maze sized to the hosting terminal, draws it with
box-drawing glyphs and times a single player walking from the top-left
corner to a randomly placed goal.
"""

__all__ = ["__version__"]

__version__ = "0.2.0"
