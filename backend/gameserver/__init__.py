"""Static file server for the Gopher Arcade browser game."""

__version__ = "1.0.0"
