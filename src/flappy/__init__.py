"""Single-player Flappy Bird built on pygame."""

__version__ = "1.0.0"
