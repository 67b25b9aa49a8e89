"""Touch-screen control room for a cooperative puzzle game, with a pygame window."""

__version__ = "0.1.0"