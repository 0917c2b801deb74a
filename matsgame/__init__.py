"""Movement, health and camera rules for a top-down 2D space shooter."""

__version__ = "0.1.0"