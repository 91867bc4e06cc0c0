"""A Pong game with computer opponents, multiple balls, obstacles and saved settings."""

__version__ = "1.0.0"