"""Interactive 2D acoustic ray casting with reflecting walls and timed sound wavefronts."""

__version__ = "0.1.0"