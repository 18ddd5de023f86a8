"""Live swimming conditions for Dutch swimming spots."""

__version__ = "0.1.0"
