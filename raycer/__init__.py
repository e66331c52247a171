"""A top-down racing game with wheel-level vehicle physics, text maps and checkpoint zones."""

__version__ = "0.1.0"