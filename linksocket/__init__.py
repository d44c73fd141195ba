"""Unreliable, unordered UDP packet sockets with a simulated link conditioner."""

__version__ = "0.1.0"