"""Greedy 2D cutting-stock planner for rectangular sheet material."""

__version__ = "1.0.0"
