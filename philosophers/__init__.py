"""Threaded simulation of the dining philosophers problem."""

__version__ = "1.0.0"