"""Automatic solver for the M×N sliding-tile puzzle."""

__version__ = "0.1.0"
