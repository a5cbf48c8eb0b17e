"""Celidone - validation and rental lifecycle engine for a costume rental shop."""

__version__ = "0.1.0"
