"""Timing, statistics and record keeping for sequential and threaded array summation."""

__version__ = "0.1.0"