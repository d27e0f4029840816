"""Publish locally rendered short videos from an intake queue to YouTube."""

__version__ = "0.1.0"
