"""Decode and log DeA weather-station samples, with weather conversion and time helpers."""

__version__ = "0.1.0"