"""Toll-road records: owners, vehicles, sensors, distances and passages, with a console menu."""

__version__ = "0.1.0"