"""Synthetic Central Florida property listings with JSON/CSV export."""

__version__ = "0.1.0"
