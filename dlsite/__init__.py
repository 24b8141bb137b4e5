"""Asynchronous client for DLsite product, review, circle and search data."""

__version__ = "0.2.0"