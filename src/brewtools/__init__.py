"""Brewtools - HTTP tool router for the Brewit automation API."""

__version__ = "0.1.0"
