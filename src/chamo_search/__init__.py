"""Fuzzy search for the Chamô service marketplace."""

__version__ = "0.1.0"
