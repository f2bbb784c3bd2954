"""Voter Portal — in-memory voter search over a spreadsheet."""
__version__ = "1.0.0"
