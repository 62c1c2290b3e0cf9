"""Solved competitive programming problems as reusable Python functions."""

__version__ = "0.1.0"