"""Coursework task tracker: tasks, their deadline status, and the CSV file that stores them."""

__version__ = "0.1.0"
__all__ = ["__version__"]