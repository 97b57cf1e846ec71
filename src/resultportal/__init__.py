"""
Resultportal: exam result lookup from published spreadsheets.

This package fetches a results sheet exported as CSV, parses it into typed
student records and locates a student by standard and roll number.
"""

from importlib.metadata import version

__version__ = version("resultportal")

__all__ = ["__version__"]
