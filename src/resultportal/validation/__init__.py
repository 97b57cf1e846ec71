"""Results sheet validation module."""

from resultportal.validation.core import SheetValidationResult, SheetValidator
from resultportal.validation.reporter import ConsoleReporter

__all__ = ["ConsoleReporter", "SheetValidationResult", "SheetValidator"]
