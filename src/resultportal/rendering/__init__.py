"""Marksheet rendering for the console."""

from resultportal.rendering.marksheet import MarksheetRenderer, format_score

__all__ = ["MarksheetRenderer", "format_score"]
