"""Output formatting for calculation results."""

from dailycal.export.formatters import format_result

__all__ = ["format_result"]
