"""
Utilities package for the Campus Report Engine.

Exports shared logging helpers. Keep this package free of report logic.
"""

from report_engine.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
]
