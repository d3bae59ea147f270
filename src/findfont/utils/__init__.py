"""Utility functions for findfont.

- Logging setup and configuration
- Per-scan statistics for debug logging
"""

from findfont.utils.logging import ScanStats, configure_logging, get_logger

__all__ = [
    "ScanStats",
    "configure_logging",
    "get_logger",
]
