"""Utility modules for mdscan.

Provides:
- logger: get_logger for logging
"""

from mdscan.utils.logger import get_logger

__all__ = [
    "get_logger",
]
