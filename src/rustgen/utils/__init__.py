"""Utility modules for rustgen.

Provides:
- logger: get_logger for logging
"""

from rustgen.utils.logger import get_logger

__all__ = [
    "get_logger",
]
