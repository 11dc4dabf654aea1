"""
Logging Infrastructure - IAppLogger implementations.
"""

from .loguru_logger import LoguruAppLogger, get_app_logger

__all__ = [
    "LoguruAppLogger",
    "get_app_logger",
]
